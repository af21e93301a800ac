"""Install, activity and match reports across all game modes."""

from functools import partial

import structlog

from app.analytics.schemas.report import DailyReportRequest
from app.analytics.services.date_range import RangeMode, parse_date_range
from app.analytics.services.metrics import MetricAggregator, format_percentage, gather_metrics
from app.core.exceptions import MissingFieldError
from app.core.schemas import ReportResponse, success_response

logger = structlog.get_logger(__name__)


def _require_date(data: DailyReportRequest) -> str:
    if not data.date:
        raise MissingFieldError("date")
    return data.date


def _require_any_date(data: DailyReportRequest, *, prefer_end_date: bool = False) -> str:
    first, second = (data.end_date, data.date) if prefer_end_date else (data.date, data.end_date)
    target = first or second
    if not target:
        fields = ("endDate", "date") if prefer_end_date else ("date", "endDate")
        raise MissingFieldError(*fields)
    return target


class DailyReportService:
    """Composes the /daily reports from MetricAggregator queries."""

    def __init__(self, aggregator: MetricAggregator) -> None:
        self.aggregator = aggregator

    async def daily_installs(self, data: DailyReportRequest) -> ReportResponse:
        date = _require_date(data)
        interval = parse_date_range(date, RangeMode.DAY)

        (installs,) = await gather_metrics(partial(self.aggregator.daily_installs, interval))

        logger.info("report_computed", report="daily_installs", date=date)
        return success_response({"no_installs": installs}, f"Daily installs for {date}")

    async def active_users(self, data: DailyReportRequest) -> ReportResponse:
        date = _require_date(data)
        interval = parse_date_range(date, RangeMode.DAY)

        (count,) = await gather_metrics(partial(self.aggregator.unique_active_users, interval))

        logger.info("report_computed", report="active_users", date=date)
        return success_response({"NO_Active_Users": count}, f"Active users on {date}")

    async def monthly_active_users(self, data: DailyReportRequest) -> ReportResponse:
        target = _require_any_date(data, prefer_end_date=True)
        interval = parse_date_range(target, RangeMode.MONTH)

        (count,) = await gather_metrics(partial(self.aggregator.unique_active_users, interval))

        logger.info("report_computed", report="monthly_active_users", date=target)
        return success_response(
            {"NO_Active_Users": count},
            f"Monthly active users up to {interval.end_day} and from {interval.start_day}",
        )

    async def daily_progress(self, data: DailyReportRequest) -> ReportResponse:
        """Share of the trailing month's active users who played on the day."""
        target = _require_any_date(data)
        day = parse_date_range(target, RangeMode.DAY)
        month = parse_date_range(target, RangeMode.MONTH)

        daily_count, monthly_count = await gather_metrics(
            partial(self.aggregator.unique_active_users, day),
            partial(self.aggregator.unique_active_users, month),
        )

        logger.info("report_computed", report="daily_progress", date=target)
        return success_response(
            {
                "dailyActiveUsers": daily_count,
                "monthlyActiveUsers": monthly_count,
                "progressPercentage": format_percentage(daily_count, monthly_count),
            },
            f"Daily progress for {target}",
        )

    async def total_matches(self, data: DailyReportRequest) -> ReportResponse:
        date = _require_date(data)
        interval = parse_date_range(date, RangeMode.DAY)

        (matches,) = await gather_metrics(partial(self.aggregator.total_matches, interval))

        logger.info("report_computed", report="total_matches", date=date)
        return success_response({"No_of_Matches": matches}, f"Total matches on {date}")

    async def player_avg_daily(self, data: DailyReportRequest) -> ReportResponse:
        date = _require_date(data)
        interval = parse_date_range(date, RangeMode.DAY)

        (average,) = await gather_metrics(partial(self.aggregator.avg_matches_per_user, interval))

        logger.info("report_computed", report="player_avg_daily", date=date)
        return success_response(
            {"averageMatchesPerUser": average}, f"Average matches per player on {date}"
        )

    async def actual_installs(self, data: DailyReportRequest) -> ReportResponse:
        date = _require_date(data)
        interval = parse_date_range(date, RangeMode.DAY)

        (count,) = await gather_metrics(partial(self.aggregator.actual_installs, interval))

        logger.info("report_computed", report="actual_installs", date=date)
        return success_response(
            {"ActualNoOfInstalls": count},
            f"Actual Installs on {interval.start_day} to {interval.end_day}",
        )

    async def daily_report(self, data: DailyReportRequest) -> ReportResponse:
        """All /daily metrics for one day in a single response.

        Day metrics share one interval; monthly active users and the
        progress percentage use the trailing month ending that day.
        """
        target = _require_any_date(data)
        day = parse_date_range(target, RangeMode.DAY)
        month = parse_date_range(target, RangeMode.MONTH)

        (
            installs,
            daily_active,
            monthly_active,
            matches,
            avg_daily,
            actual_installs,
        ) = await gather_metrics(
            partial(self.aggregator.daily_installs, day),
            partial(self.aggregator.unique_active_users, day),
            partial(self.aggregator.unique_active_users, month),
            partial(self.aggregator.total_matches, day),
            partial(self.aggregator.avg_matches_per_user, day),
            partial(self.aggregator.actual_installs, day),
        )

        logger.info("report_computed", report="daily_report", date=target)
        return success_response(
            {
                "date": target,
                "dailyNewInstalls": installs,
                "actualInstalls": actual_installs,
                "dailyActiveUsers": daily_active,
                "monthlyActiveUsers": monthly_active,
                "dailyProgress": format_percentage(daily_active, monthly_active),
                "totalMatches": matches,
                "playerAvgDaily": avg_daily,
            },
            f"Consolidated daily report for {target}",
        )

"""Install, activity and match reports across all game modes."""

from fastapi import APIRouter, Depends

from app.analytics.dependencies import get_daily_report_service
from app.analytics.schemas.report import DailyReportRequest
from app.analytics.services.daily_report_service import DailyReportService
from app.core.schemas import ReportResponse

router = APIRouter(prefix="/daily", tags=["daily-report"])


@router.post("/dailyInstalls", response_model=ReportResponse)
async def daily_installs(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    """New registrations on the given day."""
    return await service.daily_installs(data)


@router.post("/activeUsers", response_model=ReportResponse)
async def active_users(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    """Distinct players with at least one match on the given day."""
    return await service.active_users(data)


@router.post("/monthlyActiveUsers", response_model=ReportResponse)
async def monthly_active_users(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    """Distinct players over the trailing month ending on ``endDate`` (or ``date``)."""
    return await service.monthly_active_users(data)


@router.post("/dailyProgress", response_model=ReportResponse)
async def daily_progress(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    """
    Daily versus monthly active users.

    Returns:
    - Daily active users
    - Monthly active users
    - Daily users as a percentage of monthly users
    """
    return await service.daily_progress(data)


@router.post("/totalMatches", response_model=ReportResponse)
async def total_matches(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    return await service.total_matches(data)


@router.post("/playerAvgDaily", response_model=ReportResponse)
async def player_avg_daily(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    """Matches per active player on the given day."""
    return await service.player_avg_daily(data)


@router.post("/dailyReport", response_model=ReportResponse)
async def daily_report(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    """
    Consolidated daily report.

    Returns:
    - New installs and installs that led to a match
    - Daily and monthly active users with progress percentage
    - Total matches and average matches per player
    """
    return await service.daily_report(data)


@router.post("/actualInstalls", response_model=ReportResponse)
async def actual_installs(
    data: DailyReportRequest,
    service: DailyReportService = Depends(get_daily_report_service),
) -> ReportResponse:
    """Players who installed on the given day and played a match the same day."""
    return await service.actual_installs(data)

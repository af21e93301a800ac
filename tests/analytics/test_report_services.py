"""Unit tests for report composition, with the aggregator mocked out."""

from unittest.mock import MagicMock

import pytest

from app.analytics.schemas.report import DailyReportRequest, GameStatsRequest
from app.analytics.services.daily_report_service import DailyReportService
from app.analytics.services.date_range import parse_date_range
from app.analytics.services.game_stats_service import GameStatsService
from app.analytics.services.metrics import MetricAggregator
from app.core.exceptions import (
    InvalidDateFormatError,
    InvalidGameTypeError,
    MissingFieldError,
)


@pytest.fixture
def mock_aggregator():
    aggregator = MagicMock(spec=MetricAggregator)
    aggregator.game_type_matches.return_value = 10
    aggregator.game_type_unique_players.return_value = 5
    aggregator.unique_active_users.return_value = 20
    aggregator.game_type_wins.return_value = 3
    return aggregator


class TestGameStatsReport:
    async def test_derived_metrics(self, mock_aggregator):
        service = GameStatsService(mock_aggregator)

        response = await service.game_stats_report(
            GameStatsRequest(date="2023-01-01", gameType="quickPlay")
        )

        assert response.status == "success"
        assert response.message == "Consolidated game stats report for quickPlay on 2023-01-01"
        assert response.data == {
            "QuickPlay_Matches": 10,
            "QuickPlay_UniquePlayers": 5,
            "Adoption_Percentage": "25.00%",
            "Match_Per_ADU_Ratio": "0.50",
            "Match_Per_Player_Ratio": "2.00",
            "QuickPlay_WinRate": "30.00%",
            "Total_DailyActiveUsers": 20,
            "QuickPlay_Wins": 3,
        }

    async def test_queries_share_one_day_interval(self, mock_aggregator):
        service = GameStatsService(mock_aggregator)

        await service.game_stats_report(GameStatsRequest(date="01-01-2023", gameType="tieMaker"))

        day = parse_date_range("2023-01-01")
        mock_aggregator.game_type_matches.assert_called_once_with(day, "tieMaker")
        mock_aggregator.game_type_unique_players.assert_called_once_with(day, "tieMaker")
        mock_aggregator.game_type_wins.assert_called_once_with(day, "tieMaker")
        mock_aggregator.unique_active_users.assert_called_once_with(day)

    async def test_zero_denominators(self, mock_aggregator):
        mock_aggregator.game_type_matches.return_value = 0
        mock_aggregator.game_type_unique_players.return_value = 0
        mock_aggregator.unique_active_users.return_value = 0
        mock_aggregator.game_type_wins.return_value = 0
        service = GameStatsService(mock_aggregator)

        response = await service.game_stats_report(
            GameStatsRequest(date="2023-01-01", gameType="mpPublic")
        )

        assert response.data["Adoption_Percentage"] == "0.00%"
        assert response.data["Match_Per_ADU_Ratio"] == "0.00"
        assert response.data["Match_Per_Player_Ratio"] == "0.00"
        assert response.data["WinRate"] == "0.00%"


class TestGameTypeValidation:
    async def test_strict_rejects_unknown_mode(self, mock_aggregator):
        service = GameStatsService(mock_aggregator, strict=True)

        with pytest.raises(InvalidGameTypeError) as exc_info:
            await service.win_rate(GameStatsRequest(date="2023-01-01", gameType="battleRoyale"))

        assert "quickPlay" in exc_info.value.message
        assert exc_info.value.details["allowed"][0] == "quickPlay"
        mock_aggregator.game_type_wins.assert_not_called()

    async def test_permissive_uses_generic_labels(self, mock_aggregator):
        service = GameStatsService(mock_aggregator, strict=False)

        response = await service.win_rate(
            GameStatsRequest(date="2023-01-01", gameType="battleRoyale")
        )

        assert response.data == {"Wins": 3, "TotalMatches": 10, "WinRate": "30.00%"}
        assert response.message == "battleRoyale win rate on 2023-01-01"

    async def test_date_checked_before_game_type(self, mock_aggregator):
        service = GameStatsService(mock_aggregator)

        with pytest.raises(MissingFieldError, match="date is required"):
            await service.total_matches(GameStatsRequest())

    async def test_missing_game_type(self, mock_aggregator):
        service = GameStatsService(mock_aggregator)

        with pytest.raises(MissingFieldError, match="gameType is required"):
            await service.total_matches(GameStatsRequest(date="2023-01-01"))

    async def test_game_type_checked_before_date_format(self, mock_aggregator):
        service = GameStatsService(mock_aggregator)

        with pytest.raises(InvalidGameTypeError):
            await service.total_matches(GameStatsRequest(date="2023/01", gameType="nope"))


class TestDailyReportService:
    async def test_daily_report_combines_day_and_month(self, mock_aggregator):
        mock_aggregator.daily_installs.return_value = 4
        mock_aggregator.unique_active_users.side_effect = lambda interval: (
            40 if interval.start_day != interval.end_day else 10
        )
        mock_aggregator.total_matches.return_value = 25
        mock_aggregator.avg_matches_per_user.return_value = 2.5
        mock_aggregator.actual_installs.return_value = 3
        service = DailyReportService(mock_aggregator)

        response = await service.daily_report(DailyReportRequest(endDate="2023-01-31"))

        assert response.message == "Consolidated daily report for 2023-01-31"
        assert response.data == {
            "date": "2023-01-31",
            "dailyNewInstalls": 4,
            "actualInstalls": 3,
            "dailyActiveUsers": 10,
            "monthlyActiveUsers": 40,
            "dailyProgress": "25.00%",
            "totalMatches": 25,
            "playerAvgDaily": 2.5,
        }

    async def test_monthly_active_users_prefers_end_date(self, mock_aggregator):
        service = DailyReportService(mock_aggregator)

        response = await service.monthly_active_users(
            DailyReportRequest(date="2023-05-01", endDate="2023-01-31")
        )

        assert response.data == {"NO_Active_Users": 20}
        assert response.message == "Monthly active users up to 2023-01-31 and from 2022-12-31"

    async def test_daily_progress_prefers_date(self, mock_aggregator):
        mock_aggregator.unique_active_users.return_value = 0
        service = DailyReportService(mock_aggregator)

        response = await service.daily_progress(
            DailyReportRequest(date="2023-01-15", endDate="2023-01-31")
        )

        assert response.message == "Daily progress for 2023-01-15"
        assert response.data["progressPercentage"] == "0.00%"

    async def test_missing_date(self, mock_aggregator):
        service = DailyReportService(mock_aggregator)

        with pytest.raises(MissingFieldError, match="date is required"):
            await service.active_users(DailyReportRequest(endDate="2023-01-01"))

    async def test_missing_both_dates(self, mock_aggregator):
        service = DailyReportService(mock_aggregator)

        with pytest.raises(MissingFieldError, match="date or endDate is required"):
            await service.daily_report(DailyReportRequest())

    async def test_bad_format_surfaces_from_resolver(self, mock_aggregator):
        service = DailyReportService(mock_aggregator)

        with pytest.raises(InvalidDateFormatError):
            await service.total_matches(DailyReportRequest(date="2023/01"))

"""Per-game-mode reports labelled with the mode's response keys."""

from functools import partial

import structlog

from app.analytics.game_types import (
    ALLOWED_GAME_TYPES,
    GameTypeFieldProfile,
    get_field_profile,
    is_known_game_type,
)
from app.analytics.schemas.report import GameStatsRequest
from app.analytics.services.date_range import Interval, RangeMode, parse_date_range
from app.analytics.services.metrics import (
    MetricAggregator,
    format_percentage,
    format_ratio,
    gather_metrics,
)
from app.core.exceptions import InvalidGameTypeError, MissingFieldError
from app.core.schemas import ReportResponse, success_response

logger = structlog.get_logger(__name__)

TOTAL_DAU_LABEL = "Total_DailyActiveUsers"


class GameStatsService:
    """Composes the /stats reports for a single game mode.

    With ``strict`` set, modes outside ``ALLOWED_GAME_TYPES`` are rejected;
    otherwise they are reported under the generic labels.
    """

    def __init__(self, aggregator: MetricAggregator, *, strict: bool = True) -> None:
        self.aggregator = aggregator
        self.strict = strict

    def _resolve(
        self, data: GameStatsRequest
    ) -> tuple[str, str, Interval, GameTypeFieldProfile]:
        if not data.date:
            raise MissingFieldError("date")
        if not data.game_type:
            raise MissingFieldError("gameType")
        if self.strict and not is_known_game_type(data.game_type):
            raise InvalidGameTypeError(data.game_type, ALLOWED_GAME_TYPES)

        interval = parse_date_range(data.date, RangeMode.DAY)
        return data.date, data.game_type, interval, get_field_profile(data.game_type)

    async def total_matches(self, data: GameStatsRequest) -> ReportResponse:
        date, game_type, interval, fields = self._resolve(data)

        (matches,) = await gather_metrics(
            partial(self.aggregator.game_type_matches, interval, game_type)
        )

        logger.info("report_computed", report="game_total_matches", game_type=game_type)
        return success_response({fields.matches: matches}, f"{game_type} matches on {date}")

    async def unique_players(self, data: GameStatsRequest) -> ReportResponse:
        date, game_type, interval, fields = self._resolve(data)

        (players,) = await gather_metrics(
            partial(self.aggregator.game_type_unique_players, interval, game_type)
        )

        logger.info("report_computed", report="game_unique_players", game_type=game_type)
        return success_response(
            {fields.unique_players: players}, f"{game_type} unique players on {date}"
        )

    async def adoption_percentage(self, data: GameStatsRequest) -> ReportResponse:
        """Mode players as a share of everyone active that day."""
        date, game_type, interval, fields = self._resolve(data)

        game_users, total_dau = await gather_metrics(
            partial(self.aggregator.game_type_unique_players, interval, game_type),
            partial(self.aggregator.unique_active_users, interval),
        )

        logger.info("report_computed", report="game_adoption", game_type=game_type)
        return success_response(
            {
                fields.users_label: game_users,
                TOTAL_DAU_LABEL: total_dau,
                fields.adoption: format_percentage(game_users, total_dau),
            },
            f"{game_type} adoption percentage on {date}",
        )

    async def match_per_adu(self, data: GameStatsRequest) -> ReportResponse:
        date, game_type, interval, fields = self._resolve(data)

        matches, total_dau = await gather_metrics(
            partial(self.aggregator.game_type_matches, interval, game_type),
            partial(self.aggregator.unique_active_users, interval),
        )

        logger.info("report_computed", report="game_match_per_adu", game_type=game_type)
        return success_response(
            {
                fields.matches: matches,
                TOTAL_DAU_LABEL: total_dau,
                fields.match_per_adu: format_ratio(matches, total_dau),
            },
            f"{game_type} match per ADU ratio on {date}",
        )

    async def match_per_player(self, data: GameStatsRequest) -> ReportResponse:
        date, game_type, interval, fields = self._resolve(data)

        matches, players = await gather_metrics(
            partial(self.aggregator.game_type_matches, interval, game_type),
            partial(self.aggregator.game_type_unique_players, interval, game_type),
        )

        logger.info("report_computed", report="game_match_per_player", game_type=game_type)
        return success_response(
            {
                fields.matches: matches,
                fields.unique_players: players,
                fields.match_per_player: format_ratio(matches, players),
            },
            f"{game_type} match per player ratio on {date}",
        )

    async def win_rate(self, data: GameStatsRequest) -> ReportResponse:
        date, game_type, interval, fields = self._resolve(data)

        wins, matches = await gather_metrics(
            partial(self.aggregator.game_type_wins, interval, game_type),
            partial(self.aggregator.game_type_matches, interval, game_type),
        )

        logger.info("report_computed", report="game_win_rate", game_type=game_type)
        return success_response(
            {
                fields.wins: wins,
                fields.total_matches_label: matches,
                fields.win_rate: format_percentage(wins, matches),
            },
            f"{game_type} win rate on {date}",
        )

    async def game_stats_report(self, data: GameStatsRequest) -> ReportResponse:
        """Every /stats metric for one mode and day in a single response."""
        date, game_type, interval, fields = self._resolve(data)

        matches, players, total_dau, wins = await gather_metrics(
            partial(self.aggregator.game_type_matches, interval, game_type),
            partial(self.aggregator.game_type_unique_players, interval, game_type),
            partial(self.aggregator.unique_active_users, interval),
            partial(self.aggregator.game_type_wins, interval, game_type),
        )

        logger.info("report_computed", report="game_stats_report", game_type=game_type)
        return success_response(
            {
                fields.matches: matches,
                fields.unique_players: players,
                fields.adoption: format_percentage(players, total_dau),
                fields.match_per_adu: format_ratio(matches, total_dau),
                fields.match_per_player: format_ratio(matches, players),
                fields.win_rate: format_percentage(wins, matches),
                TOTAL_DAU_LABEL: total_dau,
                fields.wins: wins,
            },
            f"Consolidated game stats report for {game_type} on {date}",
        )

"""Per-game-mode statistics; every endpoint takes ``date`` and ``gameType``."""

from fastapi import APIRouter, Depends

from app.analytics.dependencies import get_game_stats_service
from app.analytics.schemas.report import GameStatsRequest
from app.analytics.services.game_stats_service import GameStatsService
from app.core.schemas import ReportResponse

router = APIRouter(prefix="/stats", tags=["game-stats"])


@router.post("/totalMatches", response_model=ReportResponse)
async def total_matches(
    data: GameStatsRequest,
    service: GameStatsService = Depends(get_game_stats_service),
) -> ReportResponse:
    return await service.total_matches(data)


@router.post("/uniquePlayers", response_model=ReportResponse)
async def unique_players(
    data: GameStatsRequest,
    service: GameStatsService = Depends(get_game_stats_service),
) -> ReportResponse:
    return await service.unique_players(data)


@router.post("/adoptionPercentage", response_model=ReportResponse)
async def adoption_percentage(
    data: GameStatsRequest,
    service: GameStatsService = Depends(get_game_stats_service),
) -> ReportResponse:
    """Mode players as a percentage of all daily active users."""
    return await service.adoption_percentage(data)


@router.post("/matchPerADU", response_model=ReportResponse)
async def match_per_adu(
    data: GameStatsRequest,
    service: GameStatsService = Depends(get_game_stats_service),
) -> ReportResponse:
    """Mode matches divided by all daily active users."""
    return await service.match_per_adu(data)


@router.post("/matchPerPlayer", response_model=ReportResponse)
async def match_per_player(
    data: GameStatsRequest,
    service: GameStatsService = Depends(get_game_stats_service),
) -> ReportResponse:
    """Mode matches divided by the mode's own unique players."""
    return await service.match_per_player(data)


@router.post("/winRate", response_model=ReportResponse)
async def win_rate(
    data: GameStatsRequest,
    service: GameStatsService = Depends(get_game_stats_service),
) -> ReportResponse:
    return await service.win_rate(data)


@router.post("/gameStatsReport", response_model=ReportResponse)
async def game_stats_report(
    data: GameStatsRequest,
    service: GameStatsService = Depends(get_game_stats_service),
) -> ReportResponse:
    """
    Consolidated report for one game mode.

    Returns:
    - Matches, unique players and wins
    - Adoption percentage and win rate
    - Match per ADU and match per player ratios
    - Total daily active users across all modes
    """
    return await service.game_stats_report(data)

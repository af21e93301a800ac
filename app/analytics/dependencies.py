from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from app.analytics.services.daily_report_service import DailyReportService
from app.analytics.services.game_stats_service import GameStatsService
from app.analytics.services.metrics import MetricAggregator
from app.core.config import settings
from app.db.session import SessionLocal


def get_session_factory() -> sessionmaker[Session]:
    """Session factory the aggregator opens per-query sessions from."""
    return SessionLocal


def get_strict_game_types() -> bool:
    return settings.STRICT_GAME_TYPES


def get_metric_aggregator(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> MetricAggregator:
    return MetricAggregator(session_factory)


def get_daily_report_service(
    aggregator: MetricAggregator = Depends(get_metric_aggregator),
) -> DailyReportService:
    return DailyReportService(aggregator)


def get_game_stats_service(
    aggregator: MetricAggregator = Depends(get_metric_aggregator),
    strict: bool = Depends(get_strict_game_types),
) -> GameStatsService:
    return GameStatsService(aggregator, strict=strict)

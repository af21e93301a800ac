"""Read-only aggregate queries over play events and registrations."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from sqlalchemy import ColumnElement, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import InstrumentedAttribute, Session, sessionmaker

from app.analytics.models.game_play import GamePlay, GamePlayParticipant
from app.analytics.models.player import Player
from app.analytics.services.date_range import Interval
from app.analytics.services.metrics.base import round_metric, safe_ratio
from app.core.exceptions import StoreUnavailableError

logger = structlog.get_logger(__name__)


def _within(column: InstrumentedAttribute[Any], interval: Interval) -> ColumnElement[bool]:
    return column.between(interval.start_date, interval.end_date)


class MetricAggregator:
    """Counts and averages for one interval, optionally scoped to a game mode.

    Every method opens its own session from ``session_factory``, so calls
    are safe to run concurrently from separate threads. Database errors
    are raised as ``StoreUnavailableError``.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory

    @contextmanager
    def _session(self, metric: str) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            logger.error("metric_query_failed", metric=metric, error=str(e))
            raise StoreUnavailableError() from e
        finally:
            db.close()

    # ============ All Modes ============

    def unique_active_users(self, interval: Interval) -> int:
        """Distinct players taking part in any match within the interval."""
        with self._session("unique_active_users") as db:
            count = (
                db.query(func.count(func.distinct(GamePlayParticipant.player_id)))
                .select_from(GamePlayParticipant)
                .join(GamePlay, GamePlayParticipant.game_play_id == GamePlay.id)
                .filter(_within(GamePlay.created_date, interval))
                .scalar()
            )
        return count or 0

    def daily_installs(self, interval: Interval) -> int:
        """Registrations created within the interval."""
        with self._session("daily_installs") as db:
            count = (
                db.query(func.count(Player.id))
                .filter(_within(Player.created_date, interval))
                .scalar()
            )
        return count or 0

    def total_matches(self, interval: Interval) -> int:
        """Matches played within the interval."""
        with self._session("total_matches") as db:
            count = (
                db.query(func.count(GamePlay.id))
                .filter(_within(GamePlay.created_date, interval))
                .scalar()
            )
        return count or 0

    def actual_installs(self, interval: Interval) -> int:
        """Distinct players who installed and played within the same interval.

        Unlike ``daily_installs`` this reads the install date carried on each
        match participant, so it only counts installs that led to a match.
        """
        with self._session("actual_installs") as db:
            count = (
                db.query(func.count(func.distinct(GamePlayParticipant.player_id)))
                .select_from(GamePlayParticipant)
                .join(GamePlay, GamePlayParticipant.game_play_id == GamePlay.id)
                .filter(
                    _within(GamePlay.created_date, interval),
                    _within(GamePlayParticipant.install_date, interval),
                )
                .scalar()
            )
        return count or 0

    def avg_matches_per_user(self, interval: Interval) -> float:
        """Matches in the interval divided by its active users, to 2 decimals.

        Returns 0 when nobody played.
        """
        matches = self.total_matches(interval)
        users = self.unique_active_users(interval)
        return round_metric(safe_ratio(matches, users))

    # ============ Single Mode ============

    def game_type_matches(self, interval: Interval, game_type: str) -> int:
        with self._session("game_type_matches") as db:
            count = (
                db.query(func.count(GamePlay.id))
                .filter(
                    _within(GamePlay.created_date, interval),
                    GamePlay.game_type == game_type,
                )
                .scalar()
            )
        return count or 0

    def game_type_unique_players(self, interval: Interval, game_type: str) -> int:
        with self._session("game_type_unique_players") as db:
            count = (
                db.query(func.count(func.distinct(GamePlayParticipant.player_id)))
                .select_from(GamePlayParticipant)
                .join(GamePlay, GamePlayParticipant.game_play_id == GamePlay.id)
                .filter(
                    _within(GamePlay.created_date, interval),
                    GamePlay.game_type == game_type,
                )
                .scalar()
            )
        return count or 0

    def game_type_wins(self, interval: Interval, game_type: str) -> int:
        """Matches of the mode won by one of their participants.

        A match is counted once for each participant row whose player_id
        equals the recorded winner.
        """
        with self._session("game_type_wins") as db:
            count = (
                db.query(func.count(GamePlayParticipant.id))
                .select_from(GamePlay)
                .join(GamePlayParticipant, GamePlayParticipant.game_play_id == GamePlay.id)
                .filter(
                    _within(GamePlay.created_date, interval),
                    GamePlay.game_type == game_type,
                    GamePlay.game_won == GamePlayParticipant.player_id,
                )
                .scalar()
            )
        return count or 0

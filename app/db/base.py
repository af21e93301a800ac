"""
Database base module - imports all models for Alembic migration detection.

While the imports appear unused, they register every table on
``Base.metadata`` so that autogenerate sees the full schema.
"""

from app.analytics.models.game_play import GamePlay, GamePlayParticipant
from app.analytics.models.player import Player
from app.db.session import Base

__all__ = [
    "Base",
    "GamePlay",
    "GamePlayParticipant",
    "Player",
]

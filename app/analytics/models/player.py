import datetime as dt
import uuid

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.session import Base


class Player(Base):
    """Account registration; one row per install."""

    __tablename__ = "players"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    player_id: Mapped[str] = mapped_column(String(128), unique=True, index=True)
    created_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), index=True)

    def __repr__(self) -> str:
        return f"<Player(player_id={self.player_id}, created={self.created_date})>"

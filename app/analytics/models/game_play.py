import datetime as dt
import uuid

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class GamePlay(Base):
    """
    One finished match or game session.

    Attributes:
        id: Unique UUID primary key
        created_date: When the match was played (UTC)
        game_type: Mode identifier, e.g. "quickPlay" or "mpPublic"
        game_won: player_id of the winning participant, if any
        participants: Players who took part; may be empty
    """

    __tablename__ = "game_plays"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    created_date: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), index=True)
    game_type: Mapped[str] = mapped_column(String(64), index=True)
    game_won: Mapped[str | None] = mapped_column(String(128), nullable=True)

    participants: Mapped[list["GamePlayParticipant"]] = relationship(
        back_populates="game_play", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<GamePlay(id={self.id}, game_type={self.game_type}, created={self.created_date})>"


class GamePlayParticipant(Base):
    __tablename__ = "game_play_participants"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    game_play_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("game_plays.id", ondelete="CASCADE"), index=True
    )
    player_id: Mapped[str] = mapped_column(String(128), index=True)
    install_date: Mapped[dt.datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    game_play: Mapped[GamePlay] = relationship(back_populates="participants")

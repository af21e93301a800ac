"""create_analytics_tables

Revision ID: 5c1e9a7d2b40
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1e9a7d2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'game_plays',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('game_type', sa.String(length=64), nullable=False),
        sa.Column('game_won', sa.String(length=128), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_game_plays_created_date'), 'game_plays', ['created_date'], unique=False)
    op.create_index(op.f('ix_game_plays_game_type'), 'game_plays', ['game_type'], unique=False)

    op.create_table(
        'game_play_participants',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('game_play_id', sa.Uuid(), nullable=False),
        sa.Column('player_id', sa.String(length=128), nullable=False),
        sa.Column('install_date', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['game_play_id'], ['game_plays.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_game_play_participants_game_play_id'), 'game_play_participants', ['game_play_id'], unique=False)
    op.create_index(op.f('ix_game_play_participants_player_id'), 'game_play_participants', ['player_id'], unique=False)

    op.create_table(
        'players',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('player_id', sa.String(length=128), nullable=False),
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_players_player_id'), 'players', ['player_id'], unique=True)
    op.create_index(op.f('ix_players_created_date'), 'players', ['created_date'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_players_created_date'), table_name='players')
    op.drop_index(op.f('ix_players_player_id'), table_name='players')
    op.drop_table('players')
    op.drop_index(op.f('ix_game_play_participants_player_id'), table_name='game_play_participants')
    op.drop_index(op.f('ix_game_play_participants_game_play_id'), table_name='game_play_participants')
    op.drop_table('game_play_participants')
    op.drop_index(op.f('ix_game_plays_game_type'), table_name='game_plays')
    op.drop_index(op.f('ix_game_plays_created_date'), table_name='game_plays')
    op.drop_table('game_plays')

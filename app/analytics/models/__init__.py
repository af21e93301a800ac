from app.analytics.models.game_play import GamePlay, GamePlayParticipant
from app.analytics.models.player import Player

__all__ = ["GamePlay", "GamePlayParticipant", "Player"]

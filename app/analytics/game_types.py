"""Game modes and the response labels each one reports under.

Clients built against the first release of the reporting API read mode
metrics under mode-specific keys (``QuickPlay_Matches``,
``TieMaker_UniquePlayers``, ...). The table below pins those keys; modes
without an entry report under ``GENERIC_PROFILE``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class GameType(str, Enum):
    """Recognized game modes, in the order they are listed to clients."""

    QUICK_PLAY = "quickPlay"
    TARGET_CHASING = "targetChasing"
    SEQUENCE_STAR = "sequenceStar"
    # Spelled as the game client sends it
    MULTI_PLAYER = "mulitiPlayer"
    TIE_MAKER = "tieMaker"
    MFL_MODE = "MFLmode"
    EVENT_MODE = "eventMode"
    IPL_GAME = "iplGame"
    LOCAL_LEGENDS = "localLegends"
    MP_PRIVATE = "mpPrivate"
    MP_PUBLIC = "mpPublic"
    VITALITY_MODE = "vitalityMode"
    WEEKLY_EVENT = "weeklyEvent"


ALLOWED_GAME_TYPES: tuple[str, ...] = tuple(game_type.value for game_type in GameType)


@dataclass(frozen=True)
class GameTypeFieldProfile:
    """Response keys for each metric of one game mode."""

    matches: str
    unique_players: str
    win_rate: str
    wins: str
    total_matches_label: str
    users_label: str
    adoption: str = "Adoption_Percentage"
    match_per_adu: str = "Match_Per_ADU_Ratio"
    match_per_player: str = "Match_Per_Player_Ratio"


GENERIC_PROFILE = GameTypeFieldProfile(
    matches="Matches",
    unique_players="UniquePlayers",
    win_rate="WinRate",
    wins="Wins",
    total_matches_label="TotalMatches",
    users_label="Users",
)

FIELD_PROFILES: Mapping[str, GameTypeFieldProfile] = MappingProxyType(
    {
        GameType.QUICK_PLAY.value: GameTypeFieldProfile(
            matches="QuickPlay_Matches",
            unique_players="QuickPlay_UniquePlayers",
            win_rate="QuickPlay_WinRate",
            wins="QuickPlay_Wins",
            total_matches_label="QuickPlay_TotalMatches",
            users_label="QuickPlay_Users",
        ),
        GameType.WEEKLY_EVENT.value: GameTypeFieldProfile(
            matches="Week_Event_Matches",
            unique_players="Week_Event_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="TotalMatches",
            users_label="WeeklyChallenge_Users",
        ),
        GameType.TARGET_CHASING.value: GameTypeFieldProfile(
            matches="TargetChasing_Matches",
            unique_players="TargetChasing_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="TargetChasing_TotalMatches",
            users_label="TargetChasing_Users",
        ),
        GameType.SEQUENCE_STAR.value: GameTypeFieldProfile(
            matches="SequenceStar_Matches",
            unique_players="SequenceStar_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="SequenceStar_TotalMatches",
            users_label="SequenceStar_Users",
        ),
        GameType.MULTI_PLAYER.value: GameTypeFieldProfile(
            matches="MulitiPlayer_Matches",
            unique_players="MulitiPlayer_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="MulitiPlayer_TotalMatches",
            users_label="MulitiPlayer_Users",
        ),
        GameType.TIE_MAKER.value: GameTypeFieldProfile(
            matches="TieMaker_Matches",
            unique_players="TieMaker_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="TieMaker_TotalMatches",
            users_label="TieMaker_Users",
        ),
        GameType.MFL_MODE.value: GameTypeFieldProfile(
            matches="MFLmode_Matches",
            unique_players="MFLmode_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="MFLmode_TotalMatches",
            users_label="MFLmode_Users",
        ),
        GameType.EVENT_MODE.value: GameTypeFieldProfile(
            matches="EventMode_Matches",
            unique_players="EventMode_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="EventMode_TotalMatches",
            users_label="EventMode_Users",
        ),
        GameType.IPL_GAME.value: GameTypeFieldProfile(
            matches="IplGame_Matches",
            unique_players="IplGame_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="IplGame_TotalMatches",
            users_label="IplGame_Users",
        ),
        GameType.LOCAL_LEGENDS.value: GameTypeFieldProfile(
            matches="LocalLegends_Matches",
            unique_players="LocalLegends_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="LocalLegends_TotalMatches",
            users_label="LocalLegends_Users",
        ),
        GameType.MP_PRIVATE.value: GameTypeFieldProfile(
            matches="MpPrivate_Matches",
            unique_players="MpPrivate_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="MpPrivate_TotalMatches",
            users_label="MpPrivate_Users",
        ),
        GameType.MP_PUBLIC.value: GameTypeFieldProfile(
            matches="MpPublic_Matches",
            unique_players="MpPublic_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="MpPublic_TotalMatches",
            users_label="MpPublic_Users",
        ),
        GameType.VITALITY_MODE.value: GameTypeFieldProfile(
            matches="VitalityMode_Matches",
            unique_players="VitalityMode_UniquePlayers",
            win_rate="WinRate",
            wins="Wins",
            total_matches_label="VitalityMode_TotalMatches",
            users_label="VitalityMode_Users",
        ),
    }
)


def get_field_profile(game_type: str) -> GameTypeFieldProfile:
    """Labels for ``game_type``; unknown modes get ``GENERIC_PROFILE``."""
    return FIELD_PROFILES.get(game_type, GENERIC_PROFILE)


def is_known_game_type(game_type: str) -> bool:
    return game_type in ALLOWED_GAME_TYPES

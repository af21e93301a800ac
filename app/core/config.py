from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str

    PROJECT_NAME: str = "Game Analytics Reporting API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # "json" or "console"; empty picks console when DEBUG is on
    LOG_FORMAT: str = ""

    # Mounted in front of /daily and /stats, e.g. "/api/v1"
    API_PREFIX: str = ""

    # Reject gameType values outside the known modes instead of
    # reporting them under the generic labels
    STRICT_GAME_TYPES: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()

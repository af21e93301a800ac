"""Request bodies for the reporting endpoints."""

from pydantic import BaseModel, Field


class DailyReportRequest(BaseModel):
    """Body for /daily endpoints.

    Month-scoped reports accept ``endDate`` as an alternative to ``date``.
    Missing values are reported as MISSING_FIELD by the services rather
    than as schema errors.
    """

    date: str | None = Field(None, description="DD-MM-YYYY or YYYY-MM-DD")
    end_date: str | None = Field(None, alias="endDate", description="Same formats as date")

    class Config:
        populate_by_name = True


class GameStatsRequest(BaseModel):
    """Body for /stats endpoints."""

    date: str | None = Field(None, description="DD-MM-YYYY or YYYY-MM-DD")
    game_type: str | None = Field(None, alias="gameType", description="Game mode identifier")

    class Config:
        populate_by_name = True

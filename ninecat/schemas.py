"""Pydantic schemas for JSON data validation."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from .constants import DEFAULT_TIMEZONE, PERIODS

# Category id -> value, as stored in JSON ({"12": 24.5, ...})
StatLineData = dict[int, float]


class TeamRecord(BaseModel):
    """Fantasy team metadata and standings."""

    key: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    rank: int = Field(..., ge=1)
    wins: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    ties: int = Field(default=0, ge=0)

    class Config:
        extra = 'forbid'


class RosterSlot(BaseModel):
    """A player in a team's selected roster slot."""

    player_key: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)

    class Config:
        extra = 'forbid'


class Ownership(BaseModel):
    """Ownership status of a player."""

    type: str = Field(default='freeagents', pattern=r'^(freeagents|waivers|team)$')
    owner_team_key: str | None = None
    waiver_date: date | None = None

    class Config:
        extra = 'forbid'


class PlayerRecord(BaseModel):
    """NBA player with per-period stat averages."""

    key: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    display_position: str = ''
    ownership: Ownership = Field(default_factory=Ownership)
    stats: dict[str, StatLineData] = Field(default_factory=dict)

    @field_validator('stats')
    @classmethod
    def validate_periods(cls, v):
        """Ensure stat periods are season, week or month."""
        for period in v:
            if period not in PERIODS:
                raise ValueError(f'Invalid stats period: {period}')
        return v

    class Config:
        extra = 'forbid'


class ScheduledMatchup(BaseModel):
    """One week's pairing in the league schedule."""

    week: int = Field(..., ge=1, le=30)
    team_a: str
    team_b: str
    status: str = Field(default='preevent', pattern=r'^(preevent|midevent|postevent)$')
    winner_team_key: str | None = None
    is_tied: bool = False

    class Config:
        extra = 'forbid'


class LeagueSnapshot(BaseModel):
    """Complete league snapshot file structure."""

    league_key: str = Field(..., min_length=1)
    name: str = ''
    current_week: int = Field(..., ge=1, le=30)
    teams: list[TeamRecord]
    weekly_stats: dict[int, dict[str, StatLineData]] = Field(default_factory=dict)
    rosters: dict[str, list[RosterSlot]] = Field(default_factory=dict)
    players: list[PlayerRecord] = Field(default_factory=list)
    schedule: list[ScheduledMatchup] = Field(default_factory=list)
    daily_stats: dict[str, dict[str, StatLineData]] = Field(default_factory=dict)

    @field_validator('daily_stats')
    @classmethod
    def validate_dates(cls, v):
        """Ensure daily stat keys are YYYY-MM-DD dates."""
        for day in v:
            try:
                date.fromisoformat(day)
            except ValueError:
                raise ValueError(f'Invalid date: {day}') from None
        return v

    class Config:
        extra = 'forbid'


class BotConfig(BaseModel):
    """Bot configuration settings."""

    league_key: str = Field(..., min_length=1)
    snapshot_path: str = Field(..., min_length=1)
    free_agent_count: int = Field(default=5, ge=1, le=25)
    leader_count: int = Field(default=5, ge=1, le=25)
    timezone: str = DEFAULT_TIMEZONE
    webhook_url: str | None = None

    class Config:
        extra = 'forbid'

"""Read interface the bot needs from a fantasy league data source."""

from typing import Optional, Protocol

from .models import (
    FreeAgent,
    LeaderEntry,
    Matchup,
    PlayerOwnership,
    PlayerStats,
    Roster,
    StandingsEntry,
    Team,
    TeamSchedule,
)


class LeagueSource(Protocol):
    """
    Blocking read operations against a fantasy league.

    Team arguments accept a team name or team key. Every method may raise
    DataSourceError; name lookups raise TeamNotFound or PlayerNotFound.
    A week of None means the league's current week.
    """

    def get_scoreboard(self, league_key: str, week: Optional[int] = None) -> list[Matchup]: ...

    def get_standings(self, league_key: str) -> list[StandingsEntry]: ...

    def get_roster(self, league_key: str, team_name: str) -> Roster: ...

    def get_player_stats(self, league_key: str, player_name: str, period: str) -> PlayerStats: ...

    def get_team_stats(self, league_key: str, week: Optional[int] = None) -> list[Team]: ...

    def get_free_agents_ranked_by_stat(
        self, league_key: str, category_id: int, top_n: int, period: str
    ) -> list[FreeAgent]: ...

    def get_player_ownership(self, league_key: str, player_name: str) -> PlayerOwnership: ...

    def get_team_schedule(self, league_key: str, team_name: str) -> TeamSchedule: ...

    def get_stat_leaders(
        self, league_key: str, day: str, category_id: int, top_n: int
    ) -> list[LeaderEntry]: ...

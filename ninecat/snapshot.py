"""League data source backed by a JSON snapshot file."""

import json
import logging
from pathlib import Path
from typing import Optional

import polars as pl

from .categories import NBA_9CAT, CategoryTable
from .errors import DataSourceError, PlayerNotFound, TeamNotFound
from .matchup import evaluate
from .models import (
    FreeAgent,
    LeaderEntry,
    Matchup,
    PlayerOwnership,
    PlayerStats,
    Roster,
    RosterEntry,
    ScheduleEntry,
    StandingsEntry,
    Team,
    TeamSchedule,
)
from .schemas import LeagueSnapshot, PlayerRecord, TeamRecord
from .utils import load_json, match_name
from .validators import validate_snapshot

logger = logging.getLogger('ninecat.snapshot')

OWNERSHIP_STATUS = {
    'freeagents': 'freeagent',
    'waivers': 'waivers',
    'team': 'owned',
}

SCHEDULE_STATUS = {
    'midevent': 'in_progress',
    'preevent': 'not_started',
}


class SnapshotSource:
    """Serves league reads from a validated LeagueSnapshot, loaded on first use."""

    def __init__(self, path: Path | str, categories: CategoryTable = NBA_9CAT):
        self.path = Path(path)
        self.categories = categories
        self._snapshot: Optional[LeagueSnapshot] = None

    @classmethod
    def from_snapshot(cls, snapshot: LeagueSnapshot, categories: CategoryTable = NBA_9CAT) -> 'SnapshotSource':
        source = cls('<memory>', categories)
        source._snapshot = snapshot
        return source

    @property
    def snapshot(self) -> LeagueSnapshot:
        """Lazy load and validate the snapshot file."""
        if self._snapshot is None:
            logger.info(f'Loading league snapshot from {self.path}...')
            try:
                snapshot = load_json(self.path, schema=LeagueSnapshot)
            except (FileNotFoundError, json.JSONDecodeError, ValueError) as e:
                raise DataSourceError(f'could not load league snapshot: {e}') from e
            for problem in validate_snapshot(snapshot, self.categories):
                logger.warning(problem)
            self._snapshot = snapshot
        return self._snapshot

    def _league(self, league_key: str) -> LeagueSnapshot:
        snapshot = self.snapshot
        if league_key != snapshot.league_key:
            raise DataSourceError(f'league {league_key} not found')
        return snapshot

    def _find_team(self, snapshot: LeagueSnapshot, name: str) -> TeamRecord:
        """Resolve a team by key or exact name, ignoring case."""
        wanted = name.strip().lower()
        for team in snapshot.teams:
            if wanted in (team.key.lower(), team.name.lower()):
                return team
        raise TeamNotFound(name.strip())

    def _find_player(self, snapshot: LeagueSnapshot, name: str) -> PlayerRecord:
        player = match_name(name, snapshot.players, lambda p: p.name)
        if player is None:
            raise PlayerNotFound(name.strip())
        return player

    def _team_name(self, snapshot: LeagueSnapshot, key: str) -> str:
        return next((t.name for t in snapshot.teams if t.key == key), key)

    def _week_stats(self, snapshot: LeagueSnapshot, week: Optional[int]) -> tuple[int, dict]:
        week = week or snapshot.current_week
        if week not in snapshot.weekly_stats:
            raise DataSourceError(f'no team stats for week {week}')
        return week, snapshot.weekly_stats[week]

    def get_scoreboard(self, league_key: str, week: Optional[int] = None) -> list[Matchup]:
        snapshot = self._league(league_key)
        week, stats = self._week_stats(snapshot, week)
        pairings = [m for m in snapshot.schedule if m.week == week]
        if not pairings:
            raise DataSourceError(f'no matchups for week {week}')

        scored = self.categories.scored()
        matchups = []
        for pairing in pairings:
            team_a = Team(self._team_name(snapshot, pairing.team_a), pairing.team_a, stats.get(pairing.team_a, {}))
            team_b = Team(self._team_name(snapshot, pairing.team_b), pairing.team_b, stats.get(pairing.team_b, {}))
            outcome = evaluate(team_a, team_b, scored)
            winners: dict[int, Optional[str]] = {}
            for category in scored:
                if category.id in outcome.won:
                    winners[category.id] = team_a.key
                elif category.id in outcome.lost:
                    winners[category.id] = team_b.key
                else:
                    winners[category.id] = None
            matchups.append(Matchup(week=week, team_a=team_a, team_b=team_b, stat_winners=winners))
        return matchups

    def get_standings(self, league_key: str) -> list[StandingsEntry]:
        snapshot = self._league(league_key)
        return [
            StandingsEntry(team.name, team.rank, team.wins, team.losses, team.ties)
            for team in sorted(snapshot.teams, key=lambda t: t.rank)
        ]

    def get_roster(self, league_key: str, team_name: str) -> Roster:
        snapshot = self._league(league_key)
        team = self._find_team(snapshot, team_name)
        names = {p.key: p.name for p in snapshot.players}
        return Roster(
            team_name=team.name,
            players=[
                RosterEntry(names.get(slot.player_key, slot.player_key), slot.position)
                for slot in snapshot.rosters.get(team.key, [])
            ],
        )

    def get_player_stats(self, league_key: str, player_name: str, period: str) -> PlayerStats:
        snapshot = self._league(league_key)
        player = self._find_player(snapshot, player_name)
        if period not in player.stats:
            raise DataSourceError(f'no {period} stats for {player.name}')
        return PlayerStats(player.name, period, dict(player.stats[period]))

    def get_team_stats(self, league_key: str, week: Optional[int] = None) -> list[Team]:
        snapshot = self._league(league_key)
        _week, stats = self._week_stats(snapshot, week)
        return [
            Team(team.name, team.key, dict(stats[team.key]))
            for team in snapshot.teams
            if team.key in stats
        ]

    def get_free_agents_ranked_by_stat(
        self, league_key: str, category_id: int, top_n: int, period: str
    ) -> list[FreeAgent]:
        """Top free agents by raw value for one category, highest first."""
        snapshot = self._league(league_key)
        rows = [
            (player.name, player.stats[period][category_id])
            for player in snapshot.players
            if player.ownership.type == 'freeagents'
            and category_id in player.stats.get(period, {})
        ]
        df = pl.DataFrame(rows, schema={'player_name': pl.Utf8, 'value': pl.Float64}, orient='row')
        ranked = df.sort('value', descending=True, maintain_order=True).head(top_n)
        return [FreeAgent(**row) for row in ranked.iter_rows(named=True)]

    def get_player_ownership(self, league_key: str, player_name: str) -> PlayerOwnership:
        snapshot = self._league(league_key)
        player = self._find_player(snapshot, player_name)
        ownership = player.ownership
        owner = self._team_name(snapshot, ownership.owner_team_key) if ownership.owner_team_key else None
        return PlayerOwnership(
            player_name=player.name,
            status=OWNERSHIP_STATUS[ownership.type],
            owner_team_name=owner,
            waiver_release_date=ownership.waiver_date,
        )

    def get_team_schedule(self, league_key: str, team_name: str) -> TeamSchedule:
        snapshot = self._league(league_key)
        team = self._find_team(snapshot, team_name)
        entries = []
        for matchup in sorted(snapshot.schedule, key=lambda m: m.week):
            if team.key not in (matchup.team_a, matchup.team_b):
                continue
            opponent_key = matchup.team_b if matchup.team_a == team.key else matchup.team_a
            if matchup.status == 'postevent':
                if matchup.is_tied:
                    result = 'tie'
                elif matchup.winner_team_key == team.key:
                    result = 'win'
                else:
                    result = 'loss'
            else:
                result = SCHEDULE_STATUS[matchup.status]
            entries.append(ScheduleEntry(matchup.week, self._team_name(snapshot, opponent_key), result))
        return TeamSchedule(team_name=team.name, entries=entries)

    def get_stat_leaders(
        self, league_key: str, day: str, category_id: int, top_n: int
    ) -> list[LeaderEntry]:
        """Top players league-wide for one category on one day, highest first."""
        snapshot = self._league(league_key)
        if day not in snapshot.daily_stats:
            raise DataSourceError(f'no stats for {day}')
        players = {p.key: p for p in snapshot.players}
        rows = []
        for player_key, stat_line in snapshot.daily_stats[day].items():
            if category_id not in stat_line:
                continue
            player = players.get(player_key)
            name = player.name if player else player_key
            position = player.display_position if player else ''
            rows.append((name, position, stat_line[category_id]))
        df = pl.DataFrame(
            rows,
            schema={'player_name': pl.Utf8, 'position': pl.Utf8, 'value': pl.Float64},
            orient='row',
        )
        ranked = df.sort('value', descending=True, maintain_order=True).head(top_n)
        return [LeaderEntry(**row) for row in ranked.iter_rows(named=True)]

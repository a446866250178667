"""Data models for the ninecat bot."""

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping, Optional

# Category id -> value
StatLine = Mapping[int, float]


@dataclass(frozen=True)
class Category:
    """A single fantasy stat category."""
    id: int
    name: str
    inverted: bool = False  # lower is better (turnovers)
    scored: bool = True  # False for informational stats like FGM/FGA
    percentage: bool = False
    aliases: tuple[str, ...] = ()


@dataclass
class Team:
    """A fantasy team and its stat line for one period."""
    name: str
    key: str
    stat_line: StatLine = field(default_factory=dict)


@dataclass(frozen=True)
class MatchupOutcome:
    """Per-category result of one team against another."""
    subject: Team
    opponent: Team
    won: frozenset[int] = frozenset()
    lost: frozenset[int] = frozenset()
    tied: frozenset[int] = frozenset()


@dataclass
class Matchup:
    """A scheduled head-to-head matchup with per-category winners."""
    week: int
    team_a: Team
    team_b: Team
    stat_winners: dict[int, Optional[str]] = field(default_factory=dict)
    # stat_winners[category_id] = winning team key, None on a tie


@dataclass
class StandingsEntry:
    team_name: str
    rank: int
    wins: int
    losses: int
    ties: int


@dataclass
class RosterEntry:
    player_name: str
    position: str  # selected roster slot, e.g. 'PG' or 'BN'


@dataclass
class Roster:
    team_name: str
    players: list[RosterEntry] = field(default_factory=list)


@dataclass
class PlayerStats:
    """A player's stat line for a period."""
    player_name: str
    period: str
    stat_line: StatLine = field(default_factory=dict)


@dataclass
class FreeAgent:
    player_name: str
    value: float


@dataclass
class LeaderEntry:
    player_name: str
    position: str
    value: float


@dataclass
class PlayerOwnership:
    """Who holds a player: a team, waivers or nobody."""
    player_name: str
    status: str  # 'freeagent', 'waivers' or 'owned'
    owner_team_name: Optional[str] = None
    waiver_release_date: Optional[date] = None


@dataclass
class ScheduleEntry:
    week: int
    opponent: str
    result: str  # 'win', 'loss', 'tie', 'in_progress' or 'not_started'


@dataclass
class TeamSchedule:
    team_name: str
    entries: list[ScheduleEntry] = field(default_factory=list)


@dataclass
class CommandInvocation:
    """Arguments parsed from one chat message."""
    command: str
    positional_args: list[str] = field(default_factory=list)
    tail_args: list[str] = field(default_factory=list)

    @property
    def args(self) -> list[str]:
        return self.positional_args + self.tail_args


@dataclass
class HelpDocument:
    """Rich help listing, sent as an embed where the transport supports it."""
    title: str
    description: str
    fields: list[tuple[str, str]] = field(default_factory=list)

    def to_embed(self) -> dict:
        return {
            'title': self.title,
            'description': self.description,
            'fields': [{'name': name, 'value': value} for name, value in self.fields],
        }

    def to_text(self) -> str:
        lines = [self.title, self.description, '']
        for name, value in self.fields:
            lines.append(f'{name}\n    {value}')
        return '\n'.join(lines)

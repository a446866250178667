"""Chat command parsing and dispatch."""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Callable, Optional, Sequence
from zoneinfo import ZoneInfo

from .categories import NBA_9CAT, CategoryTable
from .constants import COMMAND_PREFIX, DEFAULT_TIMEZONE, PERIODS
from .errors import CategoryNotPresent, InvalidPeriod, NinecatError, TeamNotFound, UsageError
from .formatting import (
    format_error,
    format_free_agents,
    format_head_to_head,
    format_leaders,
    format_ownership,
    format_player_stats,
    format_rankings,
    format_roster,
    format_schedule,
    format_scoreboard,
    format_standings,
    format_stats_diff,
    format_vs_league,
    help_document,
    usage_error,
)
from .matchup import aggregate_one_vs_many, evaluate, rank_teams_by_category
from .models import CommandInvocation, HelpDocument, Team
from .schemas import BotConfig
from .source import LeagueSource
from .tokenizer import NO_TAIL, tokenize
from .transport import Transport

logger = logging.getLogger('ninecat.commands')

Reply = str | HelpDocument


@dataclass(frozen=True)
class CommandShape:
    """How a command's arguments are tokenized and how many it takes."""
    tail_index: int = NO_TAIL
    separator: str = ''
    min_arity: int = 0
    max_arity: Optional[int] = None


class Command(Enum):
    """Recognized chat commands and their argument shapes."""

    SCOREBOARD = ('scoreboard', CommandShape(NO_TAIL, '', 0, 1))
    STANDINGS = ('standings', CommandShape(NO_TAIL, '', 0, 0))
    ROSTER = ('roster', CommandShape(0, '', 1, 1))
    STATS = ('stats', CommandShape(1, '', 2, 2))
    COMPARE = ('compare', CommandShape(1, '/', 3, 3))
    ANALYZE = ('analyze', CommandShape(1, ',', 2))
    VS = ('vs', CommandShape(NO_TAIL, '', 1))
    SCHEDULE = ('schedule', CommandShape(0, '', 1, 1))
    OWNER = ('owner', CommandShape(0, ',', 1))
    H2H = ('h2h', CommandShape(NO_TAIL, '', 1))
    RANKS = ('ranks', CommandShape(NO_TAIL, '', 1, 2))
    LEADERS = ('leaders', CommandShape(NO_TAIL, '', 0, 1))
    HELP = ('help', CommandShape(NO_TAIL, '', 0, 0))

    def __init__(self, keyword: str, shape: CommandShape):
        self.keyword = keyword
        self.shape = shape

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional['Command']:
        return _BY_KEYWORD.get(keyword.lower())


_BY_KEYWORD = {command.keyword: command for command in Command}


def parse_command(text: str) -> Optional[CommandInvocation]:
    """
    Turn a chat message into a CommandInvocation.

    Returns None for messages that are not a recognized command.
    """
    message = text.strip()
    if not message.startswith(COMMAND_PREFIX):
        return None

    first = message.split(maxsplit=1)[0]
    command = Command.from_keyword(first[len(COMMAND_PREFIX):])
    if command is None:
        return None

    shape = command.shape
    args = tokenize(first, message, shape.tail_index, shape.separator)
    if shape.tail_index == NO_TAIL:
        positional, tail = args, []
    else:
        positional, tail = args[:shape.tail_index], args[shape.tail_index:]
    return CommandInvocation(command=command.keyword, positional_args=positional, tail_args=tail)


def check_arity(invocation: CommandInvocation) -> None:
    """Raise UsageError when an invocation has too few, too many or empty arguments."""
    shape = Command.from_keyword(invocation.command).shape
    args = invocation.args
    if any(not arg.strip() for arg in args):
        raise UsageError(invocation.command)
    if len(args) < shape.min_arity:
        raise UsageError(invocation.command)
    if shape.max_arity is not None and len(args) > shape.max_arity:
        raise UsageError(invocation.command)


def find_team(teams: Sequence[Team], name: str) -> Team:
    """Find a team from a data source listing by key or name, ignoring case."""
    wanted = name.strip().lower()
    for team in teams:
        if team.key.lower() == wanted or team.name.lower() == wanted:
            return team
    raise TeamNotFound(name.strip())


class CommandDispatcher:
    """
    Routes chat messages to the league data source and formats the reply.

    Holds no state between messages; every recognized command produces
    exactly one reply, including on failure.
    """

    def __init__(
        self,
        source: LeagueSource,
        league_key: str,
        transport: Optional[Transport] = None,
        categories: CategoryTable = NBA_9CAT,
        free_agent_count: int = 5,
        leader_count: int = 5,
        timezone: str = DEFAULT_TIMEZONE,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.source = source
        self.league_key = league_key
        self.transport = transport
        self.categories = categories
        self.free_agent_count = free_agent_count
        self.leader_count = leader_count
        self.timezone = timezone
        self.clock = clock or (lambda: datetime.now(ZoneInfo(timezone)))
        self._handlers: dict[Command, Callable[[list[str]], Reply]] = {
            Command.SCOREBOARD: self._scoreboard,
            Command.STANDINGS: self._standings,
            Command.ROSTER: self._roster,
            Command.STATS: self._stats,
            Command.COMPARE: self._compare,
            Command.ANALYZE: self._analyze,
            Command.VS: self._vs,
            Command.SCHEDULE: self._schedule,
            Command.OWNER: self._owner,
            Command.H2H: self._h2h,
            Command.RANKS: self._ranks,
            Command.LEADERS: self._leaders,
            Command.HELP: self._help,
        }
        missing = set(Command) - set(self._handlers)
        if missing:
            raise RuntimeError(f'No handler for commands: {sorted(c.keyword for c in missing)}')

    @classmethod
    def from_config(
        cls, config: BotConfig, source: LeagueSource, transport: Optional[Transport] = None
    ) -> 'CommandDispatcher':
        return cls(
            source,
            config.league_key,
            transport=transport,
            free_agent_count=config.free_agent_count,
            leader_count=config.leader_count,
            timezone=config.timezone,
        )

    def on_text_message(self, sender_is_self: bool, channel, text: str) -> None:
        """Transport callback: handle one message and send the reply, if any."""
        if sender_is_self:
            return
        reply = self.handle(text)
        if reply is None:
            return
        if self.transport is None:
            raise RuntimeError('CommandDispatcher has no transport to reply with')
        if isinstance(reply, HelpDocument):
            self.transport.send_rich_document(channel, reply)
        else:
            self.transport.send_text(channel, reply)

    def handle(self, text: str) -> Optional[Reply]:
        """
        Handle one chat message.

        Returns:
            The reply text (or HelpDocument for !help), or None when the
            message is not a recognized command
        """
        invocation = parse_command(text)
        if invocation is None:
            return None

        command = Command.from_keyword(invocation.command)
        logger.info(f'!{command.keyword} {invocation.args}')
        try:
            check_arity(invocation)
            return self._handlers[command](invocation.args)
        except UsageError as e:
            logger.info(f'Usage error for !{e.command}: {invocation.args}')
            return usage_error(e.command)
        except NinecatError as e:
            logger.warning(f'!{command.keyword} failed: {e}')
            return format_error(e)
        except Exception as e:
            logger.exception(f'Unexpected error handling !{command.keyword}')
            return format_error(e)

    # Argument helpers

    def _period(self, value: str) -> str:
        period = value.strip().lower()
        if period not in PERIODS:
            raise InvalidPeriod(value.strip())
        return period

    def _split_week(self, command: Command, args: list[str]) -> tuple[Optional[int], list[str]]:
        """Take an optional leading week number (plain digits only) off the argument list."""
        if not (args[0].isascii() and args[0].isdigit()):
            return None, args
        week = int(args[0])
        if week < 1:
            raise UsageError(command.keyword)
        return week, args[1:]

    def _day(self, value: Optional[str]) -> str:
        today = self.clock().date()
        if value is None:
            return today.isoformat()
        if value.lower() == 'yesterday':
            return (today - timedelta(days=1)).isoformat()
        try:
            return date.fromisoformat(value).isoformat()
        except ValueError:
            raise UsageError(Command.LEADERS.keyword) from None

    # Handlers

    def _scoreboard(self, args: list[str]) -> Reply:
        week = None
        if args:
            week, rest = self._split_week(Command.SCOREBOARD, args)
            if week is None or rest:
                raise UsageError(Command.SCOREBOARD.keyword)
        return format_scoreboard(self.source.get_scoreboard(self.league_key, week))

    def _standings(self, args: list[str]) -> Reply:
        return format_standings(self.source.get_standings(self.league_key))

    def _roster(self, args: list[str]) -> Reply:
        return format_roster(self.source.get_roster(self.league_key, args[0].strip()))

    def _stats(self, args: list[str]) -> Reply:
        period = self._period(args[0])
        stats = self.source.get_player_stats(self.league_key, args[1].strip(), period)
        return format_player_stats(stats, self.categories)

    def _compare(self, args: list[str]) -> Reply:
        period = self._period(args[0])
        stats_a = self.source.get_player_stats(self.league_key, args[1].strip(), period)
        stats_b = self.source.get_player_stats(self.league_key, args[2].strip(), period)

        diffs = {}
        for category in self.categories.scored():
            for stats in (stats_a, stats_b):
                if category.id not in stats.stat_line:
                    raise CategoryNotPresent(category.id, stats.player_name)
            diffs[category.id] = float(stats_a.stat_line[category.id]) - float(stats_b.stat_line[category.id])
        return format_stats_diff(stats_a.player_name, stats_b.player_name, diffs, self.categories)

    def _analyze(self, args: list[str]) -> Reply:
        period = self._period(args[0])
        # Resolve every stat before fetching anything
        categories = [self.categories.by_name(name) for name in args[1:]]
        free_agents = {}
        for category in categories:
            if category in free_agents:
                continue
            free_agents[category] = self.source.get_free_agents_ranked_by_stat(
                self.league_key, category.id, self.free_agent_count, period
            )
        return format_free_agents(free_agents)

    def _vs(self, args: list[str]) -> Reply:
        week, rest = self._split_week(Command.VS, args)
        team_name = ' '.join(rest)
        if not team_name:
            raise UsageError(Command.VS.keyword)
        teams = self.source.get_team_stats(self.league_key, week)
        subject = find_team(teams, team_name)
        outcomes = aggregate_one_vs_many(subject, teams, self.categories.scored())
        return format_vs_league(subject.name, outcomes)

    def _schedule(self, args: list[str]) -> Reply:
        return format_schedule(self.source.get_team_schedule(self.league_key, args[0].strip()))

    def _owner(self, args: list[str]) -> Reply:
        owners = [self.source.get_player_ownership(self.league_key, name.strip()) for name in args]
        return format_ownership(owners)

    def _h2h(self, args: list[str]) -> Reply:
        week, rest = self._split_week(Command.H2H, args)
        names = [name.strip() for name in ' '.join(rest).split('/')]
        if len(names) != 2 or not all(names):
            raise UsageError(Command.H2H.keyword)
        teams = self.source.get_team_stats(self.league_key, week)
        team_a = find_team(teams, names[0])
        team_b = find_team(teams, names[1])
        return format_head_to_head(evaluate(team_a, team_b, self.categories.scored()), self.categories)

    def _ranks(self, args: list[str]) -> Reply:
        week = None
        if len(args) == 2:
            week, rest = self._split_week(Command.RANKS, args)
            if week is None:
                raise UsageError(Command.RANKS.keyword)
            args = rest
        category = self.categories.by_name(args[0])
        teams = self.source.get_team_stats(self.league_key, week)
        return format_rankings(rank_teams_by_category(teams, category), category, week)

    def _leaders(self, args: list[str]) -> Reply:
        day = self._day(args[0] if args else None)
        leaders = {
            category: self.source.get_stat_leaders(self.league_key, day, category.id, self.leader_count)
            for category in self.categories.scored()
        }
        return format_leaders(day, leaders)

    def _help(self, args: list[str]) -> Reply:
        return help_document()

"""Text rendering for chat replies.

Every report is returned as a single fenced code block so chat clients keep
the fixed-width alignment.
"""

import logging
from typing import Iterable, Mapping, Sequence

from .categories import NBA_9CAT, CategoryTable
from .constants import PERIODS, POSITION_SLOTS
from .matchup import overall_record
from .models import (
    Category,
    FreeAgent,
    HelpDocument,
    LeaderEntry,
    Matchup,
    MatchupOutcome,
    PlayerOwnership,
    PlayerStats,
    Roster,
    StandingsEntry,
    Team,
    TeamSchedule,
)

logger = logging.getLogger('ninecat.formatting')

FENCE = '```'

SCHEDULE_MARKS = {'win': 'W', 'loss': 'L', 'tie': 'T'}


def _block(lines: Iterable[str]) -> str:
    return FENCE + '\n' + '\n'.join(lines) + FENCE


def _header(title: str) -> list[str]:
    return [title, '-' * len(title)]


def format_stat(category: Category, value: float) -> str:
    """Render a stat value: 3 decimals for percentages, whole numbers bare, else 1 decimal."""
    value = float(value)
    if category.percentage:
        return f'{value:.3f}'
    if value.is_integer():
        return str(int(value))
    return f'{value:.1f}'


def format_error(error) -> str:
    """Wrap an error message in the standard error block."""
    return f'{FENCE}\nError: {error}{FENCE}'


def usage_error(command: str) -> str:
    """One-line usage hint for a command invoked with bad arguments."""
    return f'Error: invalid !{command} usage. See !help for usage.'


def format_scoreboard(matchups: Sequence[Matchup]) -> str:
    """Render a week's matchups with the number of categories each side leads."""
    if not matchups:
        return _block(['No matchups'])

    lines = _header(f'Week {matchups[0].week} Matchups')
    for matchup in matchups:
        score = {matchup.team_a.key: 0, matchup.team_b.key: 0}
        for winner in matchup.stat_winners.values():
            if winner in score:
                score[winner] += 1
        lines.append(f'{matchup.team_a.name} ({score[matchup.team_a.key]})')
        lines.append(f'{matchup.team_b.name} ({score[matchup.team_b.key]})')
        lines.append('')
    return _block(lines)


def format_standings(entries: Sequence[StandingsEntry]) -> str:
    lines = _header('Standings')
    for entry in entries:
        lines.append(
            f'{entry.rank:2d}: {entry.team_name} ({entry.wins}-{entry.losses}-{entry.ties})'
        )
    return _block(lines)


def format_roster(roster: Roster, slots: Sequence[str] = POSITION_SLOTS) -> str:
    """
    Render a roster grouped by slot in the fixed slot order.

    Players whose slot is not in `slots` are left out.
    """
    grouped: dict[str, list[str]] = {slot: [] for slot in slots}
    for entry in roster.players:
        if entry.position not in grouped:
            logger.debug(f'Dropping {entry.player_name} from roster output: unknown slot {entry.position}')
            continue
        grouped[entry.position].append(entry.player_name)

    lines = _header(roster.team_name)
    for slot in slots:
        for name in grouped[slot]:
            lines.append(f'{slot}: {name}')
    return _block(lines)


def format_player_stats(stats: PlayerStats, categories: CategoryTable = NBA_9CAT) -> str:
    label = PERIODS.get(stats.period, stats.period.replace('_', ' ').title())
    lines = _header(f'{stats.player_name} - {label}')
    lines.append('')
    for category in categories:
        if category.id in stats.stat_line:
            lines.append(f'{category.name:<3}: {format_stat(category, stats.stat_line[category.id])}')
    return _block(lines)


def format_stats_diff(
    player_a: str,
    player_b: str,
    diffs: Mapping[int, float],
    categories: CategoryTable = NBA_9CAT,
) -> str:
    """Render player A minus player B for each scored category."""
    lines = _header(f'{player_a} / {player_b}')
    lines.append('')
    for category in categories.scored():
        value = diffs.get(category.id, 0.0)
        precision = 3 if category.percentage else 1
        lines.append(f'{category.name:<3}: {value:.{precision}f}')
    lines.append('')
    return _block(lines)


def format_free_agents(
    free_agents: Mapping[Category, Sequence[FreeAgent]],
) -> str:
    """Render the top free agents for each requested category."""
    lines: list[str] = []
    for category, players in free_agents.items():
        lines.append(category.name)
        lines.append('-' * 20)
        for player in players:
            lines.append(f'{player.player_name} ({format_stat(category, player.value)})')
        lines.append('')
        lines.append('')
    return _block(lines)


def format_vs_league(subject_name: str, outcomes: Sequence[MatchupOutcome]) -> str:
    """Render a team's hypothetical result against every other team."""
    lines = _header(f'{subject_name} vs. The League')
    lines.append('')
    for outcome in outcomes:
        lines.append(f'{outcome.subject.name} ({len(outcome.won)})')
        lines.append(f'{outcome.opponent.name} ({len(outcome.lost)})')
        lines.append('')
    wins, losses, ties = overall_record(outcomes)
    lines.append(f'Total: {wins}-{losses}-{ties}')
    return _block(lines)


def format_schedule(schedule: TeamSchedule) -> str:
    lines = _header(f'{schedule.team_name} Schedule')
    lines.append('')
    counts = {'win': 0, 'loss': 0, 'tie': 0}
    for entry in schedule.entries:
        if entry.result in SCHEDULE_MARKS:
            counts[entry.result] += 1
            lines.append(f'{entry.week:2d}: {entry.opponent} ({SCHEDULE_MARKS[entry.result]})')
        elif entry.result == 'in_progress':
            lines.append(f'{entry.week:2d}: *{entry.opponent}*')
        else:
            lines.append(f'{entry.week:2d}: {entry.opponent}')
    lines.append('')
    lines.append(f"Total: {counts['win']}-{counts['loss']}-{counts['tie']}")
    return _block(lines)


def format_ownership(owners: Sequence[PlayerOwnership]) -> str:
    lines: list[str] = []
    for owner in owners:
        if owner.status == 'freeagent':
            status = 'Free Agent'
        elif owner.status == 'waivers':
            release = owner.waiver_release_date
            status = f"Waivers ({release.strftime('%a %m/%d')})" if release else 'Waivers'
        else:
            status = owner.owner_team_name or 'Unknown'
        lines.append(f'{owner.player_name}: {status}')
        lines.append('')
    return _block(lines)


def format_head_to_head(outcome: MatchupOutcome, categories: CategoryTable = NBA_9CAT) -> str:
    """
    Render two teams' stat lines side by side with the category record.

    Every category in the subject's stat line is listed, including the
    informational ones; the total only counts the categories in the outcome.
    """
    subject, opponent = outcome.subject, outcome.opponent
    lines = _header(f'H2H: {subject.name} vs {opponent.name}')
    lines.append('')
    for category in categories:
        if category.id not in subject.stat_line:
            continue
        a = format_stat(category, subject.stat_line[category.id])
        b = opponent.stat_line.get(category.id)
        b = format_stat(category, b) if b is not None else '-'
        lines.append(f'{category.name:<3}: {a:>8} | {b}')
    lines.append('')
    lines.append(f'Total: {len(outcome.won)}-{len(outcome.lost)}-{len(outcome.tied)}')
    return _block(lines)


def format_rankings(teams: Sequence[Team], category: Category, week: int | None = None) -> str:
    title = f'{category.name} Rankings' + (f' - Week {week}' if week else '')
    lines = _header(title)
    for i, team in enumerate(teams, start=1):
        lines.append(f'{i:2d}: {team.name} - {format_stat(category, team.stat_line[category.id])}')
    return _block(lines)


def format_leaders(day: str, leaders: Mapping[Category, Sequence[LeaderEntry]]) -> str:
    """Render the stat category leaders for a day."""
    lines = _header(f'{day} Stat Leaders')
    lines.append('')
    for category, players in leaders.items():
        lines.append(category.name)
        lines.append('-' * 25)
        for player in players:
            lines.append(f'{player.player_name} - {player.position} ({format_stat(category, player.value)})')
        lines.append('')
    return _block(lines)


def help_document() -> HelpDocument:
    """Build the command listing sent for !help."""
    return HelpDocument(
        title='Yahoo Fantasy Sports Bot',
        description='Chat bot for Yahoo Fantasy Basketball 9-category leagues',
        fields=[
            ('!help', 'Returns this message.'),
            ('!scoreboard [week]',
             'Returns the scoreboard of the given week. If no week is provided, returns the current scoreboard.'),
            ('!standings', 'Returns the current league standings.'),
            ('!roster <team>', 'Returns the roster of the given team.'),
            ('!stats <type> <player>',
             'Returns the stats of the requested player. <type> must be one of season|week|month. '
             'Player names must be at least 3 letters.'),
            ('!compare <type> <player1>/<player2>',
             'Returns the difference in stats between player1 and player2. <type> must be one of season|week|month. '
             'Player names must be at least 3 letters.'),
            ('!analyze <type> <stat1>,<stat2>,...',
             'Returns the top free agents for each stat. <type> must be one of season|week|month.'),
            ('!vs [week] <team>',
             'Returns the matchup results of the provided team against all other teams in the league. '
             'If week is not provided, the current week is used.'),
            ('!schedule <team>', 'Returns the season schedule of the provided team.'),
            ('!owner <player1>,<player2>,...',
             'Returns the current owner of the provided players. Player names must be at least 3 letters.'),
            ('!leaders [date]',
             'Returns the stat category leaders for a given day. date is formatted as YYYY-MM-DD; '
             "if no date is provided the current date in America/Los_Angeles is used. "
             "'yesterday' can be used as a shortcut for the previous day's leaders."),
            ('!h2h [week] <team1>/<team2>',
             'Returns the matchup result between the two given teams for the given week. '
             'If no week is provided, the current week is used.'),
            ('!ranks [week] <stat>',
             'Returns the team ranking for the given stat for the given week. '
             'If no week is provided, the current week is used.'),
        ],
    )

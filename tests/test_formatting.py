"""Unit tests for report formatting."""

from datetime import date

from ninecat.categories import NBA_9CAT
from ninecat.formatting import (
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
    format_stat,
    format_stats_diff,
    format_vs_league,
    help_document,
    usage_error,
)
from ninecat.matchup import aggregate_one_vs_many, evaluate
from ninecat.models import (
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

PTS = NBA_9CAT.by_name('PTS')
FG = NBA_9CAT.by_name('FG%')
TOV = NBA_9CAT.by_name('TOV')


def full_line():
    line = {c.id: 10.0 for c in NBA_9CAT.scored()}
    return line


class TestBasics:
    """Tests for shared helpers."""

    def test_blocks_are_fenced(self):
        """Test every report is wrapped in a code fence."""
        text = format_standings([StandingsEntry('A', 1, 3, 2, 1)])
        assert text.startswith('```\n')
        assert text.endswith('```')

    def test_format_stat(self):
        """Test percentage, whole and fractional values."""
        assert format_stat(FG, 0.4756) == '0.476'
        assert format_stat(PTS, 412.0) == '412'
        assert format_stat(PTS, 25.34) == '25.3'

    def test_error_block(self):
        """Test the error block wording."""
        assert format_error('boom') == '```\nError: boom```'

    def test_usage_error(self):
        """Test the usage hint is one line naming the command."""
        text = usage_error('compare')
        assert text == 'Error: invalid !compare usage. See !help for usage.'
        assert '\n' not in text

    def test_deterministic(self):
        """Test identical input renders identically."""
        entries = [StandingsEntry('A', 1, 3, 2, 1), StandingsEntry('B', 2, 2, 3, 1)]
        assert format_standings(entries) == format_standings(list(entries))


class TestReports:
    """Tests for each report kind."""

    def test_scoreboard_counts_category_winners(self):
        """Test each side shows how many categories it leads."""
        a, b = Team('Alpha', 'a'), Team('Beta', 'b')
        winners = {5: 'a', 8: 'a', 10: 'b', 12: None, 15: 'a', 16: 'b', 17: 'a', 18: 'a', 19: 'b'}
        text = format_scoreboard([Matchup(3, a, b, winners)])
        assert 'Week 3 Matchups' in text
        assert 'Alpha (5)' in text
        assert 'Beta (3)' in text

    def test_scoreboard_empty(self):
        """Test an empty week renders a placeholder."""
        assert 'No matchups' in format_scoreboard([])

    def test_standings(self):
        """Test rank, name and record."""
        text = format_standings([StandingsEntry('Alpha', 1, 10, 2, 1)])
        assert ' 1: Alpha (10-2-1)' in text

    def test_roster_slot_order(self):
        """Test players are grouped in fixed slot order."""
        roster = Roster('Alpha', [
            RosterEntry('Bench Guy', 'BN'),
            RosterEntry('Center Guy', 'C'),
            RosterEntry('Point Guy', 'PG'),
        ])
        text = format_roster(roster)
        assert 'Alpha\n-----\n' in text
        assert text.index('PG: Point Guy') < text.index('C: Center Guy') < text.index('BN: Bench Guy')

    def test_roster_drops_unknown_slots(self):
        """Test players in unknown slots are left out."""
        roster = Roster('Alpha', [RosterEntry('Known', 'PG'), RosterEntry('Mystery', 'XX')])
        text = format_roster(roster)
        assert 'Known' in text
        assert 'Mystery' not in text

    def test_player_stats(self):
        """Test header uses the period label and values are formatted."""
        stats = PlayerStats('Luka Doncic', 'season', {5: 0.487, 12: 33.9, 19: 4.0})
        text = format_player_stats(stats)
        assert 'Luka Doncic - Average Season' in text
        assert 'FG%: 0.487' in text
        assert 'PTS: 33.9' in text
        assert 'TOV: 4' in text

    def test_stats_diff(self):
        """Test A minus B for every scored category."""
        diffs = {c.id: 0.0 for c in NBA_9CAT.scored()}
        diffs[5] = 0.02
        diffs[12] = -3.5
        text = format_stats_diff('A', 'B', diffs)
        assert 'A / B' in text
        assert 'FG%: 0.020' in text
        assert 'PTS: -3.5' in text
        assert 'TOV: 0.0' in text
        assert text.count('\n') >= 11

    def test_free_agents(self):
        """Test each stat lists its players with values."""
        text = format_free_agents({
            PTS: [FreeAgent('Scorer', 22.5)],
            TOV: [FreeAgent('Sloppy', 4.0)],
        })
        assert text.index('PTS') < text.index('Scorer (22.5)') < text.index('TOV')
        assert 'Sloppy (4)' in text

    def test_vs_league(self):
        """Test per-opponent counts and the total record."""
        subject = Team('Me', 'me', full_line())
        others = [
            Team('Weak', 'w', {**full_line(), 12: 5.0}),
            Team('Strong', 's', {**full_line(), 12: 50.0}),
        ]
        outcomes = aggregate_one_vs_many(subject, others, NBA_9CAT.scored())
        text = format_vs_league('Me', outcomes)
        assert 'Me vs. The League' in text
        assert 'Weak (0)' in text
        assert 'Strong (1)' in text
        assert 'Total: 1-1-0' in text

    def test_schedule(self):
        """Test finished, live and future weeks and the total."""
        schedule = TeamSchedule('Alpha', [
            ScheduleEntry(1, 'Beta', 'win'),
            ScheduleEntry(2, 'Gamma', 'tie'),
            ScheduleEntry(3, 'Delta', 'in_progress'),
            ScheduleEntry(4, 'Beta', 'not_started'),
        ])
        text = format_schedule(schedule)
        assert ' 1: Beta (W)' in text
        assert ' 2: Gamma (T)' in text
        assert ' 3: *Delta*' in text
        assert ' 4: Beta\n' in text
        assert 'Total: 1-0-1' in text

    def test_ownership(self):
        """Test free agent, waiver and owned players."""
        text = format_ownership([
            PlayerOwnership('Free', 'freeagent'),
            PlayerOwnership('Waived', 'waivers', waiver_release_date=date(2024, 1, 2)),
            PlayerOwnership('Owned', 'owned', owner_team_name='Alpha'),
        ])
        assert 'Free: Free Agent' in text
        assert 'Waived: Waivers (Tue 01/02)' in text
        assert 'Owned: Alpha' in text

    def test_head_to_head(self):
        """Test side-by-side values and the category record."""
        a = Team('Alpha', 'a', {**full_line(), 12: 500.0, 19: 10.0, 4: 180.0})
        b = Team('Beta', 'b', {**full_line(), 12: 450.0, 19: 14.0, 4: 170.0})
        text = format_head_to_head(evaluate(a, b, NBA_9CAT.scored()))
        assert 'H2H: Alpha vs Beta' in text
        assert 'PTS:      500 | 450' in text
        assert 'FGM:      180 | 170' in text
        assert 'Total: 2-0-7' in text

    def test_rankings(self):
        """Test numbered lines with values."""
        teams = [Team('B', 'b', {12: 600.0}), Team('A', 'a', {12: 400.0})]
        text = format_rankings(teams, PTS, week=2)
        assert 'PTS Rankings - Week 2' in text
        assert ' 1: B - 600' in text
        assert ' 2: A - 400' in text

    def test_leaders(self):
        """Test leaders grouped by category."""
        text = format_leaders('2024-01-05', {PTS: [LeaderEntry('Star', 'PG,SG', 51.0)]})
        assert '2024-01-05 Stat Leaders' in text
        assert 'Star - PG,SG (51)' in text


class TestHelp:
    """Tests for the help document."""

    def test_lists_every_command(self):
        """Test each command appears once."""
        names = [name.split()[0] for name, _ in help_document().fields]
        for keyword in ('help', 'scoreboard', 'standings', 'roster', 'stats', 'compare',
                        'analyze', 'vs', 'schedule', 'owner', 'leaders', 'h2h', 'ranks'):
            assert names.count(f'!{keyword}') == 1

    def test_player_name_length_noted(self):
        """Test commands taking player names mention the minimum length."""
        fields = dict(help_document().fields)
        for name in ('!stats <type> <player>', '!compare <type> <player1>/<player2>',
                     '!owner <player1>,<player2>,...'):
            assert 'at least 3 letters' in fields[name]

    def test_embed_shape(self):
        """Test the embed payload layout."""
        embed = help_document().to_embed()
        assert embed['title']
        assert {'name', 'value'} <= set(embed['fields'][0])

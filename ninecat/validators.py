"""Validation functions for league snapshots."""

from .categories import NBA_9CAT, CategoryTable
from .constants import POSITION_SLOTS
from .schemas import LeagueSnapshot


def validate_team_stats(snapshot: LeagueSnapshot, categories: CategoryTable = NBA_9CAT) -> list[str]:
    """
    Check that weekly team stat lines can be compared.

    Checks:
    - Every stat line has all scored categories
    - Every stat line belongs to a known team

    Args:
        snapshot: LeagueSnapshot to validate
        categories: Category table the stat lines will be compared with

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    team_keys = {team.key for team in snapshot.teams}

    for week, stat_lines in sorted(snapshot.weekly_stats.items()):
        for team_key, stat_line in stat_lines.items():
            if team_key not in team_keys:
                errors.append(f'Week {week} has stats for unknown team {team_key}')
                continue
            missing = [c.name for c in categories.scored() if c.id not in stat_line]
            if missing:
                errors.append(f'Week {week} stats for {team_key} missing: {", ".join(missing)}')

    return errors


def validate_rosters(snapshot: LeagueSnapshot) -> list[str]:
    """
    Check rosters against the team and player lists.

    Checks:
    - Roster team keys exist
    - Rostered player keys exist
    - Selected slots are known (unknown slots are left out of roster reports)
    - No player is on more than one roster
    """
    errors = []
    team_keys = {team.key for team in snapshot.teams}
    player_keys = {player.key for player in snapshot.players}

    seen: dict[str, str] = {}
    for team_key, slots in snapshot.rosters.items():
        if team_key not in team_keys:
            errors.append(f'Roster for unknown team {team_key}')
        for slot in slots:
            if slot.player_key not in player_keys:
                errors.append(f'{team_key} roster has unknown player {slot.player_key}')
            if slot.position not in POSITION_SLOTS:
                errors.append(f'{team_key} roster has {slot.player_key} in unknown slot {slot.position}')
            if slot.player_key in seen:
                errors.append(
                    f'{slot.player_key} is on both {seen[slot.player_key]} and {team_key} rosters'
                )
            seen[slot.player_key] = team_key

    return errors


def validate_schedule(snapshot: LeagueSnapshot) -> list[str]:
    """Check that scheduled matchups reference known teams and sane winners."""
    errors = []
    team_keys = {team.key for team in snapshot.teams}

    for matchup in snapshot.schedule:
        for key in (matchup.team_a, matchup.team_b):
            if key not in team_keys:
                errors.append(f'Week {matchup.week} schedule has unknown team {key}')
        if matchup.team_a == matchup.team_b:
            errors.append(f'Week {matchup.week} schedule pairs {matchup.team_a} with itself')
        if matchup.winner_team_key and matchup.winner_team_key not in (matchup.team_a, matchup.team_b):
            errors.append(
                f'Week {matchup.week} winner {matchup.winner_team_key} is not in '
                f'{matchup.team_a} vs {matchup.team_b}'
            )

    return errors


def validate_snapshot(snapshot: LeagueSnapshot, categories: CategoryTable = NBA_9CAT) -> list[str]:
    """Run every snapshot check and return all messages."""
    errors: list[str] = []
    errors.extend(validate_team_stats(snapshot, categories))
    errors.extend(validate_rosters(snapshot))
    errors.extend(validate_schedule(snapshot))
    return errors

"""Category matchup evaluation.

Stat values are compared with exact float equality. The data source already
rounds every value to the precision it reports (three places for percentages,
one for counting averages), so two values that display the same are the same
float and an epsilon would only blur real differences at that precision.
"""

from typing import Iterable, Sequence

from .errors import CategoryNotPresent
from .models import Category, MatchupOutcome, StatLine, Team

WIN = 'win'
LOSS = 'loss'
TIE = 'tie'


def compare(
    subject_stats: StatLine,
    opponent_stats: StatLine,
    categories: Iterable[Category],
) -> tuple[set[int], set[int], set[int]]:
    """
    Compare two stat lines category by category.

    Higher values win, except for inverted categories (turnovers) where the
    lower value wins. Equal values tie.

    Args:
        subject_stats: Stat line of the side the result is reported for
        opponent_stats: Stat line of the other side
        categories: Categories to compare

    Returns:
        Tuple of (won, lost, tied) category id sets, from the subject's view

    Raises:
        CategoryNotPresent: If a category id is missing from either stat line
    """
    won: set[int] = set()
    lost: set[int] = set()
    tied: set[int] = set()

    for category in categories:
        if category.id not in subject_stats or category.id not in opponent_stats:
            raise CategoryNotPresent(category.id)

        a = float(subject_stats[category.id])
        b = float(opponent_stats[category.id])

        if a == b:
            tied.add(category.id)
        elif not category.inverted:
            (won if a > b else lost).add(category.id)
        else:
            (won if a < b else lost).add(category.id)

    return won, lost, tied


def evaluate(subject: Team, opponent: Team, categories: Iterable[Category]) -> MatchupOutcome:
    """Compare two teams and wrap the result in a MatchupOutcome."""
    try:
        won, lost, tied = compare(subject.stat_line, opponent.stat_line, categories)
    except CategoryNotPresent as e:
        owner = subject.name if e.category_id not in subject.stat_line else opponent.name
        raise CategoryNotPresent(e.category_id, owner) from None
    return MatchupOutcome(
        subject=subject,
        opponent=opponent,
        won=frozenset(won),
        lost=frozenset(lost),
        tied=frozenset(tied),
    )


def aggregate_one_vs_many(
    subject: Team,
    opponents: Sequence[Team],
    categories: Iterable[Category],
) -> list[MatchupOutcome]:
    """
    Evaluate the subject against every opponent independently.

    The result follows the order of `opponents`. An entry with the subject's
    own key is skipped, so the whole league can be passed in.
    """
    categories = tuple(categories)
    return [
        evaluate(subject, opponent, categories)
        for opponent in opponents
        if opponent.key != subject.key
    ]


def outcome_result(outcome: MatchupOutcome) -> str:
    """Classify a whole matchup by categories won versus categories lost."""
    if len(outcome.won) > len(outcome.lost):
        return WIN
    if len(outcome.won) < len(outcome.lost):
        return LOSS
    return TIE


def overall_record(outcomes: Iterable[MatchupOutcome]) -> tuple[int, int, int]:
    """Return (wins, losses, ties) over a set of matchup outcomes."""
    wins = losses = ties = 0
    for outcome in outcomes:
        result = outcome_result(outcome)
        if result == WIN:
            wins += 1
        elif result == LOSS:
            losses += 1
        else:
            ties += 1
    return wins, losses, ties


def rank_teams_by_category(
    teams: Iterable[Team],
    category: Category,
    ascending: bool = False,
) -> list[Team]:
    """
    Order teams by their raw value for one category.

    The raw value is used even for inverted categories, so by default the team
    with the most turnovers ranks first; pass ascending=True for fewest first.
    Teams with equal values keep their input order.

    Raises:
        CategoryNotPresent: If a team's stat line lacks the category
    """
    teams = list(teams)
    for team in teams:
        if category.id not in team.stat_line:
            raise CategoryNotPresent(category.id, team.name)
    return sorted(
        teams,
        key=lambda team: float(team.stat_line[category.id]),
        reverse=not ascending,
    )

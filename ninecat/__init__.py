from .models import (
    Category,
    CommandInvocation,
    HelpDocument,
    MatchupOutcome,
    Team,
)
from .errors import (
    NinecatError,
    UsageError,
    CategoryNotFound,
    CategoryNotPresent,
    DataSourceError,
    TeamNotFound,
    PlayerNotFound,
    InvalidPeriod,
)
from .categories import CategoryTable, NBA_9CAT
from .tokenizer import tokenize, NO_TAIL
from .matchup import (
    compare,
    evaluate,
    aggregate_one_vs_many,
    outcome_result,
    overall_record,
    rank_teams_by_category,
)
from .commands import Command, CommandDispatcher, parse_command
from .snapshot import SnapshotSource
from .transport import ConsoleTransport, WebhookTransport

__all__ = [
    # Models
    'Category',
    'CommandInvocation',
    'HelpDocument',
    'MatchupOutcome',
    'Team',
    # Errors
    'NinecatError',
    'UsageError',
    'CategoryNotFound',
    'CategoryNotPresent',
    'DataSourceError',
    'TeamNotFound',
    'PlayerNotFound',
    'InvalidPeriod',
    # Categories
    'CategoryTable',
    'NBA_9CAT',
    # Tokenizer
    'tokenize',
    'NO_TAIL',
    # Matchup evaluation
    'compare',
    'evaluate',
    'aggregate_one_vs_many',
    'outcome_result',
    'overall_record',
    'rank_teams_by_category',
    # Dispatch
    'Command',
    'CommandDispatcher',
    'parse_command',
    # Data source and transports
    'SnapshotSource',
    'ConsoleTransport',
    'WebhookTransport',
]

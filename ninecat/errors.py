"""Exception hierarchy for the ninecat bot.

Every error raised while handling a command derives from NinecatError so the
dispatcher can turn it into a single reply.
"""


class NinecatError(Exception):
    """Base class for errors surfaced to chat users."""


class UsageError(NinecatError):
    """A command was invoked with missing or malformed arguments."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f'invalid !{command} usage')


class CategoryNotFound(NinecatError):
    """A stat category name or id is not in the category table."""

    def __init__(self, category):
        self.category = category
        super().__init__(f'stat "{category}" not found')


class CategoryNotPresent(NinecatError):
    """A stat line is missing a category that was requested for comparison."""

    def __init__(self, category_id: int, owner: str | None = None):
        self.category_id = category_id
        self.owner = owner
        where = f' for "{owner}"' if owner else ''
        super().__init__(f'stat {category_id} missing from stat line{where}')


class DataSourceError(NinecatError):
    """Any failure reported by the league data source."""


class TeamNotFound(NinecatError):
    """A team name or key did not resolve against the data source."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'"{name}" team not found')


class PlayerNotFound(NinecatError):
    """A player name did not resolve against the data source."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'"{name}" player not found')


class InvalidPeriod(NinecatError):
    """A stats period other than season, week or month was requested."""

    def __init__(self, period: str):
        self.period = period
        super().__init__(f'invalid stats type ("{period}") requested')

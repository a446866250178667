"""Constants and lookup tables for the ninecat bot."""

from .models import Category

# Yahoo NBA stat ids. The nine scored categories come first, in display order.
CATEGORIES = (
    Category(id=5, name='FG%', percentage=True),
    Category(id=8, name='FT%', percentage=True),
    Category(id=10, name='3PM', aliases=('3PTM', '3PT')),
    Category(id=12, name='PTS'),
    Category(id=15, name='REB'),
    Category(id=16, name='AST'),
    Category(id=17, name='STL', aliases=('ST',)),
    Category(id=18, name='BLK'),
    Category(id=19, name='TOV', inverted=True, aliases=('TO',)),
    # Informational only, never tallied
    Category(id=4, name='FGM', scored=False),
    Category(id=3, name='FGA', scored=False),
    Category(id=7, name='FTM', scored=False),
    Category(id=6, name='FTA', scored=False),
)

# Roster slots in display order
POSITION_SLOTS = ('PG', 'SG', 'G', 'SF', 'PF', 'F', 'C', 'UTIL', 'BN', 'IL', 'IL+')

# Period keyword -> coverage label used in report headers
PERIODS = {
    'season': 'Average Season',
    'week': 'Average Last Week',
    'month': 'Average Last Month',
}

COMMAND_PREFIX = '!'

DEFAULT_TIMEZONE = 'America/Los_Angeles'

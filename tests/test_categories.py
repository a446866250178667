"""Unit tests for the category table."""

import pytest

from ninecat.categories import NBA_9CAT, CategoryTable
from ninecat.errors import CategoryNotFound
from ninecat.models import Category


class TestCategoryTable:
    """Tests for category lookups."""

    def test_nine_scored_categories(self):
        """Test the scoring set is the standard 9-cat list in order."""
        names = [c.name for c in NBA_9CAT.scored()]
        assert names == ['FG%', 'FT%', '3PM', 'PTS', 'REB', 'AST', 'STL', 'BLK', 'TOV']

    def test_only_turnovers_inverted(self):
        """Test turnovers are the single lower-is-better category."""
        inverted = [c for c in NBA_9CAT if c.inverted]
        assert len(inverted) == 1
        assert inverted[0].id == 19

    def test_auxiliary_categories_not_scored(self):
        """Test makes/attempts are informational."""
        for name in ('FGM', 'FGA', 'FTM', 'FTA'):
            assert not NBA_9CAT.by_name(name).scored

    def test_by_id(self):
        """Test id lookup."""
        assert NBA_9CAT.by_id(12).name == 'PTS'

    def test_by_id_missing(self):
        """Test unknown ids raise CategoryNotFound."""
        with pytest.raises(CategoryNotFound):
            NBA_9CAT.by_id(999)

    def test_by_name_case_insensitive(self):
        """Test lookups ignore case and surrounding whitespace."""
        assert NBA_9CAT.by_name(' pts ').id == 12
        assert NBA_9CAT.by_name('fg%').id == 5

    def test_by_name_alias(self):
        """Test alias lookups."""
        assert NBA_9CAT.by_name('to').id == 19
        assert NBA_9CAT.by_name('3ptm').id == 10

    def test_by_name_case_sensitive(self):
        """Test exact-case lookups reject other casings."""
        assert NBA_9CAT.by_name('PTS', case_insensitive=False).id == 12
        with pytest.raises(CategoryNotFound):
            NBA_9CAT.by_name('pts', case_insensitive=False)

    def test_by_name_missing(self):
        """Test the error names the unknown stat."""
        with pytest.raises(CategoryNotFound, match='"dunks"'):
            NBA_9CAT.by_name('dunks')

    def test_duplicate_ids_rejected(self):
        """Test a table cannot hold the same id twice."""
        with pytest.raises(ValueError):
            CategoryTable([Category(1, 'A'), Category(1, 'B')])

    def test_second_inverted_rejected(self):
        """Test a table holds at most one inverted category."""
        with pytest.raises(ValueError):
            CategoryTable([Category(1, 'A', inverted=True), Category(2, 'B', inverted=True)])

    def test_membership(self):
        """Test `in` checks ids."""
        assert 19 in NBA_9CAT
        assert 999 not in NBA_9CAT

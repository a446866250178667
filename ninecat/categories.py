"""Immutable stat category table."""

from types import MappingProxyType
from typing import Iterable

from .constants import CATEGORIES
from .errors import CategoryNotFound
from .models import Category


class CategoryTable:
    """
    Read-only lookup over a fixed set of stat categories.

    Built once at startup and passed to the evaluator, formatter and
    dispatcher. Iteration follows the order the categories were given in.
    """

    def __init__(self, categories: Iterable[Category]):
        categories = tuple(categories)
        by_id: dict[int, Category] = {}
        by_name: dict[str, Category] = {}
        for category in categories:
            if category.id in by_id:
                raise ValueError(f'Duplicate category id: {category.id}')
            by_id[category.id] = category
            for name in (category.name, *category.aliases):
                by_name[name.upper()] = category

        inverted = [c.name for c in categories if c.inverted]
        if len(inverted) > 1:
            raise ValueError(f'Only one inverted category allowed, got {inverted}')

        self._categories = categories
        self._by_id = MappingProxyType(by_id)
        self._by_name = MappingProxyType(by_name)

    def __iter__(self):
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: int) -> bool:
        return category_id in self._by_id

    def by_id(self, category_id: int) -> Category:
        """Look up a category by stat id, raising CategoryNotFound if absent."""
        try:
            return self._by_id[category_id]
        except KeyError:
            raise CategoryNotFound(category_id) from None

    def by_name(self, name: str, case_insensitive: bool = True) -> Category:
        """
        Look up a category by display name or alias.

        Args:
            name: Category name such as 'PTS' or 'to' (surrounding whitespace ignored)
            case_insensitive: Match regardless of case (default: True)

        Returns:
            The matching Category

        Raises:
            CategoryNotFound: If no category has that name
        """
        cleaned = name.strip()
        if case_insensitive:
            category = self._by_name.get(cleaned.upper())
        else:
            category = next(
                (c for c in self._categories if cleaned in (c.name, *c.aliases)),
                None,
            )
        if category is None:
            raise CategoryNotFound(cleaned)
        return category

    def scored(self) -> tuple[Category, ...]:
        """Categories that count toward head-to-head results."""
        return tuple(c for c in self._categories if c.scored)


NBA_9CAT = CategoryTable(CATEGORIES)

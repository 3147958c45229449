"""Category selection resolved from command-line flags."""

from typing import Iterable, Iterator

from bashkeys.core.models import Category


class CategorySelection:
    """Immutable set of categories to display.

    Iteration always follows canonical order, whatever order the categories
    were requested in. An empty request selects every category.
    """

    __slots__ = ("_categories",)

    def __init__(self, categories: Iterable[Category] = ()):
        requested = frozenset(categories)
        self._categories = requested or frozenset(Category)

    @classmethod
    def from_flags(cls, **flags: bool) -> "CategorySelection":
        """Build a selection from ``{option_name: enabled}`` flags."""
        return cls(category for category in Category if flags.get(category.option))

    @property
    def is_all(self) -> bool:
        return len(self._categories) == len(Category)

    def __iter__(self) -> Iterator[Category]:
        return (category for category in Category if category in self._categories)

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def __len__(self) -> int:
        return len(self._categories)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CategorySelection):
            return NotImplemented
        return self._categories == other._categories

    def __hash__(self) -> int:
        return hash(self._categories)

    def __repr__(self) -> str:
        names = ", ".join(category.option for category in self)
        return f"CategorySelection({names})"

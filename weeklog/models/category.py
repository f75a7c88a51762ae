"""Category definitions and the per-week category registry."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

from sqlmodel import SQLModel

from ..core.errors import CategoryError

RANKING_TIME = "time"
RANKING_PORTALS = "portals"

# A category index is stored in a single byte.
MAX_CATEGORIES = 256


class Category(SQLModel):
    """A competitive ruleset and the rule its leaderboard is ranked by."""

    key: str
    ranking: str = RANKING_TIME

    @property
    def ranks_by_portals(self) -> bool:
        return self.ranking == RANKING_PORTALS


class CategoryRegistry:
    """Ordered categories of one week; position is the on-disk index."""

    def __init__(self, categories: Iterable[Category]):
        self._categories: Tuple[Category, ...] = tuple(categories)
        if len(self._categories) > MAX_CATEGORIES:
            raise CategoryError(
                f"At most {MAX_CATEGORIES} categories fit in a record, "
                f"got {len(self._categories)}"
            )
        self._index: Dict[str, int] = {}
        for position, category in enumerate(self._categories):
            if category.key in self._index:
                raise CategoryError(f"Duplicate category: {category.key}")
            self._index[category.key] = position

    @classmethod
    def from_keys(
        cls, keys: Iterable[str], portal_keys: Iterable[str] = ()
    ) -> "CategoryRegistry":
        """Build a registry from bare identifiers.

        Categories listed in ``portal_keys`` are ranked by portal count, every
        other category by time.
        """

        portal_set = set(portal_keys)
        return cls(
            Category(
                key=key,
                ranking=RANKING_PORTALS if key in portal_set else RANKING_TIME,
            )
            for key in keys
        )

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def keys(self) -> List[str]:
        return [category.key for category in self._categories]

    def index(self, key: str) -> int:
        """Return the on-disk index of ``key``."""

        try:
            return self._index[key]
        except (KeyError, TypeError):
            raise CategoryError(f"Unknown category: {key!r}") from None

    def key_at(self, index: int) -> str:
        """Return the identifier stored at ``index``."""

        if not 0 <= index < len(self._categories):
            raise CategoryError(
                f"Category index {index} out of range for {len(self._categories)} categories"
            )
        return self._categories[index].key

    def get(self, key: str) -> Category:
        return self._categories[self.index(key)]


__all__ = [
    "Category",
    "CategoryRegistry",
    "MAX_CATEGORIES",
    "RANKING_PORTALS",
    "RANKING_TIME",
]

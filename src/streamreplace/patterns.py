"""Search/replace pattern pairs.

A Replacement pairs a search sequence with the sequence that replaces it.
Patterns are declared in an ordered list; the position in that list is the
pattern's rank, and a lower rank wins when two patterns complete on the
same token.

Both sequences are frozen into tuples on construction, so any finite
sequence of comparable tokens works: ``str`` (characters), ``bytes``
(ints), lists or tuples of arbitrary objects.

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from streamreplace.errors import PatternError
from streamreplace.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Replacement:
    """An immutable (search_for, replace_with) pair.

    Usage:
        >>> Replacement("ab", "AB")
        Replacement(search_for=('a', 'b'), replace_with=('A', 'B'))
        >>> Replacement(b"ab", b"")
        Replacement(search_for=(97, 98), replace_with=())

    """

    search_for: tuple[Any, ...]
    replace_with: tuple[Any, ...]

    def __init__(self, search_for: Sequence[Any], replace_with: Sequence[Any]) -> None:
        object.__setattr__(self, "search_for", tuple(search_for))
        object.__setattr__(self, "replace_with", tuple(replace_with))

    @classmethod
    def new(cls, search_for: Sequence[Any], replace_with: Sequence[Any]) -> Replacement:
        """Alternate constructor, reads well in list literals."""
        return cls(search_for, replace_with)

    def __len__(self) -> int:
        """Length of the search sequence."""
        return len(self.search_for)


def coerce_replacements(
    items: Iterable[Replacement | tuple[Sequence[Any], Sequence[Any]]],
    *,
    strict: bool = True,
) -> tuple[Replacement, ...]:
    """Normalize caller-supplied patterns into Replacements, in declaration order.

    Args:
        items: Replacement instances or 2-item (search_for, replace_with) pairs
        strict: Raise on an empty search sequence instead of dropping it

    Returns:
        Tuple of Replacement, index = rank

    Raises:
        PatternError: If an item is not a pair, or (strict) its search
            sequence is empty
    """
    result: list[Replacement] = []
    for rank, item in enumerate(items):
        if not isinstance(item, Replacement):
            try:
                search_for, replace_with = item
            except (TypeError, ValueError):
                raise PatternError(
                    f"expected Replacement or (search_for, replace_with) pair, got {item!r}",
                    rank=rank,
                ) from None
            item = Replacement(search_for, replace_with)

        if not item.search_for:
            if strict:
                raise PatternError("search sequence must not be empty", rank=rank)
            logger.warning("Dropping pattern #%d: empty search sequence", rank)
            continue

        result.append(item)
    return tuple(result)

"""Per-pattern partial-match tracking.

Each pattern owns the set of stream positions where a match may have
started. Positions are 1-based and only ever grow, so every candidate
list stays sorted by appending: the oldest open match is always at the
front.

Per token, two independent rules are applied to every pattern, in order:

1. Prune: drop candidates whose next required token differs from the
   current token, or that have no required token left.
2. Seed: if the current token equals the first search token, open a new
   candidate at the current position.

A pattern completes when its oldest candidate covers exactly
``len(search_for)`` tokens. Only the oldest candidate is examined; it is
always the first to complete.

Thread Safety:
    Trackers are owned by a single engine. No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from streamreplace.patterns import Replacement


class PatternState:
    """Tracking record for one declared pattern.

    Attributes:
        rank: Declaration index; lower wins ties
        search_for: Tokens to find
        replace_with: Tokens emitted on a match
        candidates: Open start positions, ascending
    """

    __slots__ = ("rank", "search_for", "replace_with", "candidates")

    def __init__(self, rank: int, replacement: Replacement) -> None:
        self.rank = rank
        self.search_for: tuple[Any, ...] = replacement.search_for
        self.replace_with: tuple[Any, ...] = replacement.replace_with
        self.candidates: list[int] = []

    def advance(self, index: int, token: Any) -> None:
        """Prune then seed candidates for the token consumed at ``index``."""
        search_for = self.search_for
        length = len(search_for)
        self.candidates = [
            start
            for start in self.candidates
            if index - start < length and search_for[index - start] == token
        ]
        if search_for[0] == token:
            self.candidates.append(index)

    def oldest(self) -> int | None:
        """Start of the oldest open candidate, or None."""
        return self.candidates[0] if self.candidates else None

    def is_complete(self, index: int) -> bool:
        """True if the oldest candidate spans the whole search sequence."""
        if not self.candidates:
            return False
        return index - self.candidates[0] + 1 == len(self.search_for)

    def __repr__(self) -> str:
        return f"PatternState(rank={self.rank}, candidates={self.candidates!r})"


class CandidateTracker:
    """Arena of PatternState records, indexed by declaration rank.

    Usage:
        >>> tracker = CandidateTracker([Replacement("ab", "X")])
        >>> tracker.advance(1, "a")
        >>> tracker.flushable_index(1)
        0
        >>> tracker.advance(2, "b")
        >>> tracker.completed(2).rank
        0

    """

    __slots__ = ("_states",)

    def __init__(self, replacements: Sequence[Replacement]) -> None:
        self._states: tuple[PatternState, ...] = tuple(
            PatternState(rank, replacement) for rank, replacement in enumerate(replacements)
        )

    @property
    def states(self) -> tuple[PatternState, ...]:
        return self._states

    @property
    def open_candidates(self) -> int:
        """Total number of open candidates across all patterns."""
        return sum(len(state.candidates) for state in self._states)

    def advance(self, index: int, token: Any) -> None:
        """Apply the prune and seed rules to every pattern."""
        for state in self._states:
            state.advance(index, token)

    def completed(self, index: int) -> PatternState | None:
        """Lowest-ranked pattern that completes at ``index``, if any."""
        for state in self._states:
            if state.is_complete(index):
                return state
        return None

    def flushable_index(self, index: int) -> int:
        """Greatest position no open candidate can still claim.

        The minimum over patterns of (oldest candidate - 1), where a pattern
        with nothing open contributes ``index``.
        """
        flush_index = index
        for state in self._states:
            oldest = state.oldest()
            if oldest is not None and oldest - 1 < flush_index:
                flush_index = oldest - 1
        return flush_index

    def clear(self) -> None:
        """Drop every open candidate of every pattern."""
        for state in self._states:
            state.candidates.clear()

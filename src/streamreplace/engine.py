"""Lazy streaming find-and-replace over token iterables.

The Replace iterator pulls from its upstream source only when a caller
asks for output and nothing is ready yet. Each consumed token is:

1. Pushed onto the pending buffer
2. Classified against every pattern (prune, seed)
3. Resolved: a completed match is committed; otherwise pending tokens that
   no open candidate can claim are flushed verbatim

Consumption stops as soon as something is ready, so infinite sources work
and memory stays bounded by the longest open partial match.

Thread Safety:
    Replace instances are single-use iterators. Create one per stream.
    All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from streamreplace.buffers import ReplaceBuffer
from streamreplace.candidates import CandidateTracker, PatternState
from streamreplace.config import get_replace_config
from streamreplace.patterns import Replacement, coerce_replacements
from streamreplace.profiling import get_replace_accumulator
from streamreplace.utils.logger import get_logger

logger = get_logger(__name__)


class Replace(Iterator[Any]):
    """Iterator yielding ``source`` with every pattern occurrence replaced.

    Matches are found left to right and never overlap. When several patterns
    complete on the same token, the one declared first wins.

    Usage:
        >>> list(Replace([3, 4, 5, 6, 4, 5, 9], [([4, 5], [100])]))
        [3, 100, 6, 100, 9]
        >>> bytes(Replace(b"abcabc", [(b"ab", b"_AB_"), (b"abc", b"_ABC_")]))
        b'_AB_c_AB_c'

    Not rewindable: build a new instance to process a stream again.

    """

    __slots__ = (
        "_source",
        "_tracker",
        "_buffer",
        "_index",
        "_exhausted",
        "_trace",
        "_acc",
    )

    def __init__(
        self,
        source: Iterable[Any],
        replacements: Iterable[Replacement | tuple[Sequence[Any], Sequence[Any]]],
    ) -> None:
        """Initialize the engine.

        Args:
            source: Upstream tokens, consumed lazily
            replacements: Patterns in priority order (Replacement instances or
                (search_for, replace_with) pairs)

        Raises:
            PatternError: If a pattern is malformed, or has an empty search
                sequence while ``strict_patterns`` is enabled
        """
        config = get_replace_config()
        patterns = coerce_replacements(replacements, strict=config.strict_patterns)

        self._source: Iterator[Any] = iter(source)
        self._tracker = CandidateTracker(patterns)
        self._buffer = ReplaceBuffer()
        self._index: int = 0
        self._exhausted: bool = False
        self._trace: bool = config.trace
        self._acc = get_replace_accumulator()

    @property
    def index(self) -> int:
        """Number of tokens consumed from upstream so far."""
        return self._index

    @property
    def flushed_index(self) -> int:
        """Last stream position resolved to output."""
        return self._buffer.flushed_index

    @property
    def pending(self) -> tuple[Any, ...]:
        """Consumed tokens not yet resolved."""
        return self._buffer.pending

    @property
    def exhausted(self) -> bool:
        """True once the upstream source has run out."""
        return self._exhausted

    def __iter__(self) -> Replace:
        return self

    def __next__(self) -> Any:
        # A commit with an empty replacement resolves input without output
        while not self._buffer:
            if self._exhausted:
                raise StopIteration
            self._fill_buffer()
        if self._acc is not None:
            self._acc.record_emit()
        return self._buffer.pop()

    def _fill_buffer(self) -> None:
        """Consume upstream tokens until output is ready or the source ends."""
        tracker = self._tracker
        buffer = self._buffer
        acc = self._acc

        for token in self._source:
            self._index += 1
            index = self._index
            if acc is not None:
                acc.record_consume()

            buffer.push(token)
            tracker.advance(index, token)

            matched = tracker.completed(index)
            if matched is not None:
                self._commit(matched)
                return

            flushed = buffer.flush_to(tracker.flushable_index(index))
            if flushed:
                if acc is not None:
                    acc.record_flush()
                if self._trace:
                    logger.debug(
                        "Flushed %d token(s) at position %d, %d candidate(s) open",
                        flushed,
                        index,
                        tracker.open_candidates,
                    )
                return

        self._finish()

    def _commit(self, matched: PatternState) -> None:
        start = self._index - len(matched.search_for) + 1
        # A committed region can't host the start of another match
        self._tracker.clear()
        self._buffer.commit(matched.replace_with, start, self._index)
        if self._acc is not None:
            self._acc.record_commit()
        if self._trace:
            logger.debug(
                "Replaced pattern #%d ending at position %d with %d token(s)",
                matched.rank,
                self._index,
                len(matched.replace_with),
            )

    def _finish(self) -> None:
        # No further input can extend an open candidate
        self._exhausted = True
        self._tracker.clear()
        drained = self._buffer.drain(self._index)
        if drained:
            if self._acc is not None:
                self._acc.record_drain()
            if self._trace:
                logger.debug("Drained %d unmatched token(s) at end of stream", drained)

    def __repr__(self) -> str:
        return (
            f"Replace(index={self._index}, flushed_index={self._buffer.flushed_index}, "
            f"patterns={len(self._tracker.states)}, exhausted={self._exhausted})"
        )


def replace(
    source: Iterable[Any],
    search_for: Sequence[Any],
    replace_with: Sequence[Any],
) -> Replace:
    """Lazily replace every occurrence of one pattern in ``source``.

    Example:
        >>> list(replace([1, 2, 3], [2], [10]))
        [1, 10, 3]
    """
    return Replace(source, [Replacement(search_for, replace_with)])


def replace_all(
    source: Iterable[Any],
    replacements: Iterable[Replacement | tuple[Sequence[Any], Sequence[Any]]],
) -> Replace:
    """Lazily replace several patterns in ``source``, first declared wins ties.

    Example:
        >>> "".join(replace_all("ababcdef", [("abc", "_ABC_"), ("de", "_DE_")]))
        'ab_ABC__DE_f'
    """
    return Replace(source, replacements)

"""streamreplace ReplaceAccumulator — opt-in profiling for replace streams.

This module provides accumulated metrics while engines run:
- Tokens consumed from upstream and emitted downstream
- Number of match commits, verbatim flushes and end-of-stream drains

Zero overhead when disabled (get_replace_accumulator() returns None).
Engines capture the accumulator when they are constructed, so build the
engine inside the ``with`` block.

Example:
    from streamreplace import replace
    from streamreplace.profiling import profiled_replace

    with profiled_replace() as metrics:
        out = list(replace([1, 2, 3], [2], [10]))

    print(metrics.summary())
    # {"total_ms": 0.05, "tokens_consumed": 3, "tokens_emitted": 3, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ReplaceAccumulator:
    """Accumulated metrics across replace engines.

    Attributes:
        start_time: Profiling start timestamp.
        tokens_consumed: Tokens pulled from upstream sources.
        tokens_emitted: Tokens handed to downstream consumers.
        commits: Confirmed matches replaced.
        flushes: Verbatim flushes of pending input.
        drains: End-of-stream drains that emitted leftover input.

    """

    start_time: float = field(default_factory=perf_counter)
    tokens_consumed: int = 0
    tokens_emitted: int = 0
    commits: int = 0
    flushes: int = 0
    drains: int = 0

    def record_consume(self) -> None:
        self.tokens_consumed += 1

    def record_emit(self) -> None:
        self.tokens_emitted += 1

    def record_commit(self) -> None:
        self.commits += 1

    def record_flush(self) -> None:
        self.flushes += 1

    def record_drain(self) -> None:
        self.drains += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of replace metrics.

        Returns:
            Dict with total_ms and every counter.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "tokens_consumed": self.tokens_consumed,
            "tokens_emitted": self.tokens_emitted,
            "commits": self.commits,
            "flushes": self.flushes,
            "drains": self.drains,
        }


_accumulator: ContextVar[ReplaceAccumulator | None] = ContextVar(
    "replace_accumulator",
    default=None,
)


def get_replace_accumulator() -> ReplaceAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_replace() -> Iterator[ReplaceAccumulator]:
    """Context manager for profiled replacing.

    Creates a ReplaceAccumulator and makes it available via
    get_replace_accumulator() for the duration of the with block.

    Yields:
        ReplaceAccumulator populated by engines built inside the block.

    """
    acc = ReplaceAccumulator()
    token: Token[ReplaceAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)

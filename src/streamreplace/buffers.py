"""Pending/ready buffering for the replace engine.

Consumed tokens wait in ``pending`` until they are resolved, either
released verbatim once no open candidate can claim them, or swallowed by a
committed match. Resolved output waits in ``ready`` until pulled.

The watermark ``flushed_index`` marks the last resolved stream position.
After every step, ``len(pending) == index - flushed_index``.

Thread Safety:
    Buffers are owned by a single engine. No shared mutable state.

"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any


class ReplaceBuffer:
    """Pending and ready token buffers plus the flushed watermark.

    Usage:
        >>> buf = ReplaceBuffer()
        >>> for token in "xab":
        ...     buf.push(token)
        >>> buf.flush_to(1)
        1
        >>> buf.commit("AB", 2, 3)
        >>> "".join(buf.pop() for _ in range(len(buf)))
        'xAB'

    """

    __slots__ = ("_pending", "_ready", "_flushed_index")

    def __init__(self) -> None:
        self._pending: list[Any] = []
        self._ready: deque[Any] = deque()
        self._flushed_index: int = 0

    @property
    def flushed_index(self) -> int:
        return self._flushed_index

    @property
    def pending(self) -> tuple[Any, ...]:
        """Snapshot of consumed, unresolved tokens."""
        return tuple(self._pending)

    def push(self, token: Any) -> None:
        """Hold a freshly consumed token until it is resolved."""
        self._pending.append(token)

    def flush_to(self, flush_index: int) -> int:
        """Release pending tokens up to ``flush_index`` verbatim.

        Args:
            flush_index: Stream position no match can claim anymore

        Returns:
            Number of tokens moved to ready; 0 if the watermark did not advance
        """
        unflushed = flush_index - self._flushed_index
        if unflushed <= 0:
            return 0
        self._ready.extend(self._pending[:unflushed])
        del self._pending[:unflushed]
        self._flushed_index = flush_index
        return unflushed

    def commit(self, replace_with: Sequence[Any], start: int, index: int) -> None:
        """Replace the matched pending tokens with ``replace_with``.

        Pending tokens before ``start`` belong to no match and are released
        verbatim first; everything from ``start`` on is swallowed.

        Args:
            replace_with: Replacement tokens
            start: Position of the first matched token
            index: Position of the token that completed the match
        """
        self.flush_to(start - 1)
        self._ready.extend(replace_with)
        self._pending.clear()
        self._flushed_index = index

    def drain(self, index: int) -> int:
        """Release all pending tokens verbatim at end of stream.

        Returns:
            Number of tokens moved to ready
        """
        drained = len(self._pending)
        self._ready.extend(self._pending)
        self._pending.clear()
        self._flushed_index = index
        return drained

    def pop(self) -> Any:
        """Next ready token. Raises IndexError when nothing is ready."""
        return self._ready.popleft()

    def __len__(self) -> int:
        """Number of ready tokens."""
        return len(self._ready)

    def __bool__(self) -> bool:
        """True if any token is ready to be pulled."""
        return bool(self._ready)

"""Exception classes for streamreplace.

Matching and buffering are total over well-formed input, so the only errors
raised by the package are construction-time pattern errors. Failures of the
upstream iterator propagate unchanged.
"""

from __future__ import annotations


class StreamReplaceError(Exception):
    """Base exception for all streamreplace errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(StreamReplaceError):
    """Invalid search/replace pattern.

    Raised at construction time when a pattern cannot be tracked, e.g. an
    empty search sequence or a malformed (search_for, replace_with) pair.
    """

    def __init__(self, message: str, rank: int | None = None) -> None:
        """Initialize pattern error with optional declaration rank.

        Args:
            message: Error description
            rank: Declaration index of the offending pattern (0-indexed)
        """
        self.message = message
        self.rank = rank

        prefix = f"pattern #{rank}: " if rank is not None else ""
        super().__init__(f"{prefix}{message}")

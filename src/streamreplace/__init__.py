"""
streamreplace — Lazy streaming find-and-replace for token sequences

Replaces every non-overlapping occurrence of one or more search patterns in
an iterable of tokens (characters, bytes, ints, any comparable objects),
scanning left to right in a single pass. Input is pulled only as output is
requested, and memory is bounded by the longest open partial match.

Quick Start:
    >>> from streamreplace import replace, replace_all
    >>> list(replace([3, 4, 5, 6, 7], [4, 5], [100]))
    [3, 100, 6, 7]

    >>> # Several patterns: the one declared first wins ties
    >>> "".join(replace_all("abcabc", [("ab", "_AB_"), ("abc", "_ABC_")]))
    '_AB_c_AB_c'

    >>> # Text helpers
    >>> from streamreplace import replace_text
    >>> replace_text("abcacab", [("ab", "AB")])
    'ABcacAB'

Installation:
    pip install streamreplace        # zero runtime dependencies
"""

from streamreplace.config import (
    ReplaceConfig,
    get_replace_config,
    replace_config_context,
    reset_replace_config,
    set_replace_config,
)
from streamreplace.engine import Replace, replace, replace_all
from streamreplace.errors import PatternError, StreamReplaceError
from streamreplace.patterns import Replacement
from streamreplace.profiling import (
    ReplaceAccumulator,
    get_replace_accumulator,
    profiled_replace,
)
from streamreplace.text import replace_bytes, replace_chunks, replace_text

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "Replace",
    "Replacement",
    "replace",
    "replace_all",
    # Text helpers
    "replace_text",
    "replace_bytes",
    "replace_chunks",
    # Errors
    "StreamReplaceError",
    "PatternError",
    # Configuration (ContextVar-based)
    "ReplaceConfig",
    "get_replace_config",
    "set_replace_config",
    "reset_replace_config",
    "replace_config_context",
    # Profiling
    "ReplaceAccumulator",
    "get_replace_accumulator",
    "profiled_replace",
]

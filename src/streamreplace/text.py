"""Convenience wrappers for text and byte streams.

The engine works on any token type; these helpers cover the common cases
where tokens are characters of a ``str`` or bytes of a ``bytes`` object.

Example:
    >>> from streamreplace.text import replace_text
    >>> replace_text("abcacab", [("ab", "AB")])
    'ABcacAB'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import chain

from streamreplace.engine import Replace
from streamreplace.patterns import Replacement

TextPatterns = Iterable[Replacement | tuple[Sequence[str], Sequence[str]]]
BytesPatterns = Iterable[Replacement | tuple[bytes, bytes]]


def replace_text(source: str, replacements: TextPatterns) -> str:
    """Replace patterns in a string, character by character.

    Args:
        source: Input text
        replacements: (search, replacement) string pairs in priority order

    Returns:
        The rewritten text
    """
    return "".join(Replace(source, replacements))


def replace_bytes(source: bytes, replacements: BytesPatterns) -> bytes:
    """Replace patterns in a bytes object, byte by byte.

    Example:
        >>> replace_bytes(b"ababcdef", [(b"abc", b"_ABC_"), (b"de", b"_DE_")])
        b'ab_ABC__DE_f'
    """
    return bytes(Replace(source, replacements))


def replace_chunks(chunks: Iterable[str], replacements: TextPatterns) -> Iterator[str]:
    """Replace patterns across a stream of text chunks.

    Chunks are treated as one continuous character stream, so a pattern
    split across chunk boundaries still matches. Output is yielded one
    character at a time, as soon as it is resolved.

    Args:
        chunks: Text pieces, e.g. from a streamed response
        replacements: (search, replacement) string pairs in priority order

    Yields:
        Output characters

    Example:
        >>> "".join(replace_chunks(["my sec", "ret key"], [("secret", "******")]))
        'my ****** key'
    """
    return Replace(chain.from_iterable(chunks), replacements)

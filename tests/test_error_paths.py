"""Error-path and malformed pattern tests."""

import pytest

from streamreplace import PatternError, Replace, Replacement, StreamReplaceError, replace, replace_all
from streamreplace.patterns import coerce_replacements


class TestPatternErrorFormatting:
    """Verify PatternError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = PatternError("bad pattern")
        assert str(err) == "bad pattern"
        assert err.rank is None

    def test_with_rank(self) -> None:
        err = PatternError("bad pattern", rank=2)
        assert str(err) == "pattern #2: bad pattern"
        assert err.message == "bad pattern"
        assert err.rank == 2

    def test_is_stream_replace_error(self) -> None:
        assert isinstance(PatternError("x"), StreamReplaceError)


class TestConstructionErrors:
    """Invalid patterns are rejected before any input is consumed."""

    def test_empty_search_single(self) -> None:
        with pytest.raises(PatternError, match="must not be empty"):
            replace([1, 2], [], [3])

    def test_empty_search_reports_rank(self) -> None:
        with pytest.raises(PatternError) as exc_info:
            replace_all("abc", [("a", "A"), ("", "B")])
        assert exc_info.value.rank == 1

    def test_empty_replace_is_fine(self) -> None:
        assert list(replace([1, 2], [2], [])) == [1]

    def test_malformed_pair(self) -> None:
        with pytest.raises(PatternError, match="pair"):
            Replace("abc", [("a", "b", "c")])

    def test_non_iterable_item(self) -> None:
        with pytest.raises(PatternError) as exc_info:
            Replace("abc", [Replacement("a", "A"), 42])
        assert exc_info.value.rank == 1

    def test_source_untouched_on_error(self) -> None:
        source = iter([1, 2, 3])
        with pytest.raises(PatternError):
            replace(source, [], [0])
        assert next(source) == 1


class TestCoerceReplacements:
    def test_keeps_declaration_order(self) -> None:
        reps = coerce_replacements([("b", "1"), Replacement("a", "2")])
        assert [r.search_for for r in reps] == [("b",), ("a",)]

    def test_lenient_skips_empty(self) -> None:
        reps = coerce_replacements([("", "1"), ("a", "2")], strict=False)
        assert reps == (Replacement("a", "2"),)


class TestReplacement:
    def test_sequences_frozen_to_tuples(self) -> None:
        search = [1, 2]
        rep = Replacement(search, [3])
        search.append(9)
        assert rep.search_for == (1, 2)
        assert rep.replace_with == (3,)

    def test_immutable(self) -> None:
        rep = Replacement("a", "b")
        with pytest.raises(AttributeError):
            rep.search_for = ("c",)  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        assert Replacement("ab", "X") == Replacement(("a", "b"), ["X"])
        assert len({Replacement("ab", "X"), Replacement.new("ab", "X")}) == 1

    def test_len_is_search_length(self) -> None:
        assert len(Replacement(b"abc", b"")) == 3

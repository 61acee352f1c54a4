"""Tests for streamreplace.profiling — replace profiling API."""

from streamreplace import replace, replace_all
from streamreplace.profiling import (
    ReplaceAccumulator,
    get_replace_accumulator,
    profiled_replace,
)


class TestGetReplaceAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_replace_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_replace():
            pass
        assert get_replace_accumulator() is None


class TestProfiledReplace:
    def test_yields_accumulator(self) -> None:
        with profiled_replace() as acc:
            assert isinstance(acc, ReplaceAccumulator)
            assert get_replace_accumulator() is acc

    def test_records_tokens(self) -> None:
        with profiled_replace() as acc:
            out = list(replace([1, 2, 3], [2], [10, 20]))
        assert out == [1, 10, 20, 3]
        assert acc.tokens_consumed == 3
        assert acc.tokens_emitted == 4
        assert acc.commits == 1
        assert acc.flushes == 2
        assert acc.drains == 0

    def test_records_drain(self) -> None:
        with profiled_replace() as acc:
            list(replace("xab", "abc", "X"))
        assert acc.drains == 1
        assert acc.commits == 0

    def test_accumulates_across_engines(self) -> None:
        with profiled_replace() as acc:
            list(replace_all("ab", [("a", "A")]))
            list(replace_all("ab", [("b", "B")]))
        assert acc.tokens_consumed == 4
        assert acc.commits == 2

    def test_engine_built_outside_not_recorded(self) -> None:
        engine = replace([1, 2], [2], [3])
        with profiled_replace() as acc:
            list(engine)
        assert acc.tokens_consumed == 0

    def test_total_duration_positive(self) -> None:
        with profiled_replace() as acc:
            list(replace(range(1000), [5, 6], [0]))
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ReplaceAccumulator().summary()
        assert summary["tokens_consumed"] == 0
        assert summary["commits"] == 0
        assert set(summary) == {
            "total_ms",
            "tokens_consumed",
            "tokens_emitted",
            "commits",
            "flushes",
            "drains",
        }

    def test_summary_after_replace(self) -> None:
        with profiled_replace() as acc:
            list(replace("aXa", "X", "YY"))
        summary = acc.summary()
        assert summary["tokens_emitted"] == 4
        assert isinstance(summary["total_ms"], float)

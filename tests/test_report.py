import pytest

from keybench.report import format_elapsed, format_identity, format_report, format_result
from keybench.types.key_kind import KeyKind
from keybench.types.timing import TimingResult


def test_single_sample_line():
    result = TimingResult("literal text key", 0.0421337, 1000, (0.0421337,))
    assert format_result(result) == "literal text key: 0.042134s  (42133.7 ns/lookup)"


def test_result_without_samples():
    assert format_result(TimingResult("t", 0.5)) == "t: 0.500000s"


def test_repeated_line_shows_spread():
    result = TimingResult.from_samples("t", 10, [0.3, 0.1, 0.2])
    line = format_result(result)
    assert line.startswith("t: 0.100000s")
    assert "median 0.200000s" in line
    assert "stdev 0.100000s" in line
    assert line.endswith("n=3)")


def test_report_keeps_order():
    results = [TimingResult(label, 0.0) for label in ("b", "a", "c")]
    assert [line.split(":")[0] for line in format_report(results)] == ["b", "a", "c"]


def test_identity_line():
    assert format_identity(KeyKind.INTERNED, 42, 42) == "Interned: 42 vs 42"


def test_format_elapsed_rounds_to_microseconds():
    assert format_elapsed(1.0000004) == "1.000000s"


# -----------------------------------------------------
# TimingResult
# -----------------------------------------------------

def test_summary_statistics():
    stats = TimingResult.from_samples("t", 10, [1.0, 2.0, 3.0, 6.0]).summary()
    assert stats.best == 1.0
    assert stats.worst == 6.0
    assert stats.mean == pytest.approx(3.0)
    assert stats.median == pytest.approx(2.5)
    assert stats.stdev == pytest.approx(2.1602469)
    assert stats.n == 4


def test_summary_of_single_sample_has_no_spread():
    stats = TimingResult.from_samples("t", 10, [0.25]).summary()
    assert stats.stdev == 0.0
    assert stats.best == stats.worst == stats.median == 0.25


def test_per_lookup():
    assert TimingResult("t", 2.0, 4).per_lookup() == 0.5
    assert TimingResult("t", 0.0, 0).per_lookup() == 0.0

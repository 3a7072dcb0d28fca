"""Formatting of the timing report and the identity diagnostics."""

from __future__ import annotations

from typing import Iterable

from keybench.types.key_kind import KeyKind
from keybench.types.timing import TimingResult


def format_elapsed(seconds: float) -> str:
    return f"{seconds:.6f}s"


def format_result(result: TimingResult) -> str:
    """One report line: "<label>: <elapsed>", then per-lookup cost and spread."""
    line = f"{result.label}: {format_elapsed(result.elapsed)}"
    notes = []
    if result.iterations > 0:
        notes.append(f"{result.per_lookup() * 1e9:.1f} ns/lookup")
    stats = result.summary()
    if stats.n > 1:
        notes.append(f"median {format_elapsed(stats.median)}")
        notes.append(f"stdev {format_elapsed(stats.stdev)}")
        notes.append(f"n={stats.n}")
    if notes:
        line += f"  ({', '.join(notes)})"
    return line


def format_report(results: Iterable[TimingResult]) -> list[str]:
    return [format_result(r) for r in results]


def format_identity(kind: KeyKind, first: int, second: int) -> str:
    return f"{kind}: {first} vs {second}"

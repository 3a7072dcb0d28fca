"""Lookup benchmark over text, interned and integer keys.

The runner owns three single-entry tables and three keys held in variables.
Each scenario closes over either a key written inline ("literal") or one of
those variables, and is timed over a fixed number of lookups. Afterwards the
identity diagnostics show which key kinds the runtime shares between equal
literals.

Python has no symbol literal, so the literal interned scenario spells the key
as ``Symbol("ruby")``: every lookup pays a symbol-table lookup in
``Symbol.__new__`` plus a Python-level ``__hash__`` call. Those numbers
measure naming a symbol from Python, not a bare interned-key hash probe; the
variable interned scenario only pays the ``__hash__`` call.
"""

from __future__ import annotations

import logging
from timeit import timeit

from keybench import Key, LookupFn
from keybench.config import Settings
from keybench.errors import ScenarioError
from keybench.report import format_identity, format_report
from keybench.types.key_kind import KeyKind
from keybench.types.lookup_table import LookupTable
from keybench.types.symbol import Symbol
from keybench.types.timing import TimingResult

logger = logging.getLogger(__name__)

TEXT_KEY = "ruby"
INTERNED_NAME = "ruby"
INTEGER_KEY = 1

DESCRIPTIONS = {
    kind: f"{kind.display.lower()} key, assumes {kind.equality}" for kind in KeyKind
}

# Values the identity diagnostics build literal instances from
_DIAGNOSTIC_VALUES: dict[KeyKind, Key] = {
    KeyKind.TEXT: TEXT_KEY,
    KeyKind.INTERNED: INTERNED_NAME,
    KeyKind.INTEGER: INTEGER_KEY,
}


class BenchmarkRunner:
    """Runs the six lookup scenarios and reports on them."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.results: list[TimingResult] = []

        self.text_table = LookupTable(TEXT_KEY, DESCRIPTIONS[KeyKind.TEXT])
        self.interned_table = LookupTable(Symbol(INTERNED_NAME), DESCRIPTIONS[KeyKind.INTERNED])
        self.integer_table = LookupTable(INTEGER_KEY, DESCRIPTIONS[KeyKind.INTEGER])

        # Same keys again, held in variables instead of spelled inline
        self.text_key = KeyKind.TEXT.literal(TEXT_KEY)
        self.interned_key = Symbol(INTERNED_NAME)
        self.integer_key = INTEGER_KEY
        logger.debug("tables ready: %r, %r, %r",
                     self.text_table, self.interned_table, self.integer_table)

    # -----------------------------------------------------
    # Scenarios
    # -----------------------------------------------------

    def scenarios(self) -> list[tuple[str, LookupFn]]:
        """The six (label, lookup) pairs, in run order."""
        text_table = self.text_table
        interned_table = self.interned_table
        integer_table = self.integer_table
        text_key = self.text_key
        interned_key = self.interned_key
        integer_key = self.integer_key
        return [
            ("literal text key", lambda: text_table["ruby"]),
            ("literal interned key", lambda: interned_table[Symbol("ruby")]),
            ("literal integer key", lambda: integer_table[1]),
            ("variable text key", lambda: text_table[text_key]),
            ("variable interned key", lambda: interned_table[interned_key]),
            ("variable integer key", lambda: integer_table[integer_key]),
        ]

    def run_scenario(self, label: str, iterations: int, lookup_fn: LookupFn) -> TimingResult:
        """Call `lookup_fn` `iterations` times per repeat and record the time.

        Only the calls themselves are timed. With several repeats the result
        keeps every sample and reports the best one.
        """
        if iterations < 0:
            raise ScenarioError(f"iterations must be >= 0, got {iterations}")
        if self.settings.repeat < 1:
            raise ScenarioError(f"repeat must be >= 1, got {self.settings.repeat}")
        if not callable(lookup_fn):
            raise ScenarioError(f"lookup for {label!r} is not callable")

        samples = [timeit(lookup_fn, number=iterations) for _ in range(self.settings.repeat)]
        result = TimingResult.from_samples(label, iterations, samples)
        self.results.append(result)
        logger.debug("%s: %d x %d lookups, best %.6fs",
                     label, self.settings.repeat, iterations, result.elapsed)
        return result

    def run_all(self, iterations: int | None = None) -> list[TimingResult]:
        """Warm up and time each scenario in order; returns this run's results."""
        if iterations is None:
            iterations = self.settings.iterations
        start = len(self.results)
        for label, lookup_fn in self.scenarios():
            for _ in range(self.settings.warmup):
                lookup_fn()
            self.run_scenario(label, iterations, lookup_fn)
        return self.results[start:]

    # -----------------------------------------------------
    # Output
    # -----------------------------------------------------

    def print_report(self, results: list[TimingResult] | None = None) -> None:
        """Print `results`, or every result this runner has recorded."""
        for line in format_report(self.results if results is None else results):
            print(line)

    def identity_diagnostics(self) -> list[tuple[KeyKind, int, int]]:
        """Identity tokens of two fresh literals per kind, taken twice per kind."""
        rows = []
        for kind, value in _DIAGNOSTIC_VALUES.items():
            for _ in range(2):
                first, second = kind.identity_pair(value)
                rows.append((kind, first, second))
        return rows

    def print_identity_diagnostics(self) -> None:
        for kind, first, second in self.identity_diagnostics():
            print(format_identity(kind, first, second))

    def run(self) -> list[TimingResult]:
        results = self.run_all()
        self.print_report(results)
        print()
        self.print_identity_diagnostics()
        return results

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

import numpy as np


class TimingSummary(NamedTuple):
    best: float
    mean: float
    median: float
    stdev: float
    worst: float
    n: int


@dataclass(frozen=True)
class TimingResult:
    """Wall-clock cost of one scenario.

    `samples` holds the total elapsed seconds of each timed repeat; every
    sample covers `iterations` lookups. `elapsed` is the best sample, which is
    the one least disturbed by the rest of the machine.
    """
    label: str
    elapsed: float
    iterations: int = 0
    samples: tuple[float, ...] = field(default=())

    @classmethod
    def from_samples(cls, label: str, iterations: int, samples) -> TimingResult:
        samples = tuple(float(s) for s in samples)
        return cls(label, min(samples), iterations, samples)

    def per_lookup(self) -> float:
        """Seconds per single lookup (0.0 when nothing was looked up)."""
        if self.iterations <= 0:
            return 0.0
        return self.elapsed / self.iterations

    def summary(self) -> TimingSummary:
        arr = np.asarray(self.samples or (self.elapsed,), dtype=np.float64)
        return TimingSummary(
            best=float(arr.min()),
            mean=float(arr.mean()),
            median=float(np.median(arr)),
            # Sample standard deviation; a single sample has no spread
            stdev=float(arr.std(ddof=1)) if arr.size > 1 else 0.0,
            worst=float(arr.max()),
            n=int(arr.size),
        )

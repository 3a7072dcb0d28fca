from keybench.types.symbol import Symbol
from keybench.types.key_kind import KeyKind
from keybench.types.lookup_table import LookupTable
from keybench.types.timing import TimingResult, TimingSummary

__all__ = ["Symbol", "KeyKind", "LookupTable", "TimingResult", "TimingSummary"]

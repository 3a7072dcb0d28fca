# Core type aliases for keybench.
# Keys are plain Python objects (str, int) or keybench Symbols; the tables
# store description strings. Nothing here wraps the runtime's own types.

from typing import Any, Callable, Hashable

__version__ = "0.1.0"

# Any hashable object usable as a lookup-table key
Key = Hashable
# Value stored against a key
Value = Any

# Zero-argument callable performing exactly one table lookup
LookupFn = Callable[[], Value]

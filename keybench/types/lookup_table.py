"""Read-only, single-entry lookup tables.

A LookupTable is a ``dict`` subclass so that reads go through the C
implementation of dict lookup unchanged; only the mutating methods are
overridden, and all of them refuse.
"""

from __future__ import annotations

from keybench import Key, Value
from keybench.errors import ReadOnlyTableError
from keybench.types.key_kind import KeyKind


class LookupTable(dict):
    """Mapping holding exactly one key/value pair for its whole lifetime."""

    __slots__ = ("kind",)

    def __init__(self, key: Key, value: Value):
        super().__init__(((key, value),))
        self.kind: KeyKind = KeyKind.of(key)

    def _refuse(self, *args, **kwargs):
        raise ReadOnlyTableError(f"{self.kind} lookup table is read-only")

    __setitem__ = _refuse
    __delitem__ = _refuse
    __ior__ = _refuse
    update = _refuse
    pop = _refuse
    popitem = _refuse
    clear = _refuse
    setdefault = _refuse

    @property
    def key(self) -> Key:
        return next(iter(self))

    @property
    def value(self) -> Value:
        return next(iter(self.values()))

    def __reduce__(self):
        return (LookupTable, (self.key, self.value))

    def __repr__(self):
        return f"LookupTable({self.key!r}: {self.value!r})"

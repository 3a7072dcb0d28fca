from __future__ import annotations
import sys


class Symbol:
    """An interned identifier: one object per name for the life of the process."""
    __slots__ = ("name", "_hash")

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = object.__new__(cls)
            sym.name = sys.intern(name)
            # Fixed at creation; lookups never rehash the name
            sym._hash = hash(sym.name)
            cls._table[sym.name] = sym
        return sym

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return self._hash

    def __reduce__(self):
        return (Symbol, (self.name,))

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name

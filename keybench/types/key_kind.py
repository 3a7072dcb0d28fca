"""Key kinds compared by the benchmark.

Each kind knows how to build a fresh *literal instance* of a key, i.e. what the
host runtime hands back when the same key is written out again in source:

- TEXT builds a new ``str`` every time, so equal keys are distinct objects.
- INTERNED resolves through the symbol table, so equal keys are one object.
- INTEGER parses the value back into an ``int``; CPython caches small ints,
  so equal small keys are one object.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from keybench import Key
from keybench.types.symbol import Symbol


def _fresh_text(content: str) -> str:
    # join() allocates a new str for multi-character input, unlike a literal
    # which the compiler folds into one shared constant
    return "".join(list(content))


def _fresh_integer(value: int) -> int:
    return int(str(value))


class KeyKind(Enum):
    TEXT = ("Text", "content equality", _fresh_text)
    INTERNED = ("Interned", "identity equality", Symbol)
    INTEGER = ("Integer", "numeric equality", _fresh_integer)

    def __init__(self, display: str, equality: str, factory: Callable[..., Key]):
        self.display = display
        self.equality = equality
        self._factory = factory

    def literal(self, value) -> Key:
        """Build one independent literal instance of `value` for this kind."""
        return self._factory(value)

    def literal_pair(self, value) -> tuple[Key, Key]:
        """Two independent literal instances, both alive at once."""
        return self.literal(value), self.literal(value)

    def identity_pair(self, value) -> tuple[int, int]:
        """Runtime identity tokens of two independent literal instances."""
        first, second = self.literal_pair(value)
        # Both references are held here, so a freed object's address cannot
        # be reused for the second instance
        return id(first), id(second)

    @classmethod
    def of(cls, key: Key) -> KeyKind:
        if isinstance(key, Symbol):
            return cls.INTERNED
        if isinstance(key, str):
            return cls.TEXT
        if isinstance(key, int) and not isinstance(key, bool):
            return cls.INTEGER
        raise TypeError(f"No key kind for {type(key).__name__}")

    def __str__(self):
        return self.display

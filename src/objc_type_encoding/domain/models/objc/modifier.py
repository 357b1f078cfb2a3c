#!/usr/bin/env python3

"""Type qualifier model for Objective-C type encodings."""

from enum import Enum


class Modifier(Enum):
    """Single-character qualifiers that prefix a type encoding.

    The value of each member is its encoding character. Qualifiers are
    stackable, so ``rn^i`` reads as const(in(pointer(int))).
    """

    COMPLEX = "j"
    ATOMIC = "A"
    CONST = "r"
    IN = "n"
    INOUT = "N"
    OUT = "o"
    BYCOPY = "O"
    BYREF = "R"
    ONEWAY = "V"
    REGISTER = "+"

    @classmethod
    def from_char(cls, char: str) -> "Modifier | None":
        """Return the qualifier for an encoding character, or None."""
        try:
            return cls(char)
        except ValueError:
            return None

    def encoded(self) -> str:
        """The type encoding of the qualifier."""
        return self.value

    @property
    def keyword(self) -> str:
        """Declaration keyword used when rendering the qualified type."""
        return _KEYWORDS[self]


_KEYWORDS: dict[Modifier, str] = {
    Modifier.COMPLEX: "_Complex",
    Modifier.ATOMIC: "_Atomic",
    Modifier.CONST: "const",
    Modifier.IN: "in",
    Modifier.INOUT: "inout",
    Modifier.OUT: "out",
    Modifier.BYCOPY: "bycopy",
    Modifier.BYREF: "byref",
    Modifier.ONEWAY: "oneway",
    Modifier.REGISTER: "register",
}

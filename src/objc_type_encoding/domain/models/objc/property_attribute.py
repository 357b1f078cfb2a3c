#!/usr/bin/env python3

"""Property attribute model for Objective-C property attribute strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .type_node import TypeNode


class PropertyAttributeKind(Enum):
    """Attribute codes used in runtime property attribute strings."""

    TYPE = "T"
    READONLY = "R"
    COPY = "C"
    RETAIN = "&"
    NONATOMIC = "N"
    GETTER = "G"
    SETTER = "S"
    DYNAMIC = "D"
    WEAK = "W"
    IVAR = "V"
    OTHER = ""

    @classmethod
    def from_code(cls, code: str) -> PropertyAttributeKind:
        if not code:
            return cls.OTHER
        try:
            return cls(code)
        except ValueError:
            return cls.OTHER

    @property
    def takes_value(self) -> bool:
        return self in _VALUED_KINDS


_VALUED_KINDS = frozenset(
    {
        PropertyAttributeKind.TYPE,
        PropertyAttributeKind.GETTER,
        PropertyAttributeKind.SETTER,
        PropertyAttributeKind.IVAR,
        PropertyAttributeKind.OTHER,
    }
)


@dataclass(frozen=True)
class PropertyAttribute:
    """A single attribute of a property.

    ``value`` holds the type encoding for TYPE, the selector or ivar name for
    GETTER/SETTER/IVAR, and the complete raw text for OTHER.
    """

    kind: PropertyAttributeKind
    value: str = ""

    @property
    def type(self) -> TypeNode | None:
        """Decoded type for a TYPE attribute, otherwise None."""
        if self.kind is not PropertyAttributeKind.TYPE:
            return None
        from ...services.parsing.type_decoder import decode

        return decode(self.value)

    def encoded(self) -> str:
        if self.kind is PropertyAttributeKind.OTHER:
            return self.value
        return self.kind.value + self.value

    def __str__(self) -> str:
        return self.encoded()

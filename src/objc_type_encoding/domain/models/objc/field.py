#!/usr/bin/env python3

"""Struct/union member model for Objective-C type encodings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .type_node import TypeNode


@dataclass(frozen=True)
class Field:
    """One member of a struct or union.

    For bit-fields ``bit_width`` is set and ``type`` is conventionally
    ``Primitive.INT``; the encoding then carries only the width.
    """

    type: TypeNode
    name: str | None = None
    bit_width: int | None = None

    @property
    def is_bit_field(self) -> bool:
        return self.bit_width is not None

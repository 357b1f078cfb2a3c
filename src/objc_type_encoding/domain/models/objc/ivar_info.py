#!/usr/bin/env python3

"""Instance variable information model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .type_node import TypeNode


@dataclass(frozen=True)
class IvarInfo:
    """Information about an instance variable."""

    name: str
    type_encoding: str
    offset: int | None = None

    @property
    def type(self) -> TypeNode | None:
        from ...services.parsing.type_decoder import decode

        return decode(self.type_encoding)

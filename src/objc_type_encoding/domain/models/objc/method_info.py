#!/usr/bin/env python3

"""Method information model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .method_signature import MethodSignature
    from .type_node import TypeNode

# self and _cmd
IMPLICIT_ARGUMENT_COUNT = 2


@dataclass(frozen=True)
class MethodInfo:
    """Information about a method: selector name plus its type encoding."""

    name: str
    type_encoding: str
    is_class_method: bool = False

    @property
    def signature(self) -> MethodSignature:
        from ...services.parsing.method_signature_parser import parse_method_signature

        return parse_method_signature(self.type_encoding)

    @property
    def return_type(self) -> TypeNode:
        return self.signature.return_type

    @property
    def argument_types(self) -> list[TypeNode]:
        """Decoded types of every encoded argument, receivers included."""
        return self.signature.argument_types

    @property
    def parameter_types(self) -> list[TypeNode]:
        """Decoded types of the explicit parameters after ``self`` and ``_cmd``."""
        return self.argument_types[IMPLICIT_ARGUMENT_COUNT:]

    @property
    def selector_labels(self) -> list[str]:
        """Selector pieces, e.g. ``["initWithFrame", "style"]``; empty for unary selectors."""
        if ":" not in self.name:
            return []
        return self.name.split(":")[:-1]

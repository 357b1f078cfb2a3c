#!/usr/bin/env python3

"""Method signature model for Objective-C method type encodings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .type_node import TypeNode


@dataclass(frozen=True)
class MethodValue:
    """A return value or argument of a method.

    The type is kept as raw encoding text; ``type`` decodes it on demand.
    """

    type_encoding: str
    offset: int | None = None

    @property
    def type(self) -> TypeNode:
        """Decoded type, or ``Primitive.UNKNOWN`` when the text does not decode."""
        from ...services.parsing.type_decoder import decode
        from .type_node import Primitive

        decoded = decode(self.type_encoding)
        return decoded if decoded is not None else Primitive.UNKNOWN

    def encoded(self) -> str:
        """Type encoding followed by the stack offset, if any."""
        if self.offset is None:
            return self.type_encoding
        return f"{self.type_encoding}{self.offset}"


@dataclass(frozen=True)
class MethodSignature:
    """Return value, stack size and arguments of a method type encoding.

    ``arguments`` includes the implicit ``self`` and ``_cmd`` receivers when
    the encoding came from the runtime.
    """

    return_value: MethodValue
    arguments: tuple[MethodValue, ...] = field(default_factory=tuple)
    stack_size: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.arguments, tuple):
            object.__setattr__(self, "arguments", tuple(self.arguments))

    @classmethod
    def build(
        cls,
        return_type: str,
        arguments: Iterable[tuple[str, int | None]] = (),
        stack_size: int | None = None,
    ) -> MethodSignature:
        """Build a signature from raw type encodings and offsets."""
        return cls(
            return_value=MethodValue(return_type),
            arguments=tuple(MethodValue(encoding, offset) for encoding, offset in arguments),
            stack_size=stack_size,
        )

    @property
    def return_type(self) -> TypeNode:
        return self.return_value.type

    @property
    def argument_types(self) -> list[TypeNode]:
        return [argument.type for argument in self.arguments]

    def encoded(self) -> str:
        """The method type encoding this signature was parsed from."""
        stack = "" if self.stack_size is None else str(self.stack_size)
        return self.return_value.encoded() + stack + "".join(a.encoded() for a in self.arguments)

    def __str__(self) -> str:
        return self.encoded()

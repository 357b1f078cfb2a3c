#!/usr/bin/env python3

"""Structured representation of an Objective-C type encoding.

A decoded encoding is a tree of the node classes below. Every node is a
frozen dataclass, so trees are immutable, hashable and compare structurally.
Child sequences are stored as tuples; constructors accept any iterable.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from .modifier import Modifier

if TYPE_CHECKING:
    from .field import Field


class Primitive(Enum):
    """Scalar types that encode as a single character."""

    CLASS = "#"
    SELECTOR = ":"
    CHAR = "c"
    UCHAR = "C"
    SHORT = "s"
    USHORT = "S"
    INT = "i"
    UINT = "I"
    LONG = "l"
    ULONG = "L"
    LONG_LONG = "q"
    ULONG_LONG = "Q"
    INT128 = "t"
    UINT128 = "T"
    FLOAT = "f"
    DOUBLE = "d"
    LONG_DOUBLE = "D"
    BOOL = "B"
    VOID = "v"
    VOID_CONST = "1"
    VOID_IN = "2"
    UNKNOWN = "?"
    CHAR_PTR = "*"
    ATOM = "%"

    def encoded(self) -> str:
        return self.value


@dataclass(frozen=True)
class ObjectType:
    """An object pointer; ``class_name`` None means plain ``id``.

    Protocol-qualified names keep their angle brackets, e.g. ``<NSCopying>``.
    """

    class_name: str | None = None

    @property
    def is_protocol(self) -> bool:
        name = self.class_name
        return name is not None and name.startswith("<") and name.endswith(">")


@dataclass(frozen=True)
class BlockType:
    """A block, optionally carrying its embedded signature.

    ``return_type`` and ``param_types`` are either both None (opaque ``@?``)
    or both present.
    """

    return_type: TypeNode | None = None
    param_types: tuple[TypeNode, ...] | None = None

    def __post_init__(self) -> None:
        if (self.return_type is None) != (self.param_types is None):
            raise ValueError("BlockType needs both return_type and param_types, or neither")
        if self.param_types is not None and not isinstance(self.param_types, tuple):
            object.__setattr__(self, "param_types", tuple(self.param_types))

    @property
    def has_signature(self) -> bool:
        return self.return_type is not None


@dataclass(frozen=True)
class FunctionPointer:
    """Opaque function pointer (``^?``)."""


@dataclass(frozen=True)
class ArrayType:
    element_type: TypeNode
    count: int | None = None


@dataclass(frozen=True)
class PointerType:
    pointee: TypeNode


@dataclass(frozen=True)
class BitFieldType:
    """Bit-field of ``width`` bits; only meaningful inside an aggregate."""

    width: int


class AggregateKind(Enum):
    """Struct and union share a shape and differ only in delimiters."""

    STRUCT = "struct"
    UNION = "union"

    @property
    def open(self) -> str:
        return "{" if self is AggregateKind.STRUCT else "("

    @property
    def close(self) -> str:
        return "}" if self is AggregateKind.STRUCT else ")"


@dataclass(frozen=True)
class _Aggregate:
    """Common shape of structs and unions.

    ``fields`` None is an opaque or forward-declared aggregate; an empty tuple
    is an aggregate known to have no fields.
    """

    name: str | None = None
    fields: tuple[Field, ...] | None = None

    kind = AggregateKind.STRUCT

    def __post_init__(self) -> None:
        if self.fields is not None and not isinstance(self.fields, tuple):
            object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def is_opaque(self) -> bool:
        return self.fields is None


@dataclass(frozen=True)
class StructType(_Aggregate):
    kind = AggregateKind.STRUCT


@dataclass(frozen=True)
class UnionType(_Aggregate):
    kind = AggregateKind.UNION


@dataclass(frozen=True)
class ModifiedType:
    """A qualifier applied to an inner type."""

    modifier: Modifier
    inner: TypeNode

    def unwrapped(self) -> TypeNode:
        """Return the innermost type with every qualifier stripped."""
        node: TypeNode = self
        while isinstance(node, ModifiedType):
            node = node.inner
        return node


@dataclass(frozen=True)
class OtherType:
    """Encoding text kept verbatim because it is not modelled further."""

    raw: str


TypeNode = Union[
    Primitive,
    ObjectType,
    BlockType,
    FunctionPointer,
    ArrayType,
    PointerType,
    BitFieldType,
    StructType,
    UnionType,
    ModifiedType,
    OtherType,
]


def make_aggregate(
    kind: AggregateKind, name: str | None, fields: Iterable[Field] | None
) -> StructType | UnionType:
    """Build a struct or union node for ``kind``."""
    node_class = StructType if kind is AggregateKind.STRUCT else UnionType
    return node_class(name=name, fields=None if fields is None else tuple(fields))

#!/usr/bin/env python3

"""C-like declaration rendering for decoded type encodings.

The output is meant for documentation and debugging, e.g.::

    struct CGPoint {
        double x;
        double y;
    }

It is deterministic but not guaranteed to be compilable C.
"""

from ....infrastructure.config import get_config
from ...models.objc.field import Field
from ...models.objc.type_node import (
    ArrayType,
    BitFieldType,
    BlockType,
    FunctionPointer,
    ModifiedType,
    ObjectType,
    OtherType,
    PointerType,
    Primitive,
    StructType,
    TypeNode,
    UnionType,
)

PRIMITIVE_DECLARATIONS: dict[Primitive, str] = {
    Primitive.CLASS: "Class",
    Primitive.SELECTOR: "SEL",
    Primitive.CHAR: "char",
    Primitive.UCHAR: "unsigned char",
    Primitive.SHORT: "short",
    Primitive.USHORT: "unsigned short",
    Primitive.INT: "int",
    Primitive.UINT: "unsigned int",
    Primitive.LONG: "long",
    Primitive.ULONG: "unsigned long",
    Primitive.LONG_LONG: "long long",
    Primitive.ULONG_LONG: "unsigned long long",
    Primitive.INT128: "__int128_t",
    Primitive.UINT128: "__uint128_t",
    Primitive.FLOAT: "float",
    Primitive.DOUBLE: "double",
    Primitive.LONG_DOUBLE: "long double",
    Primitive.BOOL: "BOOL",
    Primitive.VOID: "void",
    Primitive.VOID_CONST: "void",
    Primitive.VOID_IN: "void",
    Primitive.UNKNOWN: "unknown",
    Primitive.CHAR_PTR: "char *",
    Primitive.ATOM: "atom",
}

# Objective-C BOOL is encoded as a signed char on some platforms
BOOL_LIKE_PRIMITIVES = frozenset({Primitive.CHAR, Primitive.UCHAR})


class DeclarationPrinter:
    """Renders TypeNode trees and fields as C-like declarations."""

    def __init__(self, indent: str | None = None, placeholder_prefix: str | None = None) -> None:
        """
        Initialize the printer.

        Args:
            indent: Text prefixed to each nesting level of aggregate bodies
                (defaults to the DEFAULT_INDENT setting)
            placeholder_prefix: Prefix for names of unnamed fields, suffixed
                with the field position (defaults to FIELD_PLACEHOLDER_PREFIX)
        """
        config = get_config()
        self.indent = indent if indent is not None else config["DEFAULT_INDENT"]
        self.placeholder_prefix = (
            placeholder_prefix
            if placeholder_prefix is not None
            else config["FIELD_PLACEHOLDER_PREFIX"]
        )

    def type_declaration(self, node: TypeNode) -> str:
        """Render a type, e.g. ``NSString *`` or a multi-line struct body."""
        if isinstance(node, Primitive):
            return PRIMITIVE_DECLARATIONS[node]
        if isinstance(node, ObjectType):
            if node.class_name is None:
                return "id"
            if node.is_protocol:
                return f"id {node.class_name}"
            return f"{node.class_name} *"
        if isinstance(node, BlockType):
            if node.return_type is None or node.param_types is None:
                return "id /* block */"
            params = ", ".join(self.type_declaration(param) for param in node.param_types)
            return f"{self.type_declaration(node.return_type)} (^)({params})"
        if isinstance(node, FunctionPointer):
            return "void * /* function pointer */"
        if isinstance(node, ArrayType):
            count = "" if node.count is None else str(node.count)
            return f"{self.type_declaration(node.element_type)}[{count}]"
        if isinstance(node, PointerType):
            return f"{self.type_declaration(node.pointee)} *"
        if isinstance(node, BitFieldType):
            return f"int {self.placeholder_prefix} : {node.width}"
        if isinstance(node, (StructType, UnionType)):
            return self._aggregate_declaration(node)
        if isinstance(node, ModifiedType):
            return f"{node.modifier.keyword} {self.type_declaration(node.inner)}"
        if isinstance(node, OtherType):
            return node.raw
        raise TypeError(f"Cannot render {type(node).__name__}: {node!r}")

    def _aggregate_declaration(self, node: StructType | UnionType) -> str:
        keyword = node.kind.value
        if not node.fields:
            return f"{keyword} {node.name or '{}'}"

        header = f"{keyword} {node.name} {{" if node.name else f"{keyword} {{"
        body = "\n".join(
            self._indented(self.field_declaration(field, f"{self.placeholder_prefix}{index}"))
            for index, field in enumerate(node.fields)
        )
        return f"{header}\n{body}\n}}"

    def _indented(self, text: str) -> str:
        return "\n".join(self.indent + line for line in text.split("\n"))

    def field_declaration(self, field: Field, fallback_name: str | None = None) -> str:
        """Render a member as ``type name;`` or ``type name : width;``."""
        name = field.name or fallback_name or self.placeholder_prefix
        type_text = self.type_declaration(field.type)
        if field.bit_width is not None:
            return f"{type_text} {name} : {field.bit_width};"
        return f"{type_text} {name};"

    def argument_declaration(self, node: TypeNode) -> str:
        """
        Render a type on one line for use inside a method, ivar or property header.

        Named structs and unions collapse to their name, ``char`` renders as
        ``BOOL``, and multi-line bodies are joined with single spaces.
        """
        if isinstance(node, (StructType, UnionType)) and node.name:
            return node.name
        if node is Primitive.CHAR:
            return PRIMITIVE_DECLARATIONS[Primitive.BOOL]
        flat = DeclarationPrinter(indent="", placeholder_prefix=self.placeholder_prefix)
        return " ".join(flat.type_declaration(node).split("\n"))


def decoded(node: TypeNode, indent: str | None = None) -> str:
    """Render ``node`` as a C-like declaration."""
    return DeclarationPrinter(indent).type_declaration(node)


def decoded_field(field: Field, fallback_name: str | None = None, indent: str | None = None) -> str:
    """Render a struct/union member; unnamed members use ``fallback_name``."""
    return DeclarationPrinter(indent).field_declaration(field, fallback_name)


def decoded_for_argument(node: TypeNode) -> str:
    """Render ``node`` on a single line as used in method and property headers."""
    return DeclarationPrinter().argument_declaration(node)

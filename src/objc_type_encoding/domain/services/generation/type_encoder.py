#!/usr/bin/env python3

"""Serializer turning TypeNode trees back into type-encoding text.

The output mirrors the decoder's grammar, so ``decode(encode(node))`` gives
back a structurally equal tree for every node the decoder can produce.
"""

from ...models.objc.encoding_constants import (
    ANONYMOUS_NAME_ENCODING,
    ARRAY_CLOSE,
    ARRAY_OPEN,
    BIT_FIELD_CHAR,
    BLOCK_PREFIX,
    BLOCK_SIGNATURE_CLOSE,
    BLOCK_SIGNATURE_OPEN,
    FUNCTION_POINTER_PREFIX,
    NAME_SEPARATOR,
    POINTER_CHAR,
    QUOTE,
)
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


def encode(node: TypeNode) -> str:
    """
    Encode a type as Objective-C type-encoding text.

    Args:
        node: Type to encode

    Returns:
        Encoding text, e.g. ``^{CGPoint=dd}``

    Raises:
        TypeError: If ``node`` is not a TypeNode
    """
    if isinstance(node, Primitive):
        return node.value
    if isinstance(node, ObjectType):
        if node.class_name is None:
            return "@"
        return f"@{QUOTE}{node.class_name}{QUOTE}"
    if isinstance(node, BlockType):
        if node.return_type is None or node.param_types is None:
            return BLOCK_PREFIX
        params = "".join(encode(param) for param in node.param_types)
        return (
            f"{BLOCK_PREFIX}{BLOCK_SIGNATURE_OPEN}{encode(node.return_type)}"
            f"{BLOCK_PREFIX}{params}{BLOCK_SIGNATURE_CLOSE}"
        )
    if isinstance(node, FunctionPointer):
        return FUNCTION_POINTER_PREFIX
    if isinstance(node, ArrayType):
        count = "" if node.count is None else str(node.count)
        return f"{ARRAY_OPEN}{count}{encode(node.element_type)}{ARRAY_CLOSE}"
    if isinstance(node, PointerType):
        return POINTER_CHAR + encode(node.pointee)
    if isinstance(node, BitFieldType):
        return f"{BIT_FIELD_CHAR}{node.width}"
    if isinstance(node, (StructType, UnionType)):
        return _encode_aggregate(node)
    if isinstance(node, ModifiedType):
        return node.modifier.encoded() + encode(node.inner)
    if isinstance(node, OtherType):
        return node.raw
    raise TypeError(f"Cannot encode {type(node).__name__}: {node!r}")


def _encode_aggregate(node: StructType | UnionType) -> str:
    kind = node.kind
    if node.fields is None:
        return f"{kind.open}{node.name or ''}{kind.close}"
    name = node.name if node.name is not None else ANONYMOUS_NAME_ENCODING
    fields = "".join(encode_field(field) for field in node.fields)
    return f"{kind.open}{name}{NAME_SEPARATOR}{fields}{kind.close}"


def encode_field(field: Field) -> str:
    """Encode a struct/union member: optional quoted name, then type or bit width."""
    name = "" if field.name is None else f"{QUOTE}{field.name}{QUOTE}"
    if field.bit_width is not None:
        return f"{name}{BIT_FIELD_CHAR}{field.bit_width}"
    return name + encode(field.type)

#!/usr/bin/env python3

"""Character tables for the Objective-C type-encoding grammar.

The decoder and the method-signature splitter both dispatch on these
tables, so they are kept in one place.
"""

from .modifier import Modifier
from .type_node import ObjectType, Primitive, TypeNode

# Qualifier characters, in the order the runtime documents them
QUALIFIER_CHARS = frozenset(modifier.value for modifier in Modifier)

# Characters that decode to a complete type on their own.
# "1" and "2" (void sentinels) are dispatched separately by the decoder.
SIMPLE_TYPES: dict[str, TypeNode] = {
    "@": ObjectType(None),
    **{
        primitive.value: primitive
        for primitive in Primitive
        if primitive not in (Primitive.VOID_CONST, Primitive.VOID_IN)
    },
}

# Multi-character prefixes checked before the single-character table
BLOCK_PREFIX = "@?"
QUOTED_OBJECT_PREFIX = '@"'
FUNCTION_POINTER_PREFIX = "^?"

POINTER_CHAR = "^"
BIT_FIELD_CHAR = "b"
ARRAY_OPEN = "["
ARRAY_CLOSE = "]"
STRUCT_OPEN = "{"
STRUCT_CLOSE = "}"
UNION_OPEN = "("
UNION_CLOSE = ")"
BLOCK_SIGNATURE_OPEN = "<"
BLOCK_SIGNATURE_CLOSE = ">"
QUOTE = '"'
ESCAPE = "\\"
NAME_SEPARATOR = "="
VOID_CONST_CHAR = "1"
VOID_IN_CHAR = "2"

# Vector prefix ("!" then a digit run, then the element type); only skipped, never decoded
VECTOR_CHAR = "!"

# Closing delimiter for every bracketed construct
CLOSING_DELIMITERS: dict[str, str] = {
    ARRAY_OPEN: ARRAY_CLOSE,
    STRUCT_OPEN: STRUCT_CLOSE,
    UNION_OPEN: UNION_CLOSE,
    BLOCK_SIGNATURE_OPEN: BLOCK_SIGNATURE_CLOSE,
}

# Names the runtime uses for anonymous aggregates
ANONYMOUS_NAMES = frozenset({"?", ""})
ANONYMOUS_NAME_ENCODING = "?"

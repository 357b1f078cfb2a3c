#!/usr/bin/env python3

"""Recursive-descent decoder for Objective-C type encodings.

Turns encoding text such as ``{CGRect={CGPoint=dd}{CGSize=dd}}`` or
``@?<v@?@"NSError">`` into a tree of TypeNode values.

Every failure (unknown leading character, unterminated quote or bracket,
missing digits, nesting past the configured limit) is reported as None.
No partially decoded tree is ever returned and nothing is raised.
"""

from ....infrastructure.config import get_max_nesting_depth
from ....infrastructure.logging import get_logger
from ...exceptions import EncodingError
from ...models.objc.encoding_constants import (
    ANONYMOUS_NAMES,
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
    QUOTED_OBJECT_PREFIX,
    SIMPLE_TYPES,
    STRUCT_OPEN,
    UNION_OPEN,
    VOID_CONST_CHAR,
    VOID_IN_CHAR,
)
from ...models.objc.field import Field
from ...models.objc.modifier import Modifier
from ...models.objc.type_node import (
    AggregateKind,
    ArrayType,
    BitFieldType,
    BlockType,
    FunctionPointer,
    ModifiedType,
    ObjectType,
    PointerType,
    Primitive,
    TypeNode,
    make_aggregate,
)
from .encoding_cursor import EncodingCursor

logger = get_logger(__name__)


def _normalize_name(raw: str) -> str | None:
    return None if raw in ANONYMOUS_NAMES else raw


class TypeDecoder:
    """Decodes type-encoding text into TypeNode trees.

    The decoder holds no per-call state, so one instance can be shared
    between threads.
    """

    def __init__(self, max_depth: int | None = None) -> None:
        """Initialize the decoder.

        Args:
            max_depth: Deepest nesting accepted before input is treated as
                malformed; defaults to the MAX_NESTING_DEPTH setting
        """
        self.max_depth = max_depth if max_depth is not None else get_max_nesting_depth()

    def decode(self, text: str) -> TypeNode | None:
        """Decode the first type in ``text``, ignoring anything after it."""
        result = self.decode_with_remainder(text)
        return result[0] if result is not None else None

    def decode_with_remainder(self, text: str) -> tuple[TypeNode, str] | None:
        """
        Decode the first type in ``text``.

        Args:
            text: Type-encoding text

        Returns:
            The decoded type and the text following it, or None if ``text``
            does not start with a well-formed type
        """
        cursor = EncodingCursor(text)
        node = self.decode_next(cursor)
        if node is None:
            logger.debug(f"Could not decode type encoding {text!r}")
            return None
        return node, cursor.remaining

    def decode_next(self, cursor: EncodingCursor, depth: int = 0) -> TypeNode | None:
        """Decode one type at the cursor and advance past it."""
        if cursor.at_end:
            return None
        if depth > self.max_depth:
            logger.debug(f"Nesting deeper than {self.max_depth} at {cursor!r}")
            return None

        if cursor.startswith(BLOCK_PREFIX):
            return self._decode_block(cursor, depth)
        if cursor.startswith(QUOTED_OBJECT_PREFIX):
            return self._decode_quoted_object(cursor)
        if cursor.startswith(FUNCTION_POINTER_PREFIX):
            cursor.advance(len(FUNCTION_POINTER_PREFIX))
            return FunctionPointer()

        first = cursor.peek()

        simple = SIMPLE_TYPES.get(first)
        if simple is not None:
            cursor.advance()
            return simple

        modifier = Modifier.from_char(first)
        if modifier is not None:
            cursor.advance()
            inner = self.decode_next(cursor, depth + 1)
            return ModifiedType(modifier, inner) if inner is not None else None

        if first == BIT_FIELD_CHAR:
            cursor.advance()
            width = cursor.read_int()
            return BitFieldType(width) if width is not None else None
        if first == ARRAY_OPEN:
            return self._decode_array(cursor, depth)
        if first == POINTER_CHAR:
            cursor.advance()
            pointee = self.decode_next(cursor, depth + 1)
            return PointerType(pointee) if pointee is not None else None
        if first == UNION_OPEN:
            return self._decode_aggregate(cursor, AggregateKind.UNION, depth)
        if first == STRUCT_OPEN:
            return self._decode_aggregate(cursor, AggregateKind.STRUCT, depth)
        if first == VOID_CONST_CHAR:
            cursor.advance()
            return Primitive.VOID_CONST
        if first == VOID_IN_CHAR:
            cursor.advance()
            return Primitive.VOID_IN

        return None

    # Blocks: @? or @?<ret@?args>

    def _decode_block(self, cursor: EncodingCursor, depth: int) -> BlockType | None:
        cursor.advance(len(BLOCK_PREFIX))
        if cursor.peek() != BLOCK_SIGNATURE_OPEN:
            return BlockType()

        signature = cursor.read_balanced(BLOCK_SIGNATURE_OPEN, BLOCK_SIGNATURE_CLOSE)
        if signature is None:
            return None

        return_type = self.decode_next(signature, depth + 1)
        if return_type is None or not signature.startswith(BLOCK_PREFIX):
            return None
        signature.advance(len(BLOCK_PREFIX))

        param_types: list[TypeNode] = []
        while not signature.at_end:
            param = self.decode_next(signature, depth + 1)
            if param is None:
                return None
            param_types.append(param)

        return BlockType(return_type, tuple(param_types))

    # Named objects: @"Name"

    def _decode_quoted_object(self, cursor: EncodingCursor) -> ObjectType | None:
        cursor.advance()
        name = cursor.read_quoted()
        return ObjectType(name) if name is not None else None

    # Arrays: [count type]

    def _decode_array(self, cursor: EncodingCursor, depth: int) -> ArrayType | None:
        body = cursor.read_balanced(ARRAY_OPEN, ARRAY_CLOSE)
        if body is None:
            return None

        count = body.read_int()
        element_type = self.decode_next(body, depth + 1)
        if element_type is None or not body.at_end:
            return None
        return ArrayType(element_type, count)

    # Structs and unions: {name=fields} and (name=fields)

    def _decode_aggregate(self, cursor: EncodingCursor, kind: AggregateKind, depth: int) -> TypeNode | None:
        body = cursor.read_balanced(kind.open, kind.close)
        if body is None:
            return None

        separator = body.find(NAME_SEPARATOR)
        if separator < 0:
            return make_aggregate(kind, _normalize_name(body.remaining), None)

        name = _normalize_name(body.text[body.pos : separator])
        field_cursor = body.slice(separator + 1, body.end)

        fields: list[Field] = []
        while not field_cursor.at_end:
            decoded_field = self._decode_field(field_cursor, depth + 1)
            if decoded_field is None:
                return None
            fields.append(decoded_field)

        return make_aggregate(kind, name, fields)

    def _decode_field(self, cursor: EncodingCursor, depth: int) -> Field | None:
        name: str | None = None
        if cursor.peek() == QUOTE:
            name = cursor.read_quoted()
            if name is None:
                return None

        if cursor.peek() == BIT_FIELD_CHAR:
            cursor.advance()
            width = cursor.read_int()
            if width is None:
                return None
            return Field(Primitive.INT, name, bit_width=width)

        field_type = self.decode_next(cursor, depth)
        if field_type is None:
            return None
        return Field(field_type, name)


def decode(text: str, max_depth: int | None = None) -> TypeNode | None:
    """Decode the first type described by ``text``; None if it is malformed."""
    return TypeDecoder(max_depth).decode(text)


def decode_with_remainder(text: str, max_depth: int | None = None) -> tuple[TypeNode, str] | None:
    """Decode the first type in ``text`` and return it with the unconsumed text."""
    return TypeDecoder(max_depth).decode_with_remainder(text)


def decode_or_raise(text: str, max_depth: int | None = None) -> TypeNode:
    """
    Decode ``text`` or raise.

    Raises:
        EncodingError: If ``text`` does not start with a well-formed type
    """
    node = decode(text, max_depth)
    if node is None:
        raise EncodingError(text)
    return node

#!/usr/bin/env python3

"""Splitter for Objective-C method type encodings.

A method encoding is a return type, an optional total stack size, then one
``<type><offset>`` pair per argument, e.g. ``v24@0:8@16``. The splitter only
finds type boundaries; it never builds TypeNode trees. Callers decode a
MethodValue's type lazily when they need its structure.
"""

from ....infrastructure.config import get_max_nesting_depth
from ....infrastructure.logging import get_logger
from ...models.objc.encoding_constants import (
    BLOCK_SIGNATURE_CLOSE,
    BLOCK_SIGNATURE_OPEN,
    BIT_FIELD_CHAR,
    CLOSING_DELIMITERS,
    POINTER_CHAR,
    QUALIFIER_CHARS,
    QUOTE,
    VECTOR_CHAR,
)
from ...models.objc.method_signature import MethodSignature, MethodValue
from .encoding_cursor import EncodingCursor

logger = get_logger(__name__)

# Bracketed constructs that can start a type; "<" only appears after "@?"
_AGGREGATE_OPENERS = frozenset(
    char for char in CLOSING_DELIMITERS if char != BLOCK_SIGNATURE_OPEN
)


def _skip(cursor: EncodingCursor, depth: int, max_depth: int) -> None:
    if cursor.at_end or depth > max_depth:
        return

    first = cursor.peek()
    if first in _AGGREGATE_OPENERS:
        cursor.skip_balanced(first, CLOSING_DELIMITERS[first])
        return

    cursor.advance()
    if first in QUALIFIER_CHARS or first == POINTER_CHAR:
        _skip(cursor, depth + 1, max_depth)
    elif first == "@":
        if cursor.peek() == "?":
            cursor.advance()
            if cursor.peek() == BLOCK_SIGNATURE_OPEN:
                cursor.skip_balanced(BLOCK_SIGNATURE_OPEN, BLOCK_SIGNATURE_CLOSE)
        elif cursor.peek() == QUOTE:
            cursor.skip_quoted()
    elif first == BIT_FIELD_CHAR:
        cursor.read_digits()
    elif first == VECTOR_CHAR:
        cursor.read_digits()
        _skip(cursor, depth + 1, max_depth)


def skip_one_type(cursor: EncodingCursor, max_depth: int | None = None) -> str:
    """
    Consume exactly one top-level type and return its raw text.

    Qualifiers and pointers recurse into the type they apply to, blocks and
    named objects skip their signature or quoted name, aggregates and arrays
    skip a balanced run, and any other character is a one-character type.
    Unterminated runs consume the rest of the input.

    Args:
        cursor: Cursor positioned at the start of a type
        max_depth: Nesting limit; defaults to the MAX_NESTING_DEPTH setting

    Returns:
        The consumed text ("" if the cursor was already at the end)
    """
    if max_depth is None:
        max_depth = get_max_nesting_depth()
    start = cursor.pos
    _skip(cursor, 0, max_depth)
    return cursor.text[start : cursor.pos]


def parse_method_signature(encoding: str) -> MethodSignature:
    """
    Split a method type encoding into return value, stack size and arguments.

    Never raises. Truncated input yields a shorter argument list; an entry
    whose offset is missing gets ``offset=None``.

    Args:
        encoding: Method type encoding, e.g. ``v24@0:8@16``

    Returns:
        MethodSignature with raw type encodings
    """
    max_depth = get_max_nesting_depth()
    cursor = EncodingCursor(encoding)

    return_type = skip_one_type(cursor, max_depth)
    stack_size = cursor.read_int()

    arguments: list[MethodValue] = []
    while not cursor.at_end:
        start = cursor.pos
        type_encoding = skip_one_type(cursor, max_depth)
        offset = cursor.read_int()
        if cursor.pos == start:
            logger.debug(f"No progress at offset {start} of {encoding!r}, stopping")
            break
        arguments.append(MethodValue(type_encoding, offset))

    logger.debug(f"Split {encoding!r} into {len(arguments)} argument(s)")
    return MethodSignature(MethodValue(return_type), tuple(arguments), stack_size)

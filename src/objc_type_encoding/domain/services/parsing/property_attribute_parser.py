#!/usr/bin/env python3

"""Parser for runtime property attribute strings.

The runtime describes a property as comma-separated attributes, each a
one-character code optionally followed by a value::

    T@"NSString",C,N,V_title
    T{CGRect={CGPoint=dd}{CGSize=dd}},R,N,GcurrentFrame

The type attribute may itself contain quoted names and bracketed bodies, so
only top-level commas separate attributes.
"""

from ....infrastructure.logging import get_logger
from ...models.objc.encoding_constants import CLOSING_DELIMITERS, ESCAPE, QUOTE
from ...models.objc.property_attribute import PropertyAttribute, PropertyAttributeKind

logger = get_logger(__name__)

ATTRIBUTE_SEPARATOR = ","

_CLOSERS = frozenset(CLOSING_DELIMITERS.values())


def split_attributes(text: str) -> list[str]:
    """Split an attribute string on commas outside quotes and brackets."""
    if not text:
        return []

    pieces: list[str] = []
    start = 0
    depth = 0
    in_quote = False
    index = 0
    while index < len(text):
        char = text[index]
        if in_quote:
            if char == ESCAPE:
                index += 1
            elif char == QUOTE:
                in_quote = False
        elif char == QUOTE:
            in_quote = True
        elif char in CLOSING_DELIMITERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(0, depth - 1)
        elif char == ATTRIBUTE_SEPARATOR and depth == 0:
            pieces.append(text[start:index])
            start = index + 1
        index += 1

    pieces.append(text[start:])
    return pieces


def _parse_attribute(piece: str) -> PropertyAttribute:
    kind = PropertyAttributeKind.from_code(piece[:1])
    value = piece[1:]
    if kind is PropertyAttributeKind.OTHER or (value and not kind.takes_value):
        return PropertyAttribute(PropertyAttributeKind.OTHER, piece)
    return PropertyAttribute(kind, value)


def parse_property_attributes(text: str) -> list[PropertyAttribute]:
    """
    Parse a runtime property attribute string.

    Unknown codes, and flag codes that unexpectedly carry a value, are kept
    verbatim as OTHER attributes so the string re-encodes unchanged.

    Args:
        text: Attribute string, e.g. ``T@"NSString",C,N,V_title``

    Returns:
        Attributes in their original order
    """
    attributes = [_parse_attribute(piece) for piece in split_attributes(text)]
    logger.debug(f"Parsed {len(attributes)} property attribute(s) from {text!r}")
    return attributes


def encode_property_attributes(attributes: list[PropertyAttribute]) -> str:
    """Join attributes back into a runtime attribute string."""
    return ATTRIBUTE_SEPARATOR.join(attribute.encoded() for attribute in attributes)

#!/usr/bin/env python3

"""Parsing services for Objective-C type encodings."""

from .encoding_cursor import EncodingCursor
from .method_signature_parser import parse_method_signature, skip_one_type
from .property_attribute_parser import (
    encode_property_attributes,
    parse_property_attributes,
    split_attributes,
)
from .type_decoder import TypeDecoder, decode, decode_or_raise, decode_with_remainder

__all__ = [
    "EncodingCursor",
    "TypeDecoder",
    "decode",
    "decode_or_raise",
    "decode_with_remainder",
    "encode_property_attributes",
    "parse_method_signature",
    "parse_property_attributes",
    "skip_one_type",
    "split_attributes",
]

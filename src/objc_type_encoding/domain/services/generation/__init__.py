#!/usr/bin/env python3

"""Generation services: re-encoding and declaration rendering."""

from .declaration_printer import DeclarationPrinter, decoded, decoded_field, decoded_for_argument
from .header_generator import HeaderGenerator
from .type_encoder import encode, encode_field

__all__ = [
    "DeclarationPrinter",
    "HeaderGenerator",
    "decoded",
    "decoded_field",
    "decoded_for_argument",
    "encode",
    "encode_field",
]

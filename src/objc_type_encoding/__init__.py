"""objc-type-encoding - decoding Objective-C runtime type encodings into declarations."""

from .domain.exceptions import EncodingError
from .domain.models.objc import (
    AggregateKind,
    ArrayType,
    BitFieldType,
    BlockType,
    ClassInfo,
    Field,
    FunctionPointer,
    IvarInfo,
    MethodInfo,
    MethodSignature,
    MethodValue,
    ModifiedType,
    Modifier,
    ObjectType,
    OtherType,
    PointerType,
    Primitive,
    PropertyAttribute,
    PropertyAttributeKind,
    PropertyInfo,
    StructType,
    TypeNode,
    UnionType,
)
from .domain.services.generation import (
    HeaderGenerator,
    decoded,
    decoded_field,
    decoded_for_argument,
    encode,
    encode_field,
)
from .domain.services.parsing import (
    decode,
    decode_or_raise,
    decode_with_remainder,
    encode_property_attributes,
    parse_method_signature,
    parse_property_attributes,
)
from .infrastructure.config import Config
from .main import main

__all__ = [
    "AggregateKind",
    "ArrayType",
    "BitFieldType",
    "BlockType",
    "ClassInfo",
    "Config",
    "EncodingError",
    "Field",
    "FunctionPointer",
    "HeaderGenerator",
    "IvarInfo",
    "MethodInfo",
    "MethodSignature",
    "MethodValue",
    "ModifiedType",
    "Modifier",
    "ObjectType",
    "OtherType",
    "PointerType",
    "Primitive",
    "PropertyAttribute",
    "PropertyAttributeKind",
    "PropertyInfo",
    "StructType",
    "TypeNode",
    "UnionType",
    "decode",
    "decode_or_raise",
    "decode_with_remainder",
    "decoded",
    "decoded_field",
    "decoded_for_argument",
    "encode",
    "encode_field",
    "encode_property_attributes",
    "main",
    "parse_method_signature",
    "parse_property_attributes",
]

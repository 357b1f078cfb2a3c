#!/usr/bin/env python3

"""Objective-C type-encoding domain models."""

from .class_info import ClassInfo
from .field import Field
from .ivar_info import IvarInfo
from .method_info import MethodInfo
from .method_signature import MethodSignature, MethodValue
from .modifier import Modifier
from .property_attribute import PropertyAttribute, PropertyAttributeKind
from .property_info import PropertyInfo
from .type_node import (
    AggregateKind,
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

__all__ = [
    "AggregateKind",
    "ArrayType",
    "BitFieldType",
    "BlockType",
    "ClassInfo",
    "Field",
    "FunctionPointer",
    "IvarInfo",
    "MethodInfo",
    "MethodSignature",
    "MethodValue",
    "Modifier",
    "ModifiedType",
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
]

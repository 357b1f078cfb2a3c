#!/usr/bin/env python3

"""Property information model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .property_attribute import PropertyAttribute, PropertyAttributeKind
from .type_node import Primitive

if TYPE_CHECKING:
    from .type_node import TypeNode


@dataclass(frozen=True)
class PropertyInfo:
    """A declared property and its runtime attributes."""

    name: str
    attributes: tuple[PropertyAttribute, ...] = field(default_factory=tuple)
    is_class_property: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, tuple):
            object.__setattr__(self, "attributes", tuple(self.attributes))

    @classmethod
    def from_attribute_string(
        cls, name: str, attributes: str, is_class_property: bool = False
    ) -> PropertyInfo:
        """Build a property from a runtime attribute string such as ``T@,R,N,V_x``."""
        from ...services.parsing.property_attribute_parser import parse_property_attributes

        return cls(name, tuple(parse_property_attributes(attributes)), is_class_property)

    def _value_of(self, kind: PropertyAttributeKind) -> str | None:
        for attribute in self.attributes:
            if attribute.kind is kind:
                return attribute.value
        return None

    def _has(self, kind: PropertyAttributeKind) -> bool:
        return any(attribute.kind is kind for attribute in self.attributes)

    @property
    def type(self) -> TypeNode:
        """Declared type, or ``Primitive.UNKNOWN`` when missing or undecodable."""
        for attribute in self.attributes:
            decoded = attribute.type
            if decoded is not None:
                return decoded
        return Primitive.UNKNOWN

    @property
    def ivar_name(self) -> str | None:
        return self._value_of(PropertyAttributeKind.IVAR)

    @property
    def getter_name(self) -> str | None:
        return self._value_of(PropertyAttributeKind.GETTER)

    @property
    def setter_name(self) -> str | None:
        return self._value_of(PropertyAttributeKind.SETTER)

    @property
    def getter(self) -> str:
        """Selector name of the getter."""
        return self.getter_name or self.name

    @property
    def setter(self) -> str | None:
        """Selector name of the setter; None for read-only properties."""
        if self.is_readonly:
            return None
        if self.setter_name:
            return self.setter_name
        return f"set{self.name[:1].upper()}{self.name[1:]}:"

    @property
    def is_readonly(self) -> bool:
        return self._has(PropertyAttributeKind.READONLY)

    @property
    def is_nonatomic(self) -> bool:
        return self._has(PropertyAttributeKind.NONATOMIC)

    @property
    def is_dynamic(self) -> bool:
        return self._has(PropertyAttributeKind.DYNAMIC)

    @property
    def is_weak(self) -> bool:
        return self._has(PropertyAttributeKind.WEAK)

    @property
    def uses_copy_semantics(self) -> bool:
        return self._has(PropertyAttributeKind.COPY)

    @property
    def is_retained(self) -> bool:
        return self._has(PropertyAttributeKind.RETAIN)

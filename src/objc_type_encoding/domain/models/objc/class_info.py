#!/usr/bin/env python3

"""Class information model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .ivar_info import IvarInfo
from .method_info import MethodInfo
from .property_info import PropertyInfo


@dataclass
class ClassInfo:
    """Information about a class: ivars, properties and methods as encodings."""

    name: str
    superclass_name: str | None = None
    protocols: list[str] = field(default_factory=list)
    ivars: list[IvarInfo] = field(default_factory=list)
    class_properties: list[PropertyInfo] = field(default_factory=list)
    properties: list[PropertyInfo] = field(default_factory=list)
    class_methods: list[MethodInfo] = field(default_factory=list)
    methods: list[MethodInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClassInfo:
        """
        Build a ClassInfo from a plain mapping, e.g. loaded from JSON.

        Expected layout::

            {
              "name": "MyView",
              "superclass": "NSView",
              "protocols": ["NSCoding"],
              "ivars": [{"name": "_title", "type": "@\\"NSString\\"", "offset": 8}],
              "properties": [{"name": "title", "attributes": "T@\\"NSString\\",C,N,V_title"}],
              "class_properties": [...],
              "methods": [{"name": "setTitle:", "type": "v24@0:8@16"}],
              "class_methods": [...]
            }

        Args:
            data: Mapping describing the class

        Returns:
            ClassInfo object

        Raises:
            ValueError: If a required key is missing
        """
        try:
            name = data["name"]
            ivars = [
                IvarInfo(item["name"], item["type"], item.get("offset"))
                for item in data.get("ivars", [])
            ]
            properties = [
                PropertyInfo.from_attribute_string(item["name"], item["attributes"])
                for item in data.get("properties", [])
            ]
            class_properties = [
                PropertyInfo.from_attribute_string(item["name"], item["attributes"], True)
                for item in data.get("class_properties", [])
            ]
            methods = [MethodInfo(item["name"], item["type"]) for item in data.get("methods", [])]
            class_methods = [
                MethodInfo(item["name"], item["type"], True)
                for item in data.get("class_methods", [])
            ]
        except KeyError as e:
            raise ValueError(f"Class description is missing key {e}") from e

        return cls(
            name=name,
            superclass_name=data.get("superclass"),
            protocols=list(data.get("protocols", [])),
            ivars=ivars,
            class_properties=class_properties,
            properties=properties,
            class_methods=class_methods,
            methods=methods,
        )

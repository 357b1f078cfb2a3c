#!/usr/bin/env python3

"""Objective-C header generation from class descriptions.

Renders ivars, properties and methods described by their runtime type
encodings as the declarations a class-dump style header would contain.
"""

from ....infrastructure.logging import get_logger, log_timing
from ...models.objc import ClassInfo, Field, IvarInfo, MethodInfo, PropertyInfo
from ...models.objc.type_node import BitFieldType, Primitive
from .declaration_printer import BOOL_LIKE_PRIMITIVES, PRIMITIVE_DECLARATIONS, DeclarationPrinter

logger = get_logger(__name__)

UNKNOWN_DECLARATION = PRIMITIVE_DECLARATIONS[Primitive.UNKNOWN]


class HeaderGenerator:
    """Generates Objective-C header declarations from ClassInfo objects.

    This class handles:
    - Method declarations with selector labels and parameter types
    - Instance variable declarations, including bit-fields
    - Property declarations with attribute lists and synthesize comments
    - Complete @interface blocks
    """

    def __init__(self, indent: str | None = None) -> None:
        """Initialize header generator.

        Args:
            indent: Indentation for ivar blocks and nested aggregate bodies
        """
        self.printer = DeclarationPrinter(indent)

    def method_header(self, method: MethodInfo) -> str:
        """
        Render a method declaration.

        Args:
            method: Method to render

        Returns:
            Declaration such as ``- (void)setTitle:(NSString *)arg0;``
        """
        prefix = "+" if method.is_class_method else "-"
        return_text = self.printer.argument_declaration(method.return_type)

        labels = method.selector_labels
        if not labels:
            return f"{prefix} ({return_text}){method.name};"

        parameter_types = method.parameter_types
        if len(parameter_types) < len(labels):
            logger.debug(
                f"Method {method.name!r} has {len(labels)} label(s) but "
                f"{len(parameter_types)} encoded parameter(s)"
            )

        pieces = []
        for index, label in enumerate(labels):
            if index < len(parameter_types):
                type_text = self.printer.argument_declaration(parameter_types[index])
            else:
                type_text = UNKNOWN_DECLARATION
            pieces.append(f"{label}:({type_text})arg{index}")

        return f"{prefix} ({return_text}){' '.join(pieces)};"

    def ivar_header(self, ivar: IvarInfo) -> str:
        """
        Render an instance variable declaration.

        Args:
            ivar: Instance variable to render

        Returns:
            Declaration such as ``NSString *_title;`` or ``int _flags : 3;``
        """
        ivar_type = ivar.type
        if isinstance(ivar_type, BitFieldType):
            field = Field(Primitive.INT, ivar.name, bit_width=ivar_type.width)
            return self.printer.field_declaration(field)
        if ivar_type in BOOL_LIKE_PRIMITIVES:
            return f"BOOL {ivar.name};"

        if ivar_type is None:
            logger.debug(f"Ivar {ivar.name!r} has undecodable type {ivar.type_encoding!r}")
            type_text = UNKNOWN_DECLARATION
        else:
            type_text = self.printer.type_declaration(ivar_type)

        if type_text.endswith("*"):
            return f"{type_text}{ivar.name};"
        return f"{type_text} {ivar.name};"

    def property_header(self, prop: PropertyInfo) -> str:
        """
        Render a property declaration.

        Args:
            prop: Property to render

        Returns:
            Declaration such as
            ``@property(copy, nonatomic) NSString *title; // @synthesize title=_title``
        """
        type_text = self.printer.argument_declaration(prop.type)

        attributes: list[str] = []
        if prop.is_class_property:
            attributes.append("class")
        if prop.getter_name:
            attributes.append(f"getter={prop.getter_name}")
        if prop.setter_name:
            attributes.append(f"setter={prop.setter_name}")
        if prop.is_readonly:
            attributes.append("readonly")
        if prop.is_weak:
            attributes.append("weak")
        if prop.uses_copy_semantics:
            attributes.append("copy")
        if prop.is_retained:
            attributes.append("retain")
        if prop.is_nonatomic:
            attributes.append("nonatomic")

        comments: list[str] = []
        if prop.is_dynamic:
            comments.append(f"@dynamic {prop.name}")
        ivar_name = prop.ivar_name
        if ivar_name:
            if ivar_name == prop.name:
                comments.append(f"@synthesize {ivar_name}")
            else:
                comments.append(f"@synthesize {prop.name}={ivar_name}")

        result = "@property"
        if attributes:
            result += "(" + ", ".join(attributes) + ")"
        separator = "" if type_text.endswith("*") else " "
        result += f" {type_text}{separator}{prop.name};"
        for comment in comments:
            result += f" // {comment}"
        return result

    @log_timing
    def generate_interface(self, class_info: ClassInfo) -> str:
        """
        Generate the @interface block for a class.

        Args:
            class_info: Class to render

        Returns:
            Complete @interface ... @end text
        """
        declaration = f"@interface {class_info.name}"
        if class_info.superclass_name:
            declaration += f" : {class_info.superclass_name}"
        if class_info.protocols:
            declaration += f" <{', '.join(class_info.protocols)}>"

        lines = [declaration]
        if class_info.ivars:
            lines[0] += " {"
            for ivar in class_info.ivars:
                for line in self.ivar_header(ivar).split("\n"):
                    lines.append(self.printer.indent + line)
            lines.append("}")

        sections = [
            [self.property_header(prop) for prop in class_info.class_properties],
            [self.property_header(prop) for prop in class_info.properties],
            [self.method_header(method) for method in class_info.class_methods],
            [self.method_header(method) for method in class_info.methods],
        ]
        for section in sections:
            if section:
                lines.append("")
                lines.extend(section)

        lines.extend(["", "@end"])

        logger.debug(
            f"Generated interface for {class_info.name}: {len(class_info.ivars)} ivar(s), "
            f"{len(class_info.properties) + len(class_info.class_properties)} property(ies), "
            f"{len(class_info.methods) + len(class_info.class_methods)} method(s)"
        )
        return "\n".join(lines)

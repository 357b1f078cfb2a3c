"""Tests for the property attribute parser."""

import pytest

from objc_type_encoding.domain.models.objc import (
    Field,
    ObjectType,
    PropertyAttribute,
    PropertyAttributeKind,
    Primitive,
    StructType,
)
from objc_type_encoding.domain.services.parsing import (
    encode_property_attributes,
    parse_property_attributes,
    split_attributes,
)


@pytest.mark.unit
class TestSplitAttributes:
    """Test top-level comma splitting."""

    def test_simple(self):
        """Test a typical attribute string."""
        assert split_attributes('T@"NSString",C,N,V_title') == ['T@"NSString"', "C", "N", "V_title"]

    def test_comma_inside_quotes(self):
        """Test that quoted names are not split."""
        assert split_attributes('T@"Foo,Bar",R') == ['T@"Foo,Bar"', "R"]

    def test_comma_inside_brackets(self):
        """Test that bracketed bodies are not split."""
        assert split_attributes('T{S="a,b"i},N') == ['T{S="a,b"i}', "N"]

    def test_empty(self):
        """Test the empty string."""
        assert split_attributes("") == []


@pytest.mark.unit
class TestParsePropertyAttributes:
    """Test attribute parsing and re-encoding."""

    def test_kinds_and_values(self):
        """Test that codes map to kinds with their values."""
        attributes = parse_property_attributes('T@"NSString",C,N,V_title')
        assert attributes == [
            PropertyAttribute(PropertyAttributeKind.TYPE, '@"NSString"'),
            PropertyAttribute(PropertyAttributeKind.COPY),
            PropertyAttribute(PropertyAttributeKind.NONATOMIC),
            PropertyAttribute(PropertyAttributeKind.IVAR, "_title"),
        ]
        assert attributes[0].type == ObjectType("NSString")
        assert attributes[1].type is None

    def test_struct_type(self):
        """Test a struct-typed property."""
        attributes = parse_property_attributes("T{CGSize=dd},R,N,GcurrentSize")
        assert attributes[0].type == StructType(
            "CGSize", [Field(Primitive.DOUBLE), Field(Primitive.DOUBLE)]
        )
        assert attributes[3] == PropertyAttribute(PropertyAttributeKind.GETTER, "currentSize")

    def test_unknown_codes_are_kept_verbatim(self):
        """Test that unknown codes and valued flags become OTHER."""
        attributes = parse_property_attributes("Ti,P,X12,Rfoo")
        assert attributes[0].type is Primitive.INT
        assert attributes[1] == PropertyAttribute(PropertyAttributeKind.OTHER, "P")
        assert attributes[2] == PropertyAttribute(PropertyAttributeKind.OTHER, "X12")
        assert attributes[3] == PropertyAttribute(PropertyAttributeKind.OTHER, "Rfoo")

    @pytest.mark.parametrize(
        "text",
        [
            'T@"NSString",C,N,V_title',
            "T{CGRect={CGPoint=dd}{CGSize=dd}},R,N",
            "Tc,N,GisEnabled,SsetEnabled:,V_enabled",
            "T@,W,&,D",
            "Ti,P,X12",
            "T@,,N",
            "",
        ],
    )
    def test_re_encodes_to_input(self, text):
        """Test that parsing then encoding reproduces the attribute string."""
        assert encode_property_attributes(parse_property_attributes(text)) == text

    def test_str_is_encoding(self):
        """Test the string form of an attribute."""
        assert str(PropertyAttribute(PropertyAttributeKind.SETTER, "setOn:")) == "SsetOn:"
        assert str(PropertyAttribute(PropertyAttributeKind.OTHER, "P")) == "P"

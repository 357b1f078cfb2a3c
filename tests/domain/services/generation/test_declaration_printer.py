"""Tests for C-like declaration rendering."""

import pytest

from objc_type_encoding.domain.models.objc import (
    ArrayType,
    BitFieldType,
    BlockType,
    Field,
    FunctionPointer,
    ModifiedType,
    Modifier,
    ObjectType,
    OtherType,
    PointerType,
    Primitive,
    StructType,
    UnionType,
)
from objc_type_encoding.domain.services.generation import (
    DeclarationPrinter,
    decoded,
    decoded_field,
    decoded_for_argument,
)
from objc_type_encoding.domain.services.parsing import decode
from objc_type_encoding.infrastructure.config import get_max_nesting_depth


@pytest.mark.unit
class TestTypeDeclaration:
    """Test rendering of single types."""

    @pytest.mark.parametrize(
        "node, expected",
        [
            (Primitive.INT, "int"),
            (Primitive.ULONG_LONG, "unsigned long long"),
            (Primitive.INT128, "__int128_t"),
            (Primitive.CLASS, "Class"),
            (Primitive.SELECTOR, "SEL"),
            (Primitive.CHAR_PTR, "char *"),
            (Primitive.VOID_CONST, "void"),
            (Primitive.UNKNOWN, "unknown"),
            (ObjectType(), "id"),
            (ObjectType("NSString"), "NSString *"),
            (ObjectType("<NSCopying>"), "id <NSCopying>"),
            (BlockType(), "id /* block */"),
            (BlockType(Primitive.VOID, [Primitive.INT, ObjectType("NSString")]), "void (^)(int, NSString *)"),
            (FunctionPointer(), "void * /* function pointer */"),
            (ArrayType(Primitive.INT, 10), "int[10]"),
            (ArrayType(Primitive.INT), "int[]"),
            (PointerType(Primitive.CHAR), "char *"),
            (PointerType(PointerType(Primitive.INT)), "int * *"),
            (BitFieldType(4), "int x : 4"),
            (ModifiedType(Modifier.CONST, Primitive.CHAR_PTR), "const char *"),
            (OtherType("!16f"), "!16f"),
        ],
    )
    def test_leaf_declarations(self, node, expected):
        """Test one-line declarations."""
        assert decoded(node) == expected

    def test_struct_with_placeholders(self):
        """Test that unnamed fields get positional names."""
        assert decoded(decode("{CGPoint=dd}")) == "struct CGPoint {\n    double x0;\n    double x1;\n}"

    def test_named_fields(self):
        """Test that field names are kept."""
        assert decoded(decode('{CGPoint="x"d"y"d}')) == "struct CGPoint {\n    double x;\n    double y;\n}"

    def test_opaque_and_empty_aggregates(self):
        """Test aggregates without a field body."""
        assert decoded(StructType("CGPoint")) == "struct CGPoint"
        assert decoded(StructType("CGPoint", [])) == "struct CGPoint"
        assert decoded(StructType()) == "struct {}"
        assert decoded(UnionType()) == "union {}"

    def test_anonymous_union(self):
        """Test an unnamed union with fields."""
        node = UnionType(None, [Field(Primitive.INT), Field(Primitive.FLOAT)])
        assert decoded(node) == "union {\n    int x0;\n    float x1;\n}"

    def test_nested_structs_are_reindented(self):
        """Test indentation of nested bodies."""
        expected = "\n".join(
            [
                "struct CGRect {",
                "    struct CGPoint {",
                "        double x0;",
                "        double x1;",
                "    } x0;",
                "    struct CGSize {",
                "        double x0;",
                "        double x1;",
                "    } x1;",
                "}",
            ]
        )
        assert decoded(decode("{CGRect={CGPoint=dd}{CGSize=dd}}")) == expected

    def test_custom_indent(self):
        """Test an explicit indent string."""
        assert decoded(decode("{S=ii}"), indent="\t") == "struct S {\n\tint x0;\n\tint x1;\n}"

    def test_bit_field_members(self):
        """Test bit-field members inside a struct."""
        assert decoded(decode('{S="a"b1b7}')) == "struct S {\n    int a : 1;\n    int x1 : 7;\n}"

    def test_deterministic(self):
        """Test that rendering twice gives identical output."""
        node = decode('{S=[4^{T="p"@?<v@?i>}](U=if)}')
        assert node is not None
        assert decoded(node) == decoded(node)

    def test_placeholder_prefix_from_environment(self, monkeypatch):
        """Test the OBJC_ENCODING_FIELD_PLACEHOLDER_PREFIX override."""
        monkeypatch.setenv("OBJC_ENCODING_FIELD_PLACEHOLDER_PREFIX", "field")
        assert decoded(decode("{S=i}")) == "struct S {\n    int field0;\n}"

    def test_rejects_non_nodes(self):
        """Test that arbitrary objects are not rendered."""
        with pytest.raises(TypeError):
            DeclarationPrinter().type_declaration("i")


@pytest.mark.unit
class TestFieldAndArgumentDeclarations:
    """Test member and single-line argument rendering."""

    def test_decoded_field(self):
        """Test member declarations."""
        assert decoded_field(Field(Primitive.INT, "flags", bit_width=3)) == "int flags : 3;"
        assert decoded_field(Field(Primitive.DOUBLE), "y") == "double y;"
        assert decoded_field(Field(Primitive.DOUBLE)) == "double x;"
        assert decoded_field(Field(ObjectType("NSString"), "name")) == "NSString * name;"

    def test_decoded_for_argument(self):
        """Test the single-line form used in headers."""
        assert decoded_for_argument(decode("{CGRect={CGPoint=dd}{CGSize=dd}}")) == "CGRect"
        assert decoded_for_argument(Primitive.CHAR) == "BOOL"
        assert decoded_for_argument(Primitive.UCHAR) == "unsigned char"
        assert decoded_for_argument(ObjectType("NSString")) == "NSString *"
        assert decoded_for_argument(StructType(None, [Field(Primitive.INT)])) == "struct { int x0; }"
        assert decoded_for_argument(PointerType(StructType("CGPoint"))) == "struct CGPoint *"

    @pytest.mark.parametrize("depth_override", [None, "100000"])
    def test_deepest_accepted_tree_renders(self, monkeypatch, depth_override):
        """Test that every tree the decoder accepts can be rendered."""
        if depth_override is not None:
            monkeypatch.setenv("OBJC_ENCODING_MAX_NESTING_DEPTH", depth_override)
        depth = get_max_nesting_depth()
        node = decode("{a=" * depth + "i" + "}" * depth)

        text = decoded(node)

        assert text.startswith("struct a {\n")
        assert text.count("struct a {") == depth
        assert " " * 4 * depth + "int x0;" in text
        assert decoded_for_argument(node) == "a"

"""Tests for the encoding cursor."""

import pytest

from objc_type_encoding.domain.services.parsing import EncodingCursor


@pytest.mark.unit
class TestEncodingCursor:
    """Test cursor movement, digits, brackets and quotes."""

    def test_peek_take_and_end(self):
        """Test basic movement within the bound."""
        cursor = EncodingCursor("abc", end=2)
        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) == ""
        assert cursor.take() == "a"
        assert cursor.take() == "b"
        assert cursor.at_end
        assert cursor.take() == ""
        assert cursor.remaining == ""

    def test_startswith_respects_bound(self):
        """Test that prefixes past the end bound do not match."""
        cursor = EncodingCursor("@?<v>", end=1)
        assert cursor.startswith("@")
        assert not cursor.startswith("@?")

    def test_read_int(self):
        """Test digit runs."""
        cursor = EncodingCursor("24@0")
        assert cursor.read_int() == 24
        assert cursor.read_int() is None
        assert cursor.remaining == "@0"

    def test_read_digits_is_ascii_only(self):
        """Test that non-ASCII digits are not consumed."""
        cursor = EncodingCursor("1٢")
        assert cursor.read_digits() == "1"

    def test_read_balanced(self):
        """Test reading a nested bracket run."""
        cursor = EncodingCursor("{A={B=i}d}rest")
        body = cursor.read_balanced("{", "}")
        assert body.remaining == "A={B=i}d"
        assert cursor.remaining == "rest"

    def test_read_balanced_failures(self):
        """Test unterminated runs and a wrong opener."""
        cursor = EncodingCursor("{A={B=i}")
        assert cursor.read_balanced("{", "}") is None
        assert cursor.pos == 0
        assert EncodingCursor("i").read_balanced("{", "}") is None

    def test_skip_balanced_unterminated_consumes_rest(self):
        """Test that skipping an unterminated run reaches the end."""
        cursor = EncodingCursor("[2{S=i}")
        cursor.skip_balanced("[", "]")
        assert cursor.at_end

    def test_quoted(self):
        """Test quoted names with escapes."""
        cursor = EncodingCursor('"NS\\"Name"x')
        assert cursor.read_quoted() == 'NS\\"Name'
        assert cursor.remaining == "x"
        assert EncodingCursor('"open').read_quoted() is None

        skipped = EncodingCursor('"open')
        skipped.skip_quoted()
        assert skipped.at_end

    def test_find_and_slice(self):
        """Test absolute indices and sub-cursors."""
        cursor = EncodingCursor("xx{CGPoint=dd}")
        cursor.advance(3)
        index = cursor.find("=")
        assert index == 10
        assert cursor.slice(index + 1, 13).remaining == "dd"
        assert EncodingCursor("abc", end=1).find("c") == -1

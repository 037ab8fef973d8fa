"""Round-trip tests for TOON encode/decode."""

import sys
from pathlib import Path

import pytest

# Add src to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from toonblock import FormatConfig, MissingValuesError, decode, encode


def roundtrip(data, config=None):
    """Encode then decode, returning the result."""
    encoded = encode(data, config)
    return decode(encoded)


class TestRoundtripPrimitives:
    """Test round-trip for scalar values."""

    def test_null(self):
        assert roundtrip(None) is None

    def test_booleans(self):
        assert roundtrip(True) is True
        assert roundtrip(False) is False

    def test_numbers(self):
        assert roundtrip(42) == 42
        assert roundtrip(-2.5) == -2.5
        assert roundtrip(1e20) == 1e20

    def test_strings(self):
        assert roundtrip("hello world") == "hello world"
        assert roundtrip("a, b; {c} [d]") == "a, b; {c} [d]"
        assert roundtrip("") == ""
        assert roundtrip("007") == "007"
        assert roundtrip("null") == "null"


class TestRoundtripObjects:
    """Test round-trip for objects."""

    def test_simple_object(self):
        data = {"id": 1, "name": "Test Product", "price": 99.99, "active": True}
        assert roundtrip(data) == data

    def test_key_order(self):
        data = {"z": 1, "a": 2, "m": 3}
        assert list(roundtrip(data).keys()) == ["z", "a", "m"]

    def test_tricky_strings_in_row(self):
        data = {
            "comma": "a, b",
            "quote": 'say "hi"',
            "slash": "trailing\\",
            "empty": "",
            "number": "42",
            "multiline": "one\ntwo",
        }
        assert roundtrip(data) == data

    def test_nested_object(self):
        data = {"name": "x", "meta": {"a": 1, "inner": {"b": [1, 2]}}, "after": None}
        assert roundtrip(data) == data

    def test_empty_object_value_becomes_array(self):
        assert roundtrip({"data": {}}) == {"data": []}


class TestRoundtripArrays:
    """Test round-trip for array blocks."""

    def test_product_with_reviews(self):
        data = {
            "product": "Laptop",
            "reviews": [
                {"id": 1, "customer": "Alice", "rating": 5},
                {"id": 2, "customer": "Bob", "rating": 4},
            ],
        }
        assert roundtrip(data) == data

    def test_top_level_rows(self):
        data = [{"id": i, "label": f"item {i}"} for i in range(5)]
        assert roundtrip(data) == data

    def test_scalar_items(self):
        data = [1, "two", None, True, 2.5]
        assert roundtrip(data) == data

    def test_nested_arrays(self):
        data = [[1, 2], [3, [4, 5]], []]
        assert roundtrip(data) == data

    def test_empty_array(self):
        assert roundtrip([]) == []

    def test_rows_with_nested_values(self):
        data = [
            {"id": 1, "tags": ["a", "b"], "meta": {"x": 1}},
            {"id": 2, "tags": [], "meta": {"x": 2}},
        ]
        assert roundtrip(data) == data

    def test_mixed_items_after_object_read_as_rows(self):
        """An item block starting with an object shares its keys line with later items."""
        encoded = encode([{"a": 1}, 2])
        assert encoded == "array[2]{\n  a;\n  1\n  2\n}"
        assert decode(encoded) == [{"a": 1}, {"a": 2}]

    def test_mixed_items_with_too_few_values(self):
        with pytest.raises(MissingValuesError):
            roundtrip([{"a": 1, "b": 2}, "x"])

    def test_deeply_nested_tables(self):
        data = {
            "orders": [
                {"id": 1, "lines": [{"sku": "A-1", "qty": 2}, {"sku": "B-7", "qty": 1}]},
                {"id": 2, "lines": [{"sku": "C-3", "qty": 5}]},
            ],
            "total": 3,
        }
        assert roundtrip(data) == data


class TestRoundtripConfigs:
    """Round-trip under every formatting option."""

    @pytest.mark.parametrize(
        "config",
        [
            FormatConfig(),
            FormatConfig(indent_width=4),
            FormatConfig(indent_width=0),
            FormatConfig(compact=True),
            FormatConfig(key_separator=","),
            FormatConfig(line_break="\r\n"),
        ],
    )
    def test_config(self, config):
        data = {
            "product": "Laptop",
            "price": 999.5,
            "reviews": [
                {"id": 1, "customer": "Alice", "comment": "Great, fast"},
                {"id": 2, "customer": "Bob", "comment": None},
            ],
        }
        assert roundtrip(data, config) == data

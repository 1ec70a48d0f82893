"""Tests for wren.text — label and message helpers."""

import pytest

from wren.errors import ConfigurationError
from wren.text import check_auto_id, format_to_array, pretty_name, strip


class TestFormatToArray:
    def test_substitutes_values_unstringified(self) -> None:
        marker = object()
        assert format_to_array("{count} errors in {field}", {"count": 2, "field": marker}) == [
            2,
            " errors in ",
            marker,
        ]

    def test_unknown_placeholder_kept(self) -> None:
        assert format_to_array("Hi {name}", {}) == ["Hi ", "{name}"]

    def test_strips_empty_strings(self) -> None:
        assert format_to_array("{a}{b}", {"a": "x", "b": "y"}) == ["x", "y"]

    def test_strip_disabled(self) -> None:
        assert format_to_array("{a}", {"a": "x"}, strip=False) == ["", "x", ""]

    def test_no_placeholders(self) -> None:
        assert format_to_array("plain", {}) == ["plain"]


class TestPrettyName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("firstName", "First name"),
            ("first_name", "First name"),
            ("FirstName", "First name"),
            ("SHOUTING_LIKE_THIS", "SHOUTING LIKE THIS"),
            ("email", "Email"),
            ("postcodeUK", "Postcode UK"),
        ],
    )
    def test_pretty_name(self, name: str, expected: str) -> None:
        assert pretty_name(name) == expected


class TestStrip:
    def test_strips_whitespace(self) -> None:
        assert strip("  hi \n") == "hi"

    def test_coerces(self) -> None:
        assert strip(42) == "42"


class TestCheckAutoId:
    @pytest.mark.parametrize("auto_id", [None, "", False, "id_{name}", "{name}"])
    def test_valid(self, auto_id: object) -> None:
        check_auto_id(auto_id)

    @pytest.mark.parametrize("auto_id", ["id_", True, 5])
    def test_invalid(self, auto_id: object) -> None:
        with pytest.raises(ConfigurationError, match="placeholder"):
            check_auto_id(auto_id)

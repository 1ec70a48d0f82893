"""Tests for wren.choices — normalising choice lists for select widgets."""

import logging
from dataclasses import dataclass

import pytest

from wren.choices import make_choices, normalise_choices
from wren.errors import ConfigurationError


class TestNormaliseChoices:
    def test_empty_returned_unchanged(self) -> None:
        choices: list = []
        assert normalise_choices(choices) is choices

    def test_pairs_kept(self) -> None:
        assert normalise_choices([("a", "A"), ["b", "B"]]) == [("a", "A"), ("b", "B")]

    def test_bare_values_expanded(self) -> None:
        assert normalise_choices(["a", 1]) == [("a", "a"), (1, 1)]

    def test_optgroup(self) -> None:
        result = normalise_choices([("Fruit", ["apple", ("pear", "Pear")]), "other"])
        assert result == [("Fruit", [("apple", "apple"), ("pear", "Pear")]), ("other", "other")]

    def test_wrong_arity(self) -> None:
        with pytest.raises(ConfigurationError, match="exactly 2 values, but got \\['a', 'b', 'c'\\]"):
            normalise_choices([("a", "b", "c")])

    def test_wrong_arity_in_optgroup(self) -> None:
        with pytest.raises(ConfigurationError, match="optgroup"):
            normalise_choices([("Group", [("a",)])])

    def test_warns_on_expansion_when_verbose(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="wren"):
            normalise_choices(["a"], verbose=True)
        assert "[wren] Warning: choice 'a' was converted to ('a', 'a')" in caplog.text

    def test_silent_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="wren"):
            normalise_choices(["a"])
        assert caplog.text == ""


@dataclass
class Country:
    code: str
    title: str

    def label(self) -> str:
        return self.title.upper()


class TestMakeChoices:
    def test_attributes(self) -> None:
        items = [Country("nz", "New Zealand"), Country("fr", "France")]
        assert make_choices(items, "code", "title") == [("nz", "New Zealand"), ("fr", "France")]

    def test_methods_are_called(self) -> None:
        assert make_choices([Country("nz", "New Zealand")], "code", "label") == [("nz", "NEW ZEALAND")]

    def test_mappings(self) -> None:
        assert make_choices([{"id": 1, "name": "one"}], "id", "name") == [(1, "one")]

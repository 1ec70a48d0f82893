"""Tests for wren.snapshot — immutable captures of input data."""

import pytest

from wren._internal.multimap import MultiValueMapping
from wren.errors import InputError
from wren.snapshot import InputSource, ValidationSnapshot, capture
from wren.widgets import Form, Option, Widget


class ParsedForm(dict):
    """Mimics request form data: first value by key, all values via get_list."""

    def __getitem__(self, key):
        return super().__getitem__(key)[0]

    def get(self, key, default=None):
        values = super().get(key)
        return values[0] if values else default

    def get_list(self, key):
        return list(super().get(key, []))


class ListSource:
    def __init__(self, pairs: list) -> None:
        self.pairs = pairs

    def field_values(self):
        return iter(self.pairs)


# ---------------------------------------------------------------------------
# ValidationSnapshot
# ---------------------------------------------------------------------------


class TestValidationSnapshot:
    def test_getitem_returns_first(self) -> None:
        snapshot = ValidationSnapshot({"color": ["red", "blue"]})
        assert snapshot["color"] == "red"

    def test_getitem_missing_raises(self) -> None:
        with pytest.raises(KeyError):
            ValidationSnapshot({})["missing"]

    def test_get_with_default(self) -> None:
        snapshot = ValidationSnapshot({})
        assert snapshot.get("missing") is None
        assert snapshot.get("missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        snapshot = ValidationSnapshot({"tags": ["python", "web"]})
        assert snapshot.get_list("tags") == ["python", "web"]
        assert snapshot.get_list("missing") == []

    def test_value_shapes(self) -> None:
        snapshot = ValidationSnapshot({"one": ["a"], "many": ["a", "b"], "none": []})
        assert snapshot.value("one") == "a"
        assert snapshot.value("many") == ["a", "b"]
        assert snapshot.value("none") is None
        assert snapshot.value("missing") is None

    def test_field_with_no_values_is_absent(self) -> None:
        snapshot = ValidationSnapshot({"choices": [], "name": ["alice"]})
        assert "choices" not in snapshot
        assert list(snapshot) == ["name"]
        assert dict(snapshot) == {"name": "alice"}
        assert snapshot.get_list("choices") == []

    def test_equality_sees_every_value(self) -> None:
        assert ValidationSnapshot({"a": ["1", "2"]}) != ValidationSnapshot({"a": ["1", "3"]})
        assert ValidationSnapshot({"a": ["1", "2"]}) == ValidationSnapshot({"a": ("1", "2")})

    def test_equality_with_plain_mapping(self) -> None:
        snapshot = ValidationSnapshot({"name": ["alice"], "tags": ["a", "b"]})
        assert snapshot == {"name": "alice", "tags": ["a", "b"]}
        assert snapshot != {"name": "alice", "tags": "a"}
        assert snapshot != "alice"

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(ValidationSnapshot({"a": ["1"]}))

    def test_to_dict(self) -> None:
        snapshot = ValidationSnapshot({"name": ["alice"], "tags": ["a", "b"], "empty": [""]})
        assert snapshot.to_dict() == {"name": "alice", "tags": ["a", "b"], "empty": ""}

    def test_immutable(self) -> None:
        snapshot = ValidationSnapshot({"name": ["alice"]})
        with pytest.raises(AttributeError):
            snapshot._data = {}  # type: ignore[misc]
        with pytest.raises(TypeError):
            snapshot["name"] = "bob"  # type: ignore[index]

    def test_not_affected_by_source_mutation(self) -> None:
        values = ["a"]
        snapshot = ValidationSnapshot({"tags": values})
        values.append("b")
        assert snapshot.get_list("tags") == ["a"]

    def test_mapping_protocol(self) -> None:
        snapshot = ValidationSnapshot({"a": ["1"], "b": ["2"]})
        assert set(snapshot) == {"a", "b"}
        assert len(snapshot) == 2
        assert isinstance(snapshot, MultiValueMapping)

    def test_repr(self) -> None:
        assert "alice" in repr(ValidationSnapshot({"name": ["alice"]}))


# ---------------------------------------------------------------------------
# capture()
# ---------------------------------------------------------------------------


class TestCapture:
    def test_none_raises(self) -> None:
        with pytest.raises(InputError, match="source=None"):
            capture(None)

    def test_snapshot_passes_through(self) -> None:
        snapshot = ValidationSnapshot({"a": ["1"]})
        assert capture(snapshot) is snapshot

    def test_mapping(self) -> None:
        snapshot = capture({"name": "alice", "tags": ["a", "b"], "skip": None})
        assert snapshot.value("name") == "alice"
        assert snapshot.get_list("tags") == ["a", "b"]
        assert "skip" not in snapshot

    def test_multi_value_mapping_keeps_every_value(self) -> None:
        snapshot = capture(ParsedForm({"tags": ["a", "b"], "name": ["alice"]}))
        assert snapshot.get_list("tags") == ["a", "b"]
        assert snapshot.value("name") == "alice"

    def test_input_source_accumulates_repeats(self) -> None:
        source = ListSource([("tag", "a"), ("name", "x"), ("tag", ["b", "c"]), ("tag", None)])
        assert isinstance(source, InputSource)
        snapshot = capture(source)
        assert snapshot.get_list("tag") == ["a", "b", "c"]
        assert snapshot.value("name") == "x"

    def test_form(self) -> None:
        form = Form(
            elements=(
                Widget("name", value="alice"),
                Widget("colour", type="select-multiple", options=(Option("r", selected=True), Option("g"))),
            )
        )
        snapshot = capture(form)
        assert snapshot.value("name") == "alice"
        assert snapshot.get_list("colour") == ["r"]

    def test_mapping_rejects_scalar_values(self) -> None:
        with pytest.raises(InputError, match="'age'"):
            capture({"age": 5})

    def test_mapping_rejects_bytes(self) -> None:
        with pytest.raises(InputError, match="'name'"):
            capture({"name": b"alice"})

    def test_form_with_empty_multi_select(self) -> None:
        form = Form(
            elements=(
                Widget("name", value="alice"),
                Widget("tags", type="select-multiple", options=(Option("x"),)),
            )
        )
        snapshot = capture(form)
        assert "tags" not in snapshot
        assert dict(snapshot) == {"name": "alice"}

    def test_unsupported(self) -> None:
        with pytest.raises(InputError):
            capture(object())

"""Tests for dotted key path helpers in catalog_compare/engine/key_path.py."""

from __future__ import annotations

from catalog_compare.engine import ABSENT
from catalog_compare.engine import key_path


class TestEncodeDecode:
    """Tests for encode() and decode()."""

    def test_encode_joins_segments(self):
        assert key_path.encode(["app", "title"]) == "app.title"

    def test_encode_drops_empty_segments(self):
        assert key_path.encode(["app", "", None, "title"]) == "app.title"

    def test_decode_splits_path(self):
        assert key_path.decode("menu.file.open") == ["menu", "file", "open"]

    def test_decode_drops_empty_segments(self):
        assert key_path.decode(".a..b.") == ["a", "b"]

    def test_decode_empty_and_non_string(self):
        assert key_path.decode("") == []
        assert key_path.decode(None) == []
        assert key_path.decode(42) == []

    def test_child_path(self):
        assert key_path.child_path("", "app") == "app"
        assert key_path.child_path("app", "title") == "app.title"


class TestRead:
    """Tests for read()."""

    def test_read_nested_value(self):
        doc = {"app": {"title": "My App"}}
        assert key_path.read(doc, "app.title") == "My App"

    def test_read_container(self):
        doc = {"app": {"title": "My App"}}
        assert key_path.read(doc, "app") == {"title": "My App"}

    def test_read_missing_key_is_absent(self):
        assert key_path.read({"app": {}}, "app.title") is ABSENT

    def test_read_through_leaf_is_absent(self):
        """A path continuing past a leaf is absent, not an error."""
        assert key_path.read({"app": "text"}, "app.title") is ABSENT

    def test_read_null_is_not_absent(self):
        assert key_path.read({"a": None}, "a") is None

    def test_read_empty_path_is_absent(self):
        assert key_path.read({"a": 1}, "") is ABSENT


class TestWrite:
    """Tests for write()."""

    def test_write_creates_intermediates(self):
        doc: dict = {}
        key_path.write(doc, "a.b.c", 1)
        assert doc == {"a": {"b": {"c": 1}}}

    def test_write_overwrites_leaf_intermediate(self):
        doc = {"a": "text"}
        key_path.write(doc, "a.b", 1)
        assert doc == {"a": {"b": 1}}

    def test_write_keeps_siblings(self):
        doc = {"app": {"title": "X"}}
        key_path.write(doc, "app.welcome", "Hi")
        assert doc == {"app": {"title": "X", "welcome": "Hi"}}

    def test_write_empty_path_is_noop(self):
        doc = {"a": 1}
        key_path.write(doc, "", 2)
        assert doc == {"a": 1}


class TestRemove:
    """Tests for remove()."""

    def test_remove_existing_key(self):
        doc = {"app": {"title": "X", "welcome": "Hi"}}
        assert key_path.remove(doc, "app.welcome") is True
        assert doc == {"app": {"title": "X"}}

    def test_remove_top_level_key(self):
        doc = {"a": 1, "b": 2}
        assert key_path.remove(doc, "a") is True
        assert doc == {"b": 2}

    def test_remove_missing_key(self):
        doc = {"app": {}}
        assert key_path.remove(doc, "app.title") is False
        assert key_path.remove(doc, "nope.title") is False
        assert key_path.remove(doc, "") is False

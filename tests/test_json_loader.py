"""Tests for catalog loading in catalog_compare/data_formats/json_loader.py."""

from __future__ import annotations

import json

import pytest

from catalog_compare.data_formats import (
    Catalog,
    CatalogLoadError,
    CatalogNotFoundError,
    FileTooLargeError,
    InvalidJsonError,
    InvalidKeyError,
    KeyLimitExceededError,
    NotAnObjectError,
    UnsupportedFileTypeError,
    load_catalog,
    parse_catalog,
)


class TestLoadCatalog:
    """Tests for load_catalog() with valid files."""

    def test_load_fixture(self, en_file, en_catalog):
        catalog = load_catalog(en_file)

        assert isinstance(catalog, Catalog)
        assert catalog.data == en_catalog
        assert catalog.key_count == 10
        assert catalog.file_name == "en.json"
        assert catalog.file_size == en_file.stat().st_size

    def test_accepts_str_path(self, en_file):
        assert load_catalog(str(en_file)).file_name == "en.json"

    def test_extension_is_case_insensitive(self, write_catalog):
        path = write_catalog("DE.JSON", {"a": "b"})
        assert load_catalog(path).data == {"a": "b"}

    def test_unicode_content(self, write_catalog):
        path = write_catalog("ja.json", {"greeting": "こんにちは"})
        assert load_catalog(path).data == {"greeting": "こんにちは"}

    def test_empty_object(self, write_catalog):
        catalog = load_catalog(write_catalog("empty.json", {}))
        assert catalog.data == {}
        assert catalog.key_count == 0

    def test_keys_are_sanitized(self, write_catalog):
        path = write_catalog("bad.json", '{"__proto__": {"admin": true}, " menu\\u0000": "x"}')
        assert load_catalog(path).data == {"menu": "x"}

    def test_dotted_key_rejected(self, write_catalog):
        path = write_catalog("flat.json", {"menu": {"file.open": "Open"}})

        with pytest.raises(InvalidKeyError) as exc_info:
            load_catalog(path)

        assert exc_info.value.key_path == "menu.file.open"
        assert str(exc_info.value).startswith("flat.json: ")

    def test_colliding_keys_keep_first(self, write_catalog):
        path = write_catalog("dup.json", '{"title": "first", "title\\u0001": "second"}')
        assert load_catalog(path).data == {"title": "first"}


class TestLoadCatalogErrors:
    """Tests for load_catalog() failure modes."""

    def test_not_found(self, tmp_path):
        with pytest.raises(CatalogNotFoundError, match="File not found"):
            load_catalog(tmp_path / "missing.json")

    def test_directory_is_not_found(self, tmp_path):
        with pytest.raises(CatalogNotFoundError):
            load_catalog(tmp_path)

    def test_unsupported_extension(self, write_catalog):
        path = write_catalog("en.yaml", {"a": 1})
        with pytest.raises(UnsupportedFileTypeError, match=r"\.json"):
            load_catalog(path)

    def test_too_large(self, en_file):
        with pytest.raises(FileTooLargeError, match="File too large"):
            load_catalog(en_file, max_file_size=10)

    def test_invalid_json_has_location(self, write_catalog):
        path = write_catalog("broken.json", '{\n  "a": 1,\n  "b": \n}')

        with pytest.raises(InvalidJsonError) as exc_info:
            load_catalog(path)

        assert exc_info.value.line == 4
        assert exc_info.value.column == 1
        assert "line 4" in str(exc_info.value)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes('{"a": "caf\xe9"}'.encode("latin-1"))

        with pytest.raises(InvalidJsonError, match="UTF-8"):
            load_catalog(path)

    @pytest.mark.parametrize("root", [[1, 2], "text", 42, None])
    def test_root_must_be_object(self, write_catalog, root):
        path = write_catalog("root.json", json.dumps(root))
        with pytest.raises(NotAnObjectError, match="must be an object"):
            load_catalog(path)

    def test_key_limit(self, en_file):
        with pytest.raises(KeyLimitExceededError, match="more than 5 keys") as exc_info:
            load_catalog(en_file, max_keys=5)
        assert exc_info.value.limit == 5

    def test_key_limit_disabled(self, en_file):
        assert load_catalog(en_file, max_keys=None).key_count == 10

    def test_errors_share_base_class(self):
        for error in (
            CatalogNotFoundError,
            UnsupportedFileTypeError,
            FileTooLargeError,
            InvalidJsonError,
            NotAnObjectError,
            InvalidKeyError,
            KeyLimitExceededError,
        ):
            assert issubclass(error, CatalogLoadError)
            assert issubclass(error, ValueError)


class TestParseCatalog:
    """Tests for parse_catalog() on raw text."""

    def test_parse_text(self):
        catalog = parse_catalog('{"user": {"profile": {"name": "John"}}}', "user.json")

        assert catalog.key_count == 3
        assert catalog.file_name == "user.json"
        assert catalog.file_size == len('{"user": {"profile": {"name": "John"}}}')

    def test_size_counts_utf8_bytes(self):
        text = '{"a": "é"}'
        assert parse_catalog(text).file_size == len(text.encode("utf-8"))

    def test_too_large(self):
        with pytest.raises(FileTooLargeError):
            parse_catalog('{"a": "xxxxxxxxxx"}', max_file_size=5)

    def test_empty_text(self):
        with pytest.raises(InvalidJsonError, match="non-empty string"):
            parse_catalog("")

    def test_nan_rejected(self):
        with pytest.raises(InvalidJsonError, match="NaN"):
            parse_catalog('{"a": NaN}')

    def test_dotted_top_level_key_rejected(self):
        with pytest.raises(InvalidKeyError, match="menu.open"):
            parse_catalog('{"menu.open": "Open"}')

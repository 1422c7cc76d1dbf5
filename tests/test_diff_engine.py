"""Tests for the structural diff in catalog_compare/engine/diff_engine.py."""

from __future__ import annotations

import pytest

from catalog_compare.data_formats import parse_catalog
from catalog_compare.engine import (
    ABSENT,
    ComparisonRecord,
    ComparisonStatus,
    EditKind,
    EditStore,
    compare,
    filter_records,
    key_path,
    summarize,
    values_equal,
)


def statuses_by_path(records: list[ComparisonRecord]) -> dict[str, ComparisonStatus]:
    """Helper to map key paths to statuses."""
    return {record.key_path: record.status for record in records}


class TestValuesEqual:
    """Tests for values_equal()."""

    def test_bool_never_equals_number(self):
        assert not values_equal(True, 1)
        assert not values_equal(0, False)

    def test_int_equals_float(self):
        assert values_equal(1, 1.0)

    def test_null_only_equals_null(self):
        assert values_equal(None, None)
        assert not values_equal(None, "")
        assert not values_equal(None, 0)

    def test_container_key_order_ignored(self):
        assert values_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_container_never_equals_leaf(self):
        assert not values_equal({}, [])
        assert not values_equal({"a": 1}, "a")

    def test_arrays_compare_element_wise(self):
        assert values_equal([1, [2, {"x": 3}]], [1, [2, {"x": 3}]])
        assert not values_equal([1, 2], [2, 1])
        assert not values_equal([1, 2], [1, 2, 3])

    def test_string_vs_number(self):
        assert not values_equal("1", 1)


class TestCompareScenarios:
    """Reference scenarios for compare()."""

    def test_missing_left(self):
        left = {"app": {"title": "My App"}}
        right = {"app": {"title": "My App", "welcome": "Welcome"}}

        records = [r for r in compare(left, right) if r.status is not ComparisonStatus.IDENTICAL]

        assert len(records) == 1
        record = records[0]
        assert record.key_path == "app.welcome"
        assert record.status is ComparisonStatus.MISSING_LEFT
        assert record.left_value is ABSENT
        assert record.right_value == "Welcome"

    def test_different_leaf_has_no_container_record(self):
        records = compare({"a": {"b": "x"}}, {"a": {"b": "y"}})

        assert len(records) == 1
        assert records[0].key_path == "a.b"
        assert records[0].status is ComparisonStatus.DIFFERENT

    def test_arrays_are_atomic(self):
        records = compare({"items": [1, 2, 3]}, {"items": [1, 2, 4]})

        assert len(records) == 1
        assert records[0].key_path == "items"
        assert records[0].status is ComparisonStatus.DIFFERENT


class TestCompare:
    """Tests for compare() behavior."""

    def test_fixture_catalogs(self, en_catalog, fr_catalog):
        statuses = statuses_by_path(compare(en_catalog, fr_catalog))

        assert statuses == {
            "app.title": ComparisonStatus.DIFFERENT,
            "app.welcome": ComparisonStatus.MISSING_RIGHT,
            "menu.file.open": ComparisonStatus.DIFFERENT,
            "menu.file.save": ComparisonStatus.IDENTICAL,
            "menu.help": ComparisonStatus.MISSING_RIGHT,
            "plurals": ComparisonStatus.DIFFERENT,
            "beta": ComparisonStatus.IDENTICAL,
            "legacy": ComparisonStatus.MISSING_LEFT,
        }

    def test_order_left_keys_then_right_only_keys(self):
        records = compare({"b": 1, "a": 1}, {"c": 1, "a": 1, "b": 1})
        assert [r.key_path for r in records] == ["b", "a", "c"]

    def test_missing_subtree_is_one_record(self):
        """A container missing on one side is reported once, with its whole value."""
        records = compare({}, {"legacy": {"banner": "x", "footer": {"text": "y"}}})

        assert len(records) == 1
        assert records[0].key_path == "legacy"
        assert records[0].right_value == {"banner": "x", "footer": {"text": "y"}}

    def test_container_vs_leaf_is_different(self):
        records = compare({"a": {"b": 1}}, {"a": "text"})

        assert len(records) == 1
        assert records[0].key_path == "a"
        assert records[0].status is ComparisonStatus.DIFFERENT

    def test_bool_vs_int_is_different(self):
        records = compare({"flag": True}, {"flag": 1})
        assert records[0].status is ComparisonStatus.DIFFERENT

    def test_null_values_are_present(self):
        records = compare({"a": None}, {"a": None})
        assert records[0].status is ComparisonStatus.IDENTICAL
        assert records[0].left_value is None

    def test_empty_containers_produce_no_records(self):
        assert compare({"a": {}}, {"a": {}}) == []
        assert compare({}, {}) == []

    @pytest.mark.parametrize("other", [None, [1, 2], "text"])
    def test_non_container_side_treated_as_empty(self, other):
        records = compare({"a": 1}, other)
        assert statuses_by_path(records) == {"a": ComparisonStatus.MISSING_RIGHT}

    def test_prefix(self):
        records = compare({"x": 1}, {"x": 2}, prefix="root")
        assert records[0].key_path == "root.x"

    def test_self_comparison_is_all_identical(self, en_catalog):
        records = compare(en_catalog, en_catalog)
        assert records
        assert all(r.status is ComparisonStatus.IDENTICAL for r in records)

    def test_symmetry(self, en_catalog, fr_catalog):
        """Swapping sides swaps missing-left and missing-right and the two values."""
        swap = {
            ComparisonStatus.MISSING_LEFT: ComparisonStatus.MISSING_RIGHT,
            ComparisonStatus.MISSING_RIGHT: ComparisonStatus.MISSING_LEFT,
            ComparisonStatus.IDENTICAL: ComparisonStatus.IDENTICAL,
            ComparisonStatus.DIFFERENT: ComparisonStatus.DIFFERENT,
        }
        forward = {r.key_path: r for r in compare(en_catalog, fr_catalog)}
        backward = {r.key_path: r for r in compare(fr_catalog, en_catalog)}

        assert forward.keys() == backward.keys()
        for path, record in forward.items():
            mirrored = backward[path]
            assert mirrored.status is swap[record.status]
            assert values_equal(mirrored.left_value, record.right_value)
            assert values_equal(mirrored.right_value, record.left_value)

    def test_idempotent(self, en_catalog, fr_catalog):
        first = compare(en_catalog, fr_catalog)
        second = compare(en_catalog, fr_catalog)

        assert [r.to_dict() for r in first] == [r.to_dict() for r in second]

    def test_no_duplicate_paths(self, en_catalog, fr_catalog):
        paths = [r.key_path for r in compare(en_catalog, fr_catalog)]
        assert len(paths) == len(set(paths))

    def test_inputs_not_mutated(self, en_catalog, fr_catalog):
        import copy

        before = copy.deepcopy((en_catalog, fr_catalog))
        compare(en_catalog, fr_catalog)
        assert (en_catalog, fr_catalog) == before


# Catalog text whose keys only become usable segments after loading
RAW_CATALOG_TEXT = """{
  " app ": {"title": "My App", "__proto__": {"admin": true}},
  "menu\\u0000": {"file": {"open": "Open"}, "help": "Help"},
  "count": 3
}"""


class TestKeyPathResolution:
    """Every record path resolves through key_path to one of the compared values."""

    @pytest.fixture
    def loaded(self):
        return parse_catalog(RAW_CATALOG_TEXT, "raw.json").data

    def test_record_paths_resolve(self, en_catalog, fr_catalog):
        for record in compare(en_catalog, fr_catalog):
            left = key_path.read(en_catalog, record.key_path)
            right = key_path.read(fr_catalog, record.key_path)

            assert left is not ABSENT or right is not ABSENT
            assert values_equal(left, record.left_value)
            assert values_equal(right, record.right_value)

    def test_loaded_catalog_paths_resolve(self, loaded, en_catalog):
        records = compare(loaded, en_catalog)

        assert {r.key_path for r in records} >= {"app.title", "menu.file.open", "count"}
        for record in records:
            assert (
                key_path.read(loaded, record.key_path) is not ABSENT
                or key_path.read(en_catalog, record.key_path) is not ABSENT
            )

    def test_filling_missing_keys_leaves_nothing_missing(self, loaded, fr_catalog):
        store = EditStore()
        for record in compare(fr_catalog, loaded):
            if record.status is ComparisonStatus.MISSING_LEFT:
                store.record_edit("left", record.key_path, record.right_value, EditKind.ADD)

        filled = store.materialize("left", fr_catalog)
        statuses = {r.status for r in compare(filled, loaded)}

        assert ComparisonStatus.MISSING_LEFT not in statuses


class TestComparisonRecord:
    """Tests for ComparisonRecord.to_dict()."""

    def test_absent_values_are_omitted(self):
        record = ComparisonRecord("app.welcome", ComparisonStatus.MISSING_LEFT, right_value="Welcome")
        assert record.to_dict() == {
            "keyPath": "app.welcome",
            "status": "missing-left",
            "rightValue": "Welcome",
        }

    def test_null_values_are_kept(self):
        record = ComparisonRecord("a", ComparisonStatus.IDENTICAL, left_value=None, right_value=None)
        assert record.to_dict()["leftValue"] is None
        assert record.has_left and record.has_right


class TestSummarizeAndFilter:
    """Tests for summarize() and filter_records()."""

    def test_summarize_counts_every_status(self, en_catalog, fr_catalog):
        summary = summarize(compare(en_catalog, fr_catalog))
        assert summary == {
            "missing-left": 1,
            "missing-right": 2,
            "identical": 2,
            "different": 3,
        }

    def test_summarize_empty(self):
        assert summarize([]) == {
            "missing-left": 0,
            "missing-right": 0,
            "identical": 0,
            "different": 0,
        }

    def test_filter_by_status_values(self, en_catalog, fr_catalog):
        records = filter_records(compare(en_catalog, fr_catalog), ["missing-right"])
        assert [r.key_path for r in records] == ["app.welcome", "menu.help"]

    def test_filter_none_keeps_all(self, en_catalog, fr_catalog):
        records = compare(en_catalog, fr_catalog)
        assert filter_records(records, None) == records

    def test_filter_invalid_status(self):
        with pytest.raises(ValueError):
            filter_records([], ["bogus"])

"""Pytest configuration and shared fixtures for catalog_compare tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def en_catalog() -> dict[str, Any]:
    """Return an English catalog."""
    return {
        "app": {
            "title": "My App",
            "welcome": "Welcome",
        },
        "menu": {
            "file": {"open": "Open", "save": "Save"},
            "help": "Help",
        },
        "plurals": ["one item", "many items"],
        "beta": True,
    }


@pytest.fixture
def fr_catalog() -> dict[str, Any]:
    """Return a partially translated French catalog."""
    return {
        "app": {
            "title": "Mon App",
        },
        "menu": {
            "file": {"open": "Ouvrir", "save": "Save"},
        },
        "plurals": ["un élément", "plusieurs éléments"],
        "beta": True,
        "legacy": {"banner": "Ancien"},
    }


@pytest.fixture
def write_catalog(tmp_path):
    """Return a helper that writes a catalog dict (or raw text) to tmp_path."""

    def _write(name: str, data: dict[str, Any] | str) -> Path:
        path = tmp_path / name
        text = data if isinstance(data, str) else json.dumps(data, ensure_ascii=False, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def en_file(write_catalog, en_catalog) -> Path:
    """Write the English catalog to en.json."""
    return write_catalog("en.json", en_catalog)


@pytest.fixture
def fr_file(write_catalog, fr_catalog) -> Path:
    """Write the French catalog to fr.json."""
    return write_catalog("fr.json", fr_catalog)

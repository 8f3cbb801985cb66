"""Tests for the lookup-table validation script."""

import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "validate_tables.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("validate_tables", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_shipped_tables_are_consistent():
    module = _load_script()

    assert module.collect_errors() == []


def test_find_shadowed():
    module = _load_script()

    assert module.find_shadowed(["oil", "olive oil"], whole_word=False) == [("oil", "olive oil")]
    assert module.find_shadowed(["olive oil", "oil"], whole_word=False) == []


def test_find_shadowed_whole_word():
    module = _load_script()

    assert module.find_shadowed(["pet", "petit"], whole_word=True) == []
    assert module.find_shadowed(["pet", "pet bottle"], whole_word=True) == [("pet", "pet bottle")]


def test_find_duplicates():
    module = _load_script()

    assert module.find_duplicates(["beef", "Beef", "lamb"]) == ["Beef"]

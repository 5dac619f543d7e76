"""Tests for YAML / JSON snapshots of INI files."""

from __future__ import annotations

import json

import pytest
import yaml

from inisettings import (
    IniFile,
    InvalidSnapshot,
    MemoryLineStore,
    dump_json,
    dump_yaml,
    load_yaml,
)

LINES = ["; comment", "[global]", "color=purple", "name='sam'", "[other]", "x="]


def test_dump_yaml() -> None:
    """Export every section as a mapping."""
    dumped = dump_yaml(IniFile(MemoryLineStore(LINES)))

    assert yaml.safe_load(dumped) == {
        "global": {"color": "purple", "name": "sam"},
        "other": {"x": ""},
    }


def test_dump_json() -> None:
    """Export the same snapshot as JSON."""
    dumped = dump_json(IniFile(MemoryLineStore(LINES)))

    assert json.loads(dumped)["global"] == {"color": "purple", "name": "sam"}


def test_duplicate_sections_warn() -> None:
    """Warn about, and skip, repeated section names."""
    ini = IniFile(MemoryLineStore(["[a]", "x=1", "[a]", "x=2"]))

    with pytest.warns(UserWarning, match="more than once"):
        dumped = dump_yaml(ini)

    assert yaml.safe_load(dumped) == {"a": {"x": "1"}}


def test_load_yaml_merges_into_file() -> None:
    """Merge a snapshot while keeping unrelated lines."""
    store = MemoryLineStore(["[global]", "; keep me", "color=red"])

    load_yaml(IniFile(store), "global:\n  color: blue\n  name: sam\nnew:\n  a: 1\n")

    assert store.lines == [
        "[global]",
        "; keep me",
        "color=blue",
        "name=sam",
        "",
        "",
        "[new]",
        "a=1",
        "",
    ]


def test_load_yaml_round_trip() -> None:
    """Rebuild the same snapshot from a dump."""
    source = IniFile(MemoryLineStore(LINES))
    target = IniFile(MemoryLineStore())

    load_yaml(target, dump_yaml(source))

    assert dump_yaml(target) == dump_yaml(source)


def test_load_empty_yaml_is_noop() -> None:
    """Leave the store alone for an empty document."""
    store = MemoryLineStore(["[a]"])

    load_yaml(IniFile(store), "")

    assert store.lines == ["[a]"]


@pytest.mark.parametrize("document", ["- a\n- b\n", "a: [1, 2]\n"])
def test_load_yaml_rejects_bad_shapes(document: str) -> None:
    """Refuse documents that are not section mappings."""
    with pytest.raises(InvalidSnapshot):
        load_yaml(IniFile(MemoryLineStore()), document)

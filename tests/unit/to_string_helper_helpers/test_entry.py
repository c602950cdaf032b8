import dataclasses

import pytest

from objtools.to_string_helper_helpers.entry import Entry


def test_named_entry_render():
    assert Entry("x", "1").render() == "x=1"


def test_named_null_entry_render():
    entry = Entry("y", None)
    assert entry.is_null
    assert entry.render() == "y=null"


def test_unnamed_entry_render():
    assert Entry(None, "bare").render() == "bare"
    assert Entry(None, None).render() == "null"


def test_entry_is_frozen():
    entry = Entry("x", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "y"  # type: ignore[misc]

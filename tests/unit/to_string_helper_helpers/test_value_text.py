from __future__ import annotations

from enum import IntEnum

import numpy as np
import pytest

from objtools.to_string_helper_helpers.value_text import NULL_TEXT, is_primitive, primitive_text, value_text


@pytest.mark.parametrize(
    "value",
    [True, 1, 1.5, np.bool_(False), np.int8(1), np.uint64(3), np.float16(0.5), np.float32(1.0)],
)
def test_is_primitive_accepts_scalars(value):
    assert is_primitive(value)


@pytest.mark.parametrize("value", [None, "1", b"1", [1], {"a": 1}, object()])
def test_is_primitive_rejects_non_scalars(value):
    assert not is_primitive(value)


def test_primitive_text_booleans():
    assert primitive_text(True) == "true"
    assert primitive_text(np.bool_(False)) == "false"


def test_primitive_text_keeps_single_precision_short():
    assert primitive_text(np.float32(0.1)) == "0.1"
    assert primitive_text(0.1) == "0.1"


def test_primitive_text_integers():
    assert primitive_text(-3) == "-3"
    assert primitive_text(np.uint8(255)) == "255"


def test_value_text_null():
    assert value_text(None) == NULL_TEXT == "null"


def test_value_text_uses_str_for_objects():
    class Thing:
        def __str__(self) -> str:
            return "thing"

    assert value_text(Thing()) == "thing"
    assert value_text("") == ""


class _Level(IntEnum):
    LOW = 1

    def __str__(self) -> str:
        return self.name.lower()


def test_is_primitive_rejects_builtin_subclasses():
    assert not is_primitive(_Level.LOW)
    assert value_text(_Level.LOW) == "low"

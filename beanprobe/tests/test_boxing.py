import ctypes
import numbers
from decimal import Decimal
from typing import Any, List, Optional, Protocol, Union

import pytest

from beanprobe.core.beans import PRIMITIVE_BOXES, boxed_primitive_type, is_assignable_from, is_primitive


@pytest.mark.parametrize(
    "primitive, boxed",
    [
        (ctypes.c_byte, int),
        (ctypes.c_short, int),
        (ctypes.c_int, int),
        (ctypes.c_int64, int),
        (ctypes.c_float, float),
        (ctypes.c_double, float),
        (ctypes.c_bool, bool),
        (ctypes.c_wchar, str),
    ],
)
def test_primitive_maps_to_boxed_type(primitive, boxed):
    assert is_primitive(primitive) is True
    assert boxed_primitive_type(primitive) is boxed


def test_non_primitives_map_to_themselves():
    for tp in (int, str, float, Decimal, numbers.Number, List[int], ctypes.c_char_p, None):
        assert is_primitive(tp) is False
        assert boxed_primitive_type(tp) is tp


def test_box_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMITIVE_BOXES[ctypes.c_uint] = int  # type: ignore[index]


def test_assignability_is_directional():
    assert is_assignable_from(numbers.Number, int) is True
    assert is_assignable_from(int, numbers.Number) is False
    assert is_assignable_from(str, int) is False
    assert is_assignable_from(int, bool) is True


def test_object_and_any_accept_everything():
    assert is_assignable_from(object, bytes) is True
    assert is_assignable_from(Any, Decimal) is True


def test_unions_and_generics():
    assert is_assignable_from(Optional[str], str) is True
    assert is_assignable_from(Union[int, str], bool) is True
    assert is_assignable_from(int | None, str) is False
    assert is_assignable_from(numbers.Number, Union[int, float]) is True
    assert is_assignable_from(numbers.Number, Optional[int]) is False
    assert is_assignable_from(List[int], list) is True
    assert is_assignable_from(list, List[str]) is True


class _Named(Protocol):
    name: str


def test_non_runtime_protocol_is_not_assignable():
    assert is_assignable_from(_Named, str) is False

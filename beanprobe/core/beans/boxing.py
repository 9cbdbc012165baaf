from __future__ import annotations

import ctypes
import types
import typing
from types import MappingProxyType
from typing import Any, Mapping

# ctypes scalar types stand in for primitive value types. Aliases such as
# c_int8/c_byte resolve to the same class and share one entry.
PRIMITIVE_BOXES: Mapping[type, type] = MappingProxyType(
    {
        ctypes.c_byte: int,
        ctypes.c_short: int,
        ctypes.c_int: int,
        ctypes.c_int64: int,
        ctypes.c_longlong: int,
        ctypes.c_float: float,
        ctypes.c_double: float,
        ctypes.c_bool: bool,
        ctypes.c_wchar: str,
    }
)


def is_primitive(tp: Any) -> bool:
    """Return True if tp is one of the primitive (ctypes scalar) types."""
    try:
        return tp in PRIMITIVE_BOXES
    except TypeError:
        # unhashable typing constructs
        return False


def boxed_primitive_type(tp: Any) -> Any:
    """Return the boxed equivalent of a primitive type.

    c_int -> int, c_double -> float, c_bool -> bool, c_wchar -> str. Any
    other input, including types that are already boxed, is returned as is.
    """

    if is_primitive(tp):
        return PRIMITIVE_BOXES[tp]
    return tp


def _is_union(tp: Any) -> bool:
    origin = typing.get_origin(tp)
    return origin is typing.Union or origin is types.UnionType


def is_assignable_from(declared: Any, candidate: Any) -> bool:
    """Return True if a value of type ``candidate`` can be used where
    ``declared`` is expected.

    The relation is directional: a property declared as numbers.Number is
    assignable from int, but a property declared as int is not assignable
    from numbers.Number.

    Time:  O(u) where u is the number of Union members
    Space: O(1)
    """

    if declared is object or declared is Any:
        return True
    if declared == candidate:
        return True

    if _is_union(declared):
        return any(is_assignable_from(member, candidate) for member in typing.get_args(declared))

    if _is_union(candidate):
        members = typing.get_args(candidate)
        return bool(members) and all(is_assignable_from(declared, m) for m in members)

    declared_cls = typing.get_origin(declared) or declared
    candidate_cls = typing.get_origin(candidate) or candidate
    if not isinstance(declared_cls, type) or not isinstance(candidate_cls, type):
        return False

    try:
        return issubclass(candidate_cls, declared_cls)
    except TypeError:
        # e.g. non runtime-checkable protocols
        return False

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

from .access import probe_property
from .boxing import boxed_primitive_type, is_assignable_from, is_primitive
from .descriptors import describe_properties
from .exceptions import IntrospectionError

log = logging.getLogger("beanprobe.inspector")


@dataclass(frozen=True, slots=True)
class Property:
    """A property name and its (possibly boxed) type."""

    name: str
    property_type: Any


class PropertyIterator(Iterator[Property]):
    """Walks an inspector's names and types in lockstep.

    Read-only: remove() raises NotImplementedError.
    """

    __slots__ = ("_names", "_types", "_index")

    def __init__(self, names: Tuple[str, ...], types: Tuple[Any, ...]) -> None:
        self._names = names
        self._types = types
        self._index = 0

    def __iter__(self) -> "PropertyIterator":
        return self

    def __next__(self) -> Property:
        if self._index >= len(self._names):
            raise StopIteration
        i = self._index
        self._index += 1
        return Property(self._names[i], self._types[i])

    def remove(self) -> None:
        raise NotImplementedError("properties cannot be removed during iteration")


class BeanPropertyInspector:
    """
    Inspects a bean and provides its property names and types.

    Properties are those introduced strictly between ``type(target)`` and
    ``stop_type``: properties declared by ``stop_type`` or its ancestors are
    not reported. Each candidate is read once from ``target``; a property
    whose read fails is silently left out. The value read is discarded.

    Primitive (ctypes scalar) property types are reported as their boxed
    equivalent (c_int -> int) when ``report_boxed_primitives`` is True.

    Limitation
    - A property that does not exist and a property whose read failed look
      the same: both are absent. Use probe_property() to tell them apart.

    Invariants
    - names() and types() are the same length and index-aligned
    - both are frozen after construction

    Raises IntrospectionError if the property metadata of ``type(target)``
    cannot be enumerated. Per-property read failures never raise.

    Complexity
    - construction: O(p) probes for p candidate properties
    - count / names / types: O(1)
    - names_assignable_from: O(p)
    """

    __slots__ = ("_target", "_stop_type", "_report_boxed", "_names", "_types")

    def __init__(self, target: Any, stop_type: type, report_boxed_primitives: bool = False) -> None:
        if target is None:
            raise IntrospectionError("cannot inspect None")

        self._target = target
        self._stop_type = stop_type
        self._report_boxed = bool(report_boxed_primitives)
        self._names, self._types = self._generate_properties()

        log.debug(
            "inspected %s (stop=%s): %d properties",
            type(target).__qualname__,
            getattr(stop_type, "__qualname__", stop_type),
            len(self._names),
        )

    def _generate_properties(self) -> Tuple[Tuple[str, ...], Tuple[Any, ...]]:
        descriptors = describe_properties(type(self._target), self._stop_type)

        outcomes = ((d, probe_property(self._target, d.name)) for d in descriptors)
        kept = [(d.name, self._report_type(d.property_type)) for d, outcome in outcomes if outcome.ok]

        names = tuple(name for name, _ in kept)
        types = tuple(ptype for _, ptype in kept)
        return names, types

    def _report_type(self, ptype: Any) -> Any:
        if self._report_boxed and is_primitive(ptype):
            return boxed_primitive_type(ptype)
        return ptype

    @property
    def target(self) -> Any:
        return self._target

    @property
    def stop_type(self) -> type:
        return self._stop_type

    @property
    def report_boxed_primitives(self) -> bool:
        return self._report_boxed

    def count(self) -> int:
        """Number of properties that survived probing."""
        return len(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def names(self) -> Tuple[str, ...]:
        """Property names in discovery order."""
        return self._names

    def types(self) -> Tuple[Any, ...]:
        """Property types, index-aligned with names()."""
        return self._types

    def names_assignable_from(self, candidate_type: Any) -> List[str]:
        """Names of properties whose type is the same as, or a supertype of,
        ``candidate_type``.

        A property declared as numbers.Number is included for candidate int;
        a property declared as str is not.
        """

        return [
            name
            for name, ptype in zip(self._names, self._types)
            if is_assignable_from(ptype, candidate_type)
        ]

    @staticmethod
    def boxed_primitive_type(primitive_type: Any) -> Any:
        """Boxed equivalent of a primitive type, or the type unchanged."""
        return boxed_primitive_type(primitive_type)

    def __iter__(self) -> PropertyIterator:
        return PropertyIterator(self._names, self._types)

    def __repr__(self) -> str:
        return (
            f"BeanPropertyInspector(target={type(self._target).__qualname__}, "
            f"stop_type={getattr(self._stop_type, '__qualname__', self._stop_type)}, "
            f"count={len(self._names)})"
        )

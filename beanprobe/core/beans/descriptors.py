from __future__ import annotations

import ctypes
import dataclasses
import functools
import inspect
import typing
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .exceptions import IntrospectionError

KIND_FIELD = "field"
KIND_ANNOTATION = "annotation"
KIND_PROPERTY = "property"


@dataclass(frozen=True, slots=True)
class PropertyDescriptor:
    """A readable property introduced by one class.

    kind is one of:
    - "field": a ctypes Structure/Union field from ``_fields_``
    - "annotation": an annotated attribute (dataclass, pydantic, plain class)
    - "property": a ``property`` getter or ``functools.cached_property``
    """

    name: str
    property_type: Any
    declaring_class: type
    kind: str


def _is_public(name: Any) -> bool:
    return isinstance(name, str) and bool(name) and not name.startswith("_")


def _is_classvar(ann: Any) -> bool:
    if isinstance(ann, typing.ForwardRef):
        text = ann.__forward_arg__.strip()
        return text.startswith("ClassVar") or text.startswith("typing.ClassVar")
    return ann is typing.ClassVar or typing.get_origin(ann) is typing.ClassVar


def _read_annotations(obj: Any, owner: str) -> Dict[str, Any]:
    """Own annotations of a class or getter, string annotations resolved.

    If any string annotation cannot be evaluated (e.g. a name imported only
    under TYPE_CHECKING), the raw annotations are returned instead and each
    unresolved string becomes a typing.ForwardRef. Only a failure to read the
    annotations at all raises IntrospectionError.
    """

    try:
        return dict(inspect.get_annotations(obj, eval_str=True))
    except (NameError, AttributeError, SyntaxError, TypeError, ValueError):
        try:
            raw = inspect.get_annotations(obj)
        except Exception as e:
            raise IntrospectionError(f"cannot read annotations of {owner}: {e}") from e

    return {name: _forward_ref(value) if isinstance(value, str) else value for name, value in raw.items()}


def _forward_ref(text: str) -> Any:
    try:
        return typing.ForwardRef(text)
    except SyntaxError:
        # not even a valid expression; keep the text
        return text


def _ctypes_fields(cls: type) -> List[PropertyDescriptor]:
    if not issubclass(cls, (ctypes.Structure, ctypes.Union)):
        return []
    fields = cls.__dict__.get("_fields_") or ()
    out: List[PropertyDescriptor] = []
    for entry in fields:
        name, ftype = entry[0], entry[1]
        if _is_public(name):
            out.append(PropertyDescriptor(name, ftype, cls, KIND_FIELD))
    return out


def _annotated_attributes(cls: type) -> List[PropertyDescriptor]:
    out: List[PropertyDescriptor] = []
    for name, ann in _read_annotations(cls, cls.__qualname__).items():
        if not _is_public(name) or _is_classvar(ann) or isinstance(ann, dataclasses.InitVar):
            continue
        out.append(PropertyDescriptor(name, ann, cls, KIND_ANNOTATION))
    return out


def _getter_return_type(getter: Any, owner: str) -> Any:
    ann = _read_annotations(getter, owner).get("return", inspect.Signature.empty)
    if ann is inspect.Signature.empty:
        return object
    if ann is None:
        return type(None)
    return ann


def _getters(cls: type) -> List[PropertyDescriptor]:
    out: List[PropertyDescriptor] = []
    for name, attr in cls.__dict__.items():
        if not _is_public(name):
            continue
        if isinstance(attr, property):
            if attr.fget is None:
                continue
            getter = attr.fget
        elif isinstance(attr, functools.cached_property):
            getter = attr.func
        else:
            continue
        ptype = _getter_return_type(getter, f"{cls.__qualname__}.{name}")
        out.append(PropertyDescriptor(name, ptype, cls, KIND_PROPERTY))
    return out


def declared_by(cls: type) -> List[PropertyDescriptor]:
    """Readable properties declared in the body of ``cls`` itself."""

    return _ctypes_fields(cls) + _annotated_attributes(cls) + _getters(cls)


def describe_properties(cls: type, stop_type: type) -> Tuple[PropertyDescriptor, ...]:
    """Enumerate readable properties introduced between ``cls`` and ``stop_type``.

    Classes excluded are ``stop_type`` and everything in its MRO. Remaining
    classes of ``cls.__mro__`` are walked base-first, so properties closest
    to the boundary come first and the concrete class's come last. A name
    redeclared in a subclass keeps its first position and takes the
    subclass's declared type.

    Raises IntrospectionError if ``stop_type`` is not ``cls`` or one of its
    ancestors, or if a class's annotations cannot be read at all. An
    annotation that cannot be evaluated is kept as a typing.ForwardRef.

    Time:  O(c + p) for c candidate classes and p declared properties
    Space: O(p)
    """

    if not isinstance(cls, type):
        raise IntrospectionError(f"not a class: {cls!r}")
    if not isinstance(stop_type, type):
        raise IntrospectionError(f"stop type is not a class: {stop_type!r}")
    if stop_type not in cls.__mro__:
        raise IntrospectionError(f"{stop_type.__qualname__} is not {cls.__qualname__} or one of its ancestors")

    excluded = set(stop_type.__mro__)
    candidates = [klass for klass in cls.__mro__ if klass not in excluded]

    by_name: Dict[str, PropertyDescriptor] = {}
    for klass in reversed(candidates):
        for desc in declared_by(klass):
            by_name[desc.name] = desc

    # dict keeps first-insertion order while later assignments replace values
    return tuple(by_name.values())

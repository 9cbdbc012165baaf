from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple, Union

from .exceptions import PropertyAccessError

_SEGMENT = re.compile(r"^([^\W\d]\w*)((?:\[-?\d+\]|\([^()]*\))*)$")
_SUFFIX = re.compile(r"\[(-?\d+)\]|\(([^()]*)\)")

# A parsed segment: attribute name plus ordered index (int) / key (str) lookups.
Segment = Tuple[str, List[Union[int, str]]]


def _split_segments(expression: str) -> List[str]:
    """Split on '.' outside of [] and () so mapped keys may contain dots."""

    parts: List[str] = []
    depth = 0
    current: List[str] = []
    for ch in expression:
        if ch in "[(":
            depth += 1
        elif ch in "])":
            depth -= 1
            if depth < 0:
                raise ValueError("unbalanced brackets")
        if ch == "." and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(ch)
    if depth != 0:
        raise ValueError("unbalanced brackets")
    parts.append("".join(current))
    return parts


def parse_property_expression(expression: str) -> List[Segment]:
    """Parse ``a.b[0].c(key)`` into ``[("a", []), ("b", [0]), ("c", ["key"])]``.

    Raises ValueError on malformed expressions.
    """

    if not isinstance(expression, str) or not expression.strip():
        raise ValueError("property name must be a non-empty string")

    segments: List[Segment] = []
    for part in _split_segments(expression.strip()):
        m = _SEGMENT.match(part)
        if m is None:
            raise ValueError(f"malformed segment {part!r}")
        lookups: List[Union[int, str]] = []
        for idx, key in _SUFFIX.findall(m.group(2)):
            lookups.append(int(idx) if idx else key)
        segments.append((m.group(1), lookups))
    return segments


def get_property(bean: Any, name: str) -> Any:
    """Return the value of a possibly nested, indexed and/or mapped property.

    Supported forms:
    - ``name``            attribute
    - ``a.b.c``           nested attributes
    - ``items[2]``        sequence index
    - ``settings(key)``   mapping key
    and combinations such as ``orders[0].lines(sku).qty``.

    Any failure is raised as PropertyAccessError naming the full
    expression, with the original exception chained.
    """

    try:
        segments = parse_property_expression(name)
    except ValueError as e:
        raise PropertyAccessError(str(name), str(e)) from e

    current = bean
    path = ""
    for attr, lookups in segments:
        if current is None:
            raise PropertyAccessError(name, f"null value at '{path}'")
        path = f"{path}.{attr}" if path else attr
        try:
            current = getattr(current, attr)
        except Exception as e:
            raise PropertyAccessError(name, f"{type(e).__name__}: {e}") from e

        for lookup in lookups:
            if current is None:
                raise PropertyAccessError(name, f"null value at '{path}'")
            label = f"[{lookup}]" if isinstance(lookup, int) else f"({lookup})"
            path = f"{path}{label}"
            try:
                current = current[lookup]
            except Exception as e:
                raise PropertyAccessError(name, f"{type(e).__name__}: {e}") from e

    return current


@dataclass(frozen=True, slots=True)
class ProbeOutcome:
    """Result of a liveness probe. The value read is never kept."""

    name: str
    ok: bool
    error: Optional[PropertyAccessError] = None


def probe_property(bean: Any, name: str) -> ProbeOutcome:
    """Attempt to read ``name`` from ``bean`` and report only success/failure."""

    try:
        get_property(bean, name)
    except PropertyAccessError as e:
        return ProbeOutcome(name=name, ok=False, error=e)
    return ProbeOutcome(name=name, ok=True)

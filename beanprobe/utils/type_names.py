from __future__ import annotations

import typing
from typing import Any


def qualified_type_name(tp: Any) -> str:
    """Render a type or typing construct as a stable, readable name.

    int -> "builtins.int", numbers.Number -> "numbers.Number",
    list[int] -> "list[int]", ForwardRef('Decimal') -> "ForwardRef('Decimal')".
    """

    if isinstance(tp, type) and typing.get_origin(tp) is None:
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE = {"1", "true", "TRUE", "yes", "YES", "on"}
_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class CliConfig:
    """Configuration for the command line tool.

    Read from the environment:
    - BEANPROBE_LOG_LEVEL     logging level name (default WARNING)
    - BEANPROBE_REPORT_BOXED  report ctypes primitives as boxed types
    - BEANPROBE_JSON_INDENT   indent for --json output (default 2)
    """

    log_level: str = "WARNING"
    report_boxed: bool = False
    json_indent: int = 2


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad input."""

    raw = env.get(name, "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        return int(default)


def load_config(env: Optional[Mapping[str, str]] = None) -> CliConfig:
    env = os.environ if env is None else env

    level = env.get("BEANPROBE_LOG_LEVEL", "").strip().upper()
    if level not in _LEVELS:
        level = "WARNING"

    indent = _env_int(env, "BEANPROBE_JSON_INDENT", 2)
    if indent < 0:
        indent = 2

    return CliConfig(
        log_level=level,
        report_boxed=env.get("BEANPROBE_REPORT_BOXED", "").strip() in _TRUE,
        json_indent=indent,
    )

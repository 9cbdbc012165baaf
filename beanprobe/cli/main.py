from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Any, List

from beanprobe.api.models import build_descriptor_list, build_inspection_report
from beanprobe.cli.config import CliConfig, load_config
from beanprobe.core.beans import BeanError, BeanPropertyInspector

log = logging.getLogger("beanprobe.cli")


class UnresolvedReference(Exception):
    """A module:attribute reference could not be resolved."""


def resolve_reference(ref: str) -> Any:
    """Resolve ``package.module:Attr.nested`` to the named object.

    A bare name without ':' is looked up in builtins (``int`` -> builtins.int).
    """

    if not isinstance(ref, str) or not ref.strip():
        raise UnresolvedReference("empty reference")

    module_name, sep, attr_path = ref.strip().partition(":")
    if not sep:
        module_name, attr_path = "builtins", module_name

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise UnresolvedReference(f"cannot import {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise UnresolvedReference(f"{module_name!r} has no attribute {attr_path!r}") from e
    return obj


def _resolve_type(ref: str) -> type:
    obj = resolve_reference(ref)
    if not isinstance(obj, type):
        raise UnresolvedReference(f"{ref!r} is not a class")
    return obj


def _error(message: str, detail: str | None = None) -> int:
    text = f"error: {message}"
    if detail:
        text += f": {detail}"
    print(text, file=sys.stderr)
    return 2


def cmd_inspect(args: argparse.Namespace) -> int:
    """Build a target with a zero-argument factory and inspect it."""

    cfg: CliConfig = args.config
    try:
        factory = resolve_reference(args.target)
        stop_type = _resolve_type(args.stop)
        query = _resolve_type(args.assignable_from) if args.assignable_from else None
    except UnresolvedReference as e:
        return _error("bad reference", str(e))

    if not callable(factory):
        return _error("bad reference", f"{args.target!r} is not callable")

    try:
        target = factory()
    except Exception as e:
        return _error("target factory failed", f"{type(e).__name__}: {e}")

    try:
        inspector = BeanPropertyInspector(target, stop_type, args.boxed or cfg.report_boxed)
    except BeanError as e:
        return _error("introspection failed", str(e))

    report = build_inspection_report(inspector, assignable_from=query)
    log.info("inspected %s: %d properties reported", report.target_type, report.count)

    if args.json:
        print(report.model_dump_json(indent=cfg.json_indent))
        return 0

    for prop in report.properties:
        if query is not None:
            print(prop.name)
        else:
            print(f"{prop.name}\t{prop.type}")
    return 0


def cmd_describe(args: argparse.Namespace) -> int:
    """List declared properties of a class without reading any of them."""

    cfg: CliConfig = args.config
    try:
        cls = _resolve_type(args.cls)
        stop_type = _resolve_type(args.stop)
    except UnresolvedReference as e:
        return _error("bad reference", str(e))

    try:
        listing = build_descriptor_list(cls, stop_type)
    except BeanError as e:
        return _error("introspection failed", str(e))

    if args.json:
        print(listing.model_dump_json(indent=cfg.json_indent))
        return 0

    for r in listing.properties:
        print(f"{r.name}\t{r.type}\t{r.kind}\t{r.declaring_class}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="beanprobe", description="Inspect readable properties of Python objects")
    sub = p.add_subparsers(dest="cmd", required=True)

    ip = sub.add_parser("inspect", help="Inspect an object built by a zero-argument factory")
    ip.add_argument("target", help="Factory reference, e.g. mypkg.models:Point")
    ip.add_argument("--stop", default="builtins:object", help="Stop type reference (default: builtins:object)")
    ip.add_argument("--boxed", action="store_true", help="Report ctypes primitives as boxed Python types")
    ip.add_argument("--assignable-from", default=None, help="Only list properties assignable from this type")
    ip.add_argument("--json", action="store_true", help="Print JSON report")
    ip.set_defaults(func=cmd_inspect)

    dp = sub.add_parser("describe", help="List declared properties of a class")
    dp.add_argument("cls", help="Class reference, e.g. mypkg.models:Point")
    dp.add_argument("--stop", default="builtins:object", help="Stop type reference (default: builtins:object)")
    dp.add_argument("--json", action="store_true", help="Print JSON")
    dp.set_defaults(func=cmd_describe)

    return p


def main(argv: List[str] | None = None) -> int:
    """CLI entry."""
    cfg = load_config()
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)
    args.config = cfg
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())

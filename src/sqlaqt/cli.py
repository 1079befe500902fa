"""Command-line entry point: render an AST read from a YAML or JSON file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from sqlaqt.compiler.validator import validate_sql
from sqlaqt.dialect import DialectRegistry, UnsupportedDialectError
from sqlaqt.errors import RenderError
from sqlaqt.renderer import Renderer, RenderResult
from sqlaqt.settings import RenderSettings

logger = logging.getLogger("sqlaqt.cli")

_RENDERERS: dict[str, Callable[[Renderer, Any], RenderResult]] = {
    "select": Renderer.render_select,
    "insert": Renderer.render_insert,
    "update": Renderer.render_update,
    "delete": Renderer.render_delete,
    "where": Renderer.render_where,
}


def _load(source: str | None) -> Any:
    if source is None or source == "-":
        return yaml.safe_load(sys.stdin)
    with open(Path(source)) as f:
        return yaml.safe_load(f)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlaqt",
        description="Render an abstract query tree (YAML or JSON) to SQL and bind values",
    )
    parser.add_argument("input", nargs="?", help="AST file (default: stdin)")
    parser.add_argument("--dialect", default="ansi",
                        help="Quoting preset: " + ", ".join(DialectRegistry.available()))
    parser.add_argument("--statement", choices=sorted(_RENDERERS),
                        help="Tag for a top-level mapping without a 'type' key")
    parser.add_argument("--no-quote", action="store_true",
                        help="Emit identifiers unquoted")
    parser.add_argument("--validate", action="store_true",
                        help="Check the rendered SQL with sqlglot")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = RenderSettings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        render_settings = DialectRegistry.settings_for(
            args.dialect, base=settings, quote=not args.no_quote
        )
    except UnsupportedDialectError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        ast = _load(args.input)
    except (OSError, yaml.YAMLError) as exc:
        print(f"error: cannot read AST: {exc}", file=sys.stderr)
        return 2

    renderer = Renderer(render_settings)
    try:
        render = _RENDERERS.get(args.statement, Renderer.render)
        result = render(renderer, ast)
    except RenderError as exc:
        logger.error("Rendering failed: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(result.sql)
    print(json.dumps(result.binds, default=str))

    if args.validate:
        for warning in validate_sql(result.sql, args.dialect):
            print(f"warning: {warning}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Entry point: python -m structgen -f schema.json

Reads a JSON (Hyper-)Schema, resolves each top-level property into a
record tree and prints the Go struct declarations.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .codegen import generate
from .context_builder import build_context
from .errors import SchemaLoadError, StructgenError
from .loader import load_schema

LOG_LEVEL_ENV = "STRUCTGEN_LOG_LEVEL"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger("structgen")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structgen",
        description="Generate Go structs from a JSON (Hyper-)Schema.",
    )
    parser.add_argument("-f", dest="file", default="", help="source schema file")
    parser.add_argument("-p", "--package", default=None, help="emit a package clause")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="write to this file instead of stdout")
    parser.add_argument("--expand-refs", action="store_true",
                        help="expand $ref to object schemas into nested structs")
    parser.add_argument("--log-level", default=None, type=str.upper,
                        choices=LOG_LEVELS,
                        help=f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if not args.file:
        parser.error("no file specified")

    level = (args.log_level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    if level not in LOG_LEVELS:
        parser.error(f"invalid ${LOG_LEVEL_ENV}: {level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        schema = load_schema(args.file)
    except SchemaLoadError as exc:
        print(f"structgen: {exc}", file=sys.stderr)
        return 1

    try:
        context = build_context(schema, package=args.package, expand_refs=args.expand_refs)
    except StructgenError as exc:
        print(f"structgen: {exc}", file=sys.stderr)
        return 1
    text = generate(context, args.output)
    if args.output is None:
        sys.stdout.write(text)
    else:
        logger.info("wrote %s (%d records)", args.output, context["record_count"])

    for key, message in context["errors"].items():
        print(f"structgen: {key}: {message}", file=sys.stderr)
    return 1 if context["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())

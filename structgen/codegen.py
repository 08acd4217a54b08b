"""Render Record trees as Go struct declarations."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

from .record import Primitive

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "structs.go.j2"

_GO_TYPES: dict[Primitive, str] = {
    Primitive.STRING: "string",
    Primitive.INTEGER: "int",
    Primitive.BOOL: "bool",
    Primitive.STRUCT: "struct{}",
}


def go_type(primitive: Primitive) -> str:
    """Return the Go spelling of a field's primitive type."""
    return _GO_TYPES[Primitive(primitive)]


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["go_type"] = go_type
    return env


def render(context: dict[str, Any]) -> str:
    """Render the struct template for a context from build_context."""
    template = _environment().get_template(TEMPLATE_NAME)
    return template.render(**context)


def generate(context: dict[str, Any], output: Path | None = None) -> str:
    """Render the context and, if ``output`` is given, write it there."""
    text = render(context)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text)
    return text

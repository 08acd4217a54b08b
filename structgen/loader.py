"""Load a JSON (Hyper-)Schema document and dereference local $ref pointers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from urllib.parse import unquote

from .errors import ReferenceResolutionError, SchemaLoadError

logger = logging.getLogger(__name__)


def load_schema(path: Path | str) -> dict[str, Any]:
    """Load the schema document from disk."""
    schema_file = Path(path)
    try:
        with open(schema_file, encoding="utf-8") as f:
            schema = json.load(f)
    except OSError as exc:
        raise SchemaLoadError(f"cannot read {schema_file}: {exc.strerror or exc}") from exc
    except json.JSONDecodeError as exc:
        raise SchemaLoadError(f"{schema_file} is not valid JSON: {exc}") from exc

    if not isinstance(schema, dict):
        raise SchemaLoadError(f"{schema_file}: top-level value must be a JSON object")
    logger.debug("loaded schema from %s", schema_file)
    return schema


def get_properties(schema: dict[str, Any]) -> dict[str, Any]:
    """Extract the properties map from a schema node."""
    properties = schema.get("properties")
    return {} if properties is None else properties


def get_definitions(schema: dict[str, Any]) -> dict[str, Any]:
    """Extract the definitions map from a schema node."""
    definitions = schema.get("definitions")
    return {} if definitions is None else definitions


def _unescape(token: str) -> str:
    # RFC 6901: ~1 before ~0
    return unquote(token).replace("~1", "/").replace("~0", "~")


def resolve_ref(schema: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a local $ref pointer (``#/definitions/user``) in the schema."""
    if not ref.startswith("#"):
        raise ReferenceResolutionError(ref, "only local references are supported")

    pointer = ref[1:]
    if pointer and not pointer.startswith("/"):
        raise ReferenceResolutionError(ref, "malformed JSON pointer")

    node: Any = schema
    if pointer:
        for part in pointer[1:].split("/"):
            token = _unescape(part)
            if isinstance(node, dict) and token in node:
                node = node[token]
            elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
                node = node[int(token)]
            else:
                raise ReferenceResolutionError(ref, f"no such member {token!r}")

    if not isinstance(node, dict):
        raise ReferenceResolutionError(ref, "target is not a schema object")
    return node

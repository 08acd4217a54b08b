"""Resolve JSON schema nodes into Record trees.

Handles:
- definitions and properties maps, each walked in key order
- $ref entries (leaf primitive by default, nested record with expand_refs)
- nested "object" entries as child records
- "type" given as a string or as a list, with "null" ignored
- recursion ceiling and $ref cycle detection
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from .errors import (
    CyclicReferenceError,
    DepthExceededError,
    MalformedTypeListError,
    ReferenceResolutionError,
)
from .loader import get_definitions, get_properties, resolve_ref
from .naming import format_name
from .record import Primitive, Record

logger = logging.getLogger(__name__)

# Bounds cyclic or pathologically nested schemas
MAX_DEPTH = 10

# JSON schema type tag -> target primitive. "null" has no counterpart.
_TYPE_MAP: dict[str, Primitive] = {
    "string": Primitive.STRING,
    "integer": Primitive.INTEGER,
    "number": Primitive.INTEGER,
    "boolean": Primitive.BOOL,
    "object": Primitive.STRUCT,
    "array": Primitive.STRUCT,
}


def schema_types(schema: dict[str, Any]) -> list[str]:
    """Return the declared type tags of a schema node as a list."""
    declared = schema.get("type")
    if declared is None:
        return []
    if isinstance(declared, str):
        return [declared]
    if isinstance(declared, list) and all(isinstance(tag, str) for tag in declared):
        return list(declared)
    raise MalformedTypeListError(
        f"type must be a string or a list of strings, got {declared!r}"
    )


def primitive_for(types: list[str]) -> Primitive:
    """Map the first mappable type tag to its target primitive."""
    for tag in types:
        primitive = _TYPE_MAP.get(tag)
        if primitive is not None:
            return primitive
    raise MalformedTypeListError(f"no primitive type in {types!r}")


def _types(record_name: str, key: str, schema: dict[str, Any]) -> list[str]:
    try:
        return schema_types(schema)
    except MalformedTypeListError as exc:
        raise MalformedTypeListError(f"{record_name}.{key}: {exc}") from exc


def _follow_refs(
    root: dict[str, Any],
    schema: dict[str, Any],
    active_refs: frozenset[str],
) -> tuple[dict[str, Any], frozenset[str]]:
    """Dereference a $ref chain until a node without $ref is reached.

    Returns the target and the active reference set extended with every
    reference followed on the way.
    """
    while "$ref" in schema:
        ref = schema["$ref"]
        if not isinstance(ref, str):
            raise ReferenceResolutionError(repr(ref), "not a string")
        if ref in active_refs:
            raise CyclicReferenceError(ref)
        active_refs = active_refs | {ref}
        schema = resolve_ref(root, ref)
    return schema, active_refs


def _leaf(record_name: str, key: str, schema: dict[str, Any]) -> Primitive:
    types = _types(record_name, key, schema)
    try:
        return primitive_for(types)
    except MalformedTypeListError as exc:
        raise MalformedTypeListError(f"{record_name}.{key}: {exc}") from exc


def _sorted_map(record_name: str, keyword: str, mapping: Any) -> list[tuple[str, Any]]:
    if not isinstance(mapping, dict):
        raise MalformedTypeListError(f"{record_name}: {keyword} must be an object")
    return sorted(mapping.items())


def _entries(record_name: str, schema: dict[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield definitions then properties, each sorted by key."""
    yield from _sorted_map(record_name, "definitions", get_definitions(schema))
    yield from _sorted_map(record_name, "properties", get_properties(schema))


def resolve_record(
    schema: dict[str, Any],
    root: dict[str, Any],
    depth: int = 0,
    *,
    name: str = "",
    expand_refs: bool = False,
    active_refs: frozenset[str] = frozenset(),
) -> Record:
    """Resolve one schema node into a Record one level below ``depth``."""
    depth += 1
    if depth > MAX_DEPTH:
        raise DepthExceededError(
            f"{name or 'schema'}: nesting exceeds {MAX_DEPTH} levels"
        )

    if not isinstance(schema, dict):
        raise MalformedTypeListError(f"{name or 'schema'}: not a schema object")
    schema, active_refs = _follow_refs(root, schema, active_refs)

    fields: dict[str, Primitive] = {}
    children: list[Record] = []

    for key, entry in _entries(name, schema):
        if not isinstance(entry, dict):
            raise MalformedTypeListError(f"{name}.{key}: not a schema object")
        field_name = format_name(key)

        if field_name in fields:
            logger.info("%s: %r replaces field %s", name, key, field_name)
            del fields[field_name]
        elif any(c.name == field_name for c in children):
            logger.info("%s: %r replaces nested record %s", name, key, field_name)
            children = [c for c in children if c.name != field_name]

        if "$ref" in entry:
            # A leaf only needs its own chain to terminate
            chain_start = active_refs if expand_refs else frozenset()
            target, entry_refs = _follow_refs(root, entry, chain_start)
            if expand_refs and "object" in _types(name, key, target):
                children.append(resolve_record(
                    target, root, depth,
                    name=field_name,
                    expand_refs=expand_refs,
                    active_refs=entry_refs,
                ))
            else:
                fields[field_name] = _leaf(name, key, target)
        elif "object" in _types(name, key, entry):
            children.append(resolve_record(
                entry, root, depth,
                name=field_name,
                expand_refs=expand_refs,
                active_refs=active_refs,
            ))
        else:
            fields[field_name] = _leaf(name, key, entry)

    logger.debug(
        "resolved %s at depth %d (%d fields, %d children)",
        name, depth, len(fields), len(children),
    )
    return Record(name=name, depth=depth, fields=fields, children=tuple(children))


def top_level_entries(root: dict[str, Any]) -> list[tuple[str, str, Any]]:
    """Return ``(key, record name, schema)`` for each top-level property.

    Keys are visited in sorted order. A later key whose record name matches
    an earlier one replaces it, so record names are unique.
    """
    by_name: dict[str, tuple[str, Any]] = {}
    for key, schema in _sorted_map("root", "properties", get_properties(root)):
        record_name = format_name(key)
        if record_name in by_name:
            logger.info(
                "%r replaces top-level record %s from %r",
                key, record_name, by_name[record_name][0],
            )
        by_name[record_name] = (key, schema)
    return sorted(
        ((key, record_name, schema) for record_name, (key, schema) in by_name.items()),
        key=lambda entry: entry[0],
    )


def resolve_records(
    root: dict[str, Any],
    *,
    expand_refs: bool = False,
) -> list[Record]:
    """Resolve every top-level property of the root schema, sorted by key."""
    return [
        resolve_record(schema, root, 0, name=record_name, expand_refs=expand_refs)
        for _, record_name, schema in top_level_entries(root)
    ]

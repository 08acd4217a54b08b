"""Build the codegen template context from a loaded schema.

Each top-level property is resolved on its own so that one broken
property is reported without losing the records of the others.
"""

from __future__ import annotations

import logging
from typing import Any

from .errors import StructgenError
from .record import Record
from .resolver import resolve_record, top_level_entries

logger = logging.getLogger(__name__)


def build_records(
    root: dict[str, Any],
    *,
    expand_refs: bool = False,
) -> tuple[list[Record], dict[str, str]]:
    """Resolve every top-level property, collecting failures by key."""
    records: list[Record] = []
    errors: dict[str, str] = {}

    for key, record_name, schema in top_level_entries(root):
        try:
            record = resolve_record(
                schema, root, 0,
                name=record_name,
                expand_refs=expand_refs,
            )
        except StructgenError as exc:
            logger.debug("property %r failed: %s", key, exc)
            errors[key] = str(exc)
            continue
        records.append(record)

    return records, errors


def build_context(
    root: dict[str, Any],
    *,
    package: str | None = None,
    expand_refs: bool = False,
) -> dict[str, Any]:
    """Build the full template context for structs.go.j2."""
    records, errors = build_records(root, expand_refs=expand_refs)
    return {
        "records": records,
        "errors": errors,
        "record_count": len(records),
        "package": package,
    }

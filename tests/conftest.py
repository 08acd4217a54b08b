"""Shared schema fixtures for structgen tests."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Schema documents
# ---------------------------------------------------------------------------

USER_SCHEMA: dict[str, Any] = {
    "properties": {
        "user": {
            "properties": {
                "user_id": {"type": ["integer"]},
                "profile": {
                    "type": ["object"],
                    "properties": {
                        "avatar_url": {"type": ["string"]},
                    },
                },
            },
        },
    },
}


def _nested(levels: int) -> dict[str, Any]:
    """Build a root whose single property nests ``levels`` objects deep.

    The top-level property counts as the first level, so ``levels=1`` is a
    flat record with one leaf field.
    """
    node: dict[str, Any] = {
        "type": ["object"],
        "properties": {"leaf": {"type": ["string"]}},
    }
    for _ in range(levels - 1):
        node = {"type": ["object"], "properties": {"inner": node}}
    return {"properties": {"outer": node}}


@pytest.fixture
def nested_schema():
    return _nested


@pytest.fixture
def user_schema() -> dict[str, Any]:
    return copy.deepcopy(USER_SCHEMA)


@pytest.fixture
def hyper_schema_path() -> Path:
    return FIXTURES / "hyper_schema.json"


@pytest.fixture
def broken_schema_path() -> Path:
    return FIXTURES / "broken.json"

"""Exceptions raised while loading and resolving schemas."""

from __future__ import annotations


class StructgenError(Exception):
    """Base class for every error raised by structgen."""


class SchemaLoadError(StructgenError):
    """The schema file could not be read or parsed."""


class ReferenceResolutionError(StructgenError):
    """A $ref could not be dereferenced against the root document."""

    def __init__(self, ref: str, reason: str) -> None:
        super().__init__(f"cannot resolve $ref {ref!r}: {reason}")
        self.ref = ref
        self.reason = reason


class DepthExceededError(StructgenError):
    """Resolution nested deeper than the recursion ceiling."""


class CyclicReferenceError(DepthExceededError):
    """A $ref was reached again while it was still being expanded."""

    def __init__(self, ref: str) -> None:
        super().__init__(f"cyclic $ref {ref!r}")
        self.ref = ref


class MalformedTypeListError(StructgenError):
    """A schema node declares no primitive type that can be mapped."""

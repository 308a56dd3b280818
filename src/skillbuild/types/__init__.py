"""Shared type aliases for skillbuild."""

from .common import JsonObject, JsonScalar, JsonValue

__all__ = ["JsonObject", "JsonScalar", "JsonValue"]

"""Helper functions producing schema nodes.

Each helper returns a freshly built dict. Fragments passed in are deep
copied, so the result never shares structure with the caller's objects.
"""
from copy import deepcopy
from typing import Any, Container, Dict, Mapping, Optional

from ..errors import InvalidArgument
from .constants import SCHEMA_REF_PREFIX


def ensure_fragment(value: Any, what: str) -> Dict[str, Any]:
    """Return a detached copy of a schema fragment or raise InvalidArgument."""
    if not isinstance(value, Mapping):
        raise InvalidArgument(f"{what} must be a schema fragment mapping, got {type(value).__name__}")
    return deepcopy(dict(value))


def reference(model_name: str, known: Optional[Container[str]] = None) -> Dict[str, Any]:
    """Pointer to a schema under ``#/components/schemas/``.

    ``known`` is an optional registry of schema names; when given, names
    outside it are rejected. Without it the name is not looked up.
    """
    if not isinstance(model_name, str):
        raise InvalidArgument(f"schema name must be a string, got {type(model_name).__name__}")
    if not model_name:
        raise InvalidArgument("schema name must not be empty")
    if isinstance(known, str):
        raise InvalidArgument("schema registry must be a collection of names, not a string")
    if known is not None and model_name not in known:
        raise InvalidArgument(f"unknown schema {model_name!r}")
    return {"$ref": SCHEMA_REF_PREFIX + model_name}


def type_(type_name: str) -> Dict[str, Any]:
    if not isinstance(type_name, str):
        raise InvalidArgument(f"type name must be a string, got {type(type_name).__name__}")
    return {"type": type_name}


def array(type_data: Mapping[str, Any]) -> Dict[str, Any]:
    items = ensure_fragment(type_data, "array item schema")
    return {"type": "array", "items": items}


__all__ = ["ensure_fragment", "reference", "type_", "array"]

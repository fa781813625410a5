"""Response envelope templates.

Every operation documents the same envelope: errors under ``default`` and
``4XX`` point at the shared ErrorResponse schema, and a successful call
wraps its payload as ``{usage, time, status, result}``. Operations that
may finish asynchronously additionally document a ``202`` body that
carries no result yet.
"""
from typing import Any, Dict, Mapping

from .constants import (
    ACCEPTED_DESCRIPTION,
    ACCEPTED_STATUS,
    ERROR_DESCRIPTION,
    ERROR_SCHEMA,
    ERROR_STATUSES,
    JSON_MEDIA_TYPE,
    STATUS_EXAMPLE,
    SUCCESS_DESCRIPTION,
    SUCCESS_STATUS,
    TIME_DESCRIPTION,
    TIME_EXAMPLE,
    USAGE_SCHEMA,
)
from .helpers import ensure_fragment, reference


def _json_body(description: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"description": description, "content": {JSON_MEDIA_TYPE: {"schema": schema}}}


def _error_entries() -> Dict[str, Any]:
    # built per key so default and 4XX never share a dict
    return {status: _json_body(ERROR_DESCRIPTION, reference(ERROR_SCHEMA)) for status in ERROR_STATUSES}


def _success_entry(result: Dict[str, Any]) -> Dict[str, Any]:
    properties = {
        "usage": {
            "default": None,
            "anyOf": [reference(USAGE_SCHEMA), {"nullable": True}],
        },
        "time": {
            "type": "number",
            "format": "float",
            "description": TIME_DESCRIPTION,
            "example": TIME_EXAMPLE,
        },
        "status": {"type": "string", "example": STATUS_EXAMPLE},
        "result": result,
    }
    return _json_body(SUCCESS_DESCRIPTION, {"type": "object", "properties": properties})


def _accepted_entry() -> Dict[str, Any]:
    # no result yet, and no examples on these fields
    properties = {
        "time": {"type": "number", "format": "float", "description": TIME_DESCRIPTION},
        "status": {"type": "string"},
    }
    return _json_body(ACCEPTED_DESCRIPTION, {"type": "object", "properties": properties})


def response(model: Mapping[str, Any]) -> Dict[str, Any]:
    """Responses object for an operation whose successful result is ``model``.

    Keys are emitted in the order ``default``, ``4XX``, ``200``.
    """
    result = ensure_fragment(model, "response model")
    responses = _error_entries()
    responses[SUCCESS_STATUS] = _success_entry(result)
    return responses


def response_with_accepted(model: Mapping[str, Any]) -> Dict[str, Any]:
    """Like :func:`response`, plus a ``202`` entry for asynchronous completion."""
    responses = response(model)
    responses[ACCEPTED_STATUS] = _accepted_entry()
    return responses


__all__ = ["response", "response_with_accepted"]

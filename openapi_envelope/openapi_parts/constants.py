"""Centralized constants for the response envelope templates.

Field names, descriptions and example values are part of the emitted
document; tests depend on their exact content and ordering.
"""
from typing import Any, Dict

SCHEMA_REF_PREFIX = "#/components/schemas/"
JSON_MEDIA_TYPE = "application/json"

# Shared component names, defined elsewhere in the document
ERROR_SCHEMA = "ErrorResponse"
USAGE_SCHEMA = "HardwareUsage"

ERROR_DESCRIPTION = "error"
SUCCESS_DESCRIPTION = "successful operation"
ACCEPTED_DESCRIPTION = "operation is accepted"

TIME_DESCRIPTION = "Time spent to process this request"
TIME_EXAMPLE = 0.002
STATUS_EXAMPLE = "ok"

# Status keys in emission order
ERROR_STATUSES = ("default", "4XX")
SUCCESS_STATUS = "200"
ACCEPTED_STATUS = "202"

# Component schemas used by the assembled document. The envelope
# templates only reference these by name.
COMPONENT_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "ErrorResponse": {
        "type": "object",
        "properties": {
            "time": {"type": "number", "format": "float", "description": TIME_DESCRIPTION},
            "status": {
                "type": "object",
                "properties": {"error": {"type": "string", "description": "Description of the occurred error."}},
            },
            "result": {"type": "object", "nullable": True},
        },
    },
    "HardwareUsage": {
        "type": "object",
        "properties": {
            "cpu": {"type": "integer"},
            "payload_io_read": {"type": "integer"},
            "payload_io_write": {"type": "integer"},
            "vector_io_read": {"type": "integer"},
            "vector_io_write": {"type": "integer"},
        },
        "required": ["cpu", "payload_io_read", "payload_io_write", "vector_io_read", "vector_io_write"],
    },
    "CollectionDescription": {
        "type": "object",
        "properties": {"name": {"type": "string"}},
        "required": ["name"],
    },
    "CollectionsResponse": {
        "type": "object",
        "properties": {
            "collections": {"type": "array", "items": {"$ref": SCHEMA_REF_PREFIX + "CollectionDescription"}},
        },
        "required": ["collections"],
    },
    "CollectionInfo": {
        "type": "object",
        "properties": {
            "status": {"type": "string", "enum": ["green", "yellow", "grey", "red"]},
            "points_count": {"type": "integer", "nullable": True},
            "segments_count": {"type": "integer"},
        },
        "required": ["status", "segments_count"],
    },
    "UpdateResult": {
        "type": "object",
        "properties": {
            "operation_id": {"type": "integer", "nullable": True},
            "status": {"type": "string", "enum": ["acknowledged", "wait_timeout", "completed"]},
        },
        "required": ["status"],
    },
    "Record": {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "payload": {"type": "object", "nullable": True},
        },
        "required": ["id"],
    },
    "ScoredPoint": {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "version": {"type": "integer"},
            "score": {"type": "number", "format": "float"},
            "payload": {"type": "object", "nullable": True},
        },
        "required": ["id", "version", "score"],
    },
    "CountResult": {
        "type": "object",
        "properties": {"count": {"type": "integer"}},
        "required": ["count"],
    },
}

__all__ = [
    "SCHEMA_REF_PREFIX",
    "JSON_MEDIA_TYPE",
    "ERROR_SCHEMA",
    "USAGE_SCHEMA",
    "ERROR_DESCRIPTION",
    "SUCCESS_DESCRIPTION",
    "ACCEPTED_DESCRIPTION",
    "TIME_DESCRIPTION",
    "TIME_EXAMPLE",
    "STATUS_EXAMPLE",
    "ERROR_STATUSES",
    "SUCCESS_STATUS",
    "ACCEPTED_STATUS",
    "COMPONENT_SCHEMAS",
]

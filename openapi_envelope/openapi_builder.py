"""Deterministic OpenAPI document builder.

Assembles the registry of operations into a full document:
- every operation gets the standard response envelope
- path parameters are declared from the ``{name}`` segments
- operationIds and tags are derived from the path

The response templates only reference ErrorResponse and HardwareUsage by
name; the component schemas passed in here must define them.
"""
import logging
import re
from typing import Any, Dict, Iterable, Mapping, Optional, Set

from .errors import InvalidArgument
from .openapi_parts.constants import COMPONENT_SCHEMAS
from .openapi_parts.helpers import ensure_fragment
from .openapi_parts.operations import OPERATIONS, Operation
from .openapi_parts.responses import response, response_with_accepted

logger = logging.getLogger(__name__)

__all__ = ["build_openapi_spec"]

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
PATH_PARAM = re.compile(r"{([^{}/]+)}")


def _path_parameters(path: str):
    return [
        {"name": name, "in": "path", "required": True, "schema": {"type": "string"}}
        for name in PATH_PARAM.findall(path)
    ]


def _operation_id(method: str, path: str) -> str:
    rid = path.strip("/").replace("/", "_").replace("{", "").replace("}", "")
    return f"{method}_{rid}"


def _check(op: Any) -> Operation:
    if not isinstance(op, Operation):
        raise InvalidArgument(f"operation entries must be Operation, got {type(op).__name__}")
    if not isinstance(op.path, str) or not op.path.startswith("/"):
        raise InvalidArgument(f"operation path must start with '/': {op.path!r}")
    if not op.path.split("/")[1]:
        raise InvalidArgument(f"operation path needs a first segment for its tag: {op.path!r}")
    if op.method not in HTTP_METHODS:
        raise InvalidArgument(f"unsupported method {op.method!r} for {op.path}")
    return op


def build_openapi_spec(
    *,
    title: str = "Vector Search API",
    version: str = "0.1.0",
    operations: Optional[Iterable[Operation]] = None,
    schemas: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> Dict[str, Any]:
    ops = [_check(op) for op in (OPERATIONS if operations is None else operations)]
    schemas = COMPONENT_SCHEMAS if schemas is None else schemas

    paths: Dict[str, Any] = {}
    tag_desc: Dict[str, str] = {}
    issued_ids: Set[str] = set()
    for op in ops:
        item = paths.setdefault(op.path, {})
        if op.method in item:
            raise InvalidArgument(f"duplicate operation {op.method.upper()} {op.path}")
        oid = _operation_id(op.method, op.path)
        if oid in issued_ids:
            raise InvalidArgument(f"duplicate operationId {oid} for {op.method.upper()} {op.path}")
        issued_ids.add(oid)
        tag = op.path.split("/")[1].capitalize()
        template = response_with_accepted if op.accepted else response
        od: Dict[str, Any] = {
            "summary": op.summary,
            "operationId": oid,
            "tags": [tag],
        }
        params = _path_parameters(op.path)
        if params:
            od["parameters"] = params
        od["responses"] = template(op.result)
        item[op.method] = od
        tag_desc[tag] = f"{tag} endpoints"

    logger.debug("Assembled OpenAPI document: %d paths, %d operations", len(paths), len(ops))

    return {
        "openapi": "3.0.3",
        "info": {"title": title, "version": version},
        "paths": paths,
        "components": {"schemas": {name: ensure_fragment(s, f"schema {name}") for name, s in schemas.items()}},
        "tags": [{"name": n, "description": d} for n, d in sorted(tag_desc.items())],
    }

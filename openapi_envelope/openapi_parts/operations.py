"""Declarative registry of documented operations.

Order matters: paths and methods are emitted in registry order, which
keeps the generated document and its hash stable.
"""
from typing import Any, Dict, List, NamedTuple

from .constants import COMPONENT_SCHEMAS
from .helpers import array, reference, type_


class Operation(NamedTuple):
    path: str
    method: str
    summary: str
    result: Dict[str, Any]
    accepted: bool = False


def _ref(name: str) -> Dict[str, Any]:
    return reference(name, known=COMPONENT_SCHEMAS)


COLLECTION = "/collections/{collection_name}"
POINTS = f"{COLLECTION}/points"

OPERATIONS: List[Operation] = [
    Operation("/collections", "get", "List collections", _ref("CollectionsResponse")),
    Operation(COLLECTION, "get", "Collection info", _ref("CollectionInfo")),
    Operation(COLLECTION, "put", "Create collection", type_("boolean")),
    Operation(COLLECTION, "delete", "Delete collection", type_("boolean")),
    Operation(POINTS, "put", "Upsert points", _ref("UpdateResult"), accepted=True),
    Operation(f"{POINTS}/delete", "post", "Delete points", _ref("UpdateResult"), accepted=True),
    Operation(f"{POINTS}/{{id}}", "get", "Get point", _ref("Record")),
    Operation(f"{POINTS}/search", "post", "Search points", array(_ref("ScoredPoint"))),
    Operation(f"{POINTS}/search/batch", "post", "Search batch points", array(array(_ref("ScoredPoint")))),
    Operation(f"{POINTS}/count", "post", "Count points", _ref("CountResult")),
]

__all__ = ["Operation", "OPERATIONS"]

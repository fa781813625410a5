"""Building blocks for the response envelope.

Schema node helpers live in ``helpers``; the response templates that wrap
a caller's model in the standard envelope live in ``responses``.
"""
from .helpers import array, reference, type_
from .responses import response, response_with_accepted

__all__ = [
    "reference",
    "type_",
    "array",
    "response",
    "response_with_accepted",
]

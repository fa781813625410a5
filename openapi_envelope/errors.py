"""Error raised by the schema builders.

Builders check their inputs before constructing anything, so a raised
InvalidArgument never leaves a partially built fragment behind.
"""


class InvalidArgument(TypeError, ValueError):
    """A builder received a structurally wrong input."""


__all__ = ["InvalidArgument"]

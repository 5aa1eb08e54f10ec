"""Exception hierarchy shared by the graph and linked list packages.

Every failure is local and raised synchronously to the caller. Nothing is
retried.
"""


class StructureError(Exception):
    """Base class for all data structure errors.

    Attributes:
        message: Human-readable description of the failure
    """

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the error
        """
        super().__init__(message)
        self.message = message


class OutOfRangeError(StructureError, IndexError):
    """Raised when a vertex index or list position falls outside valid bounds.

    Attributes:
        value: The offending vertex or position
        bound: The exclusive upper bound that was violated
    """

    def __init__(self, message: str, value: int, bound: int):
        super().__init__(message)
        self.value = value
        self.bound = bound


class NotFoundError(StructureError, LookupError):
    """Raised when a value is absent from a collection."""


class EmptyCollectionError(StructureError):
    """Raised on strict access to an empty collection."""


class NodeOwnershipError(StructureError, ValueError):
    """Raised when inserting a node that is still linked into a list."""


__all__ = [
    "EmptyCollectionError",
    "NodeOwnershipError",
    "NotFoundError",
    "OutOfRangeError",
    "StructureError",
]

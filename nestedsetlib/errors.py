"""Exceptions raised by NestedSetLib.

Every failure of a structural operation is reported through one of these
exceptions. Precondition checks always run before any coordinate is changed,
so a raised exception means the collection is exactly as it was before the call.
"""


class NestedSetError(Exception):
    """Base class for all NestedSetLib errors."""
    pass


class NodeNotFoundError(NestedSetError, LookupError):
    """Raised when a referenced node is not part of the nested set."""
    pass


class InvalidNodeOperationError(NestedSetError, ValueError):
    """Raised for structurally illegal requests.

    Examples: deleting or moving the root, moving a branch into itself,
    adding a node that is already in the set.
    """
    pass


class UnsupportedMoveError(NestedSetError, NotImplementedError):
    """Raised for a recognized move that is not supported (same parent)."""
    pass


class IntegrityError(NestedSetError):
    """Raised when the interval numbering is found to be inconsistent."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__(
            f"Nested set integrity violated: {'; '.join(self.problems)}"
        )


class CapacityExceededError(NestedSetError):
    """Raised when an insert would exceed the configured node limit."""
    pass


class SerializationError(NestedSetError, ValueError):
    """Raised when node records cannot be loaded."""
    pass


class ConfigurationError(NestedSetError, ValueError):
    """Raised when a NestedSetConfig fails validation."""
    pass

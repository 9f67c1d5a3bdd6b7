"""Node abstraction for NestedSetLib.

A node is a plain data record carrying an identity, a display name and the
three nested-set coordinates. All structural logic lives in the NestedSet
container; nodes only expose and store their coordinates.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class NestedNode(ABC):
    """Capability interface for anything stored in a NestedSet.

    Subclass this to keep the coordinates wherever suits your application
    (plain attributes, ORM columns, a dict) and to attach any extra fields.
    The container only talks to nodes through these accessors.

    Equality is deliberately left as object identity: the container tracks
    membership by reference, never by value.
    """

    @abstractmethod
    def identifier(self) -> int:
        """Return the caller-assigned id of this node."""
        pass

    @abstractmethod
    def display_name(self) -> str:
        """Return the human readable name of this node."""
        pass

    @abstractmethod
    def get_level(self) -> int:
        """Return the depth of this node (root = 0)."""
        pass

    @abstractmethod
    def get_left(self) -> int:
        """Return the left interval bound."""
        pass

    @abstractmethod
    def get_right(self) -> int:
        """Return the right interval bound."""
        pass

    @abstractmethod
    def set_level(self, level: int) -> None:
        """Store a new depth."""
        pass

    @abstractmethod
    def set_left(self, left: int) -> None:
        """Store a new left bound."""
        pass

    @abstractmethod
    def set_right(self, right: int) -> None:
        """Store a new right bound."""
        pass

    def is_leaf(self) -> bool:
        """Check if this node has no descendants.

        Returns:
            True when the interval holds nothing but its own two endpoints
        """
        return self.get_right() - self.get_left() == 1

    def width(self) -> int:
        """Number of coordinate units used by this node's branch."""
        return self.get_right() - self.get_left() + 1

    def to_dict(self) -> Dict[str, Any]:
        """Return the serializable record for this node."""
        return {
            'id': self.identifier(),
            'node_name': self.display_name(),
            'level': self.get_level(),
            'left': self.get_left(),
            'right': self.get_right(),
        }

    def __str__(self) -> str:
        return self.display_name()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}(id={self.identifier()!r}, "
            f"name={self.display_name()!r}, level={self.get_level()}, "
            f"left={self.get_left()}, right={self.get_right()})"
        )


class Node(NestedNode):
    """Generic node record with plain attribute storage."""

    def __init__(self,
                 node_id: int,
                 name: str = "",
                 level: int = 0,
                 left: int = 0,
                 right: int = 0):
        self.id = node_id
        self.name = name
        self.level = level
        self.left = left
        self.right = right

    def identifier(self) -> int:
        return self.id

    def display_name(self) -> str:
        return self.name

    def get_level(self) -> int:
        return self.level

    def get_left(self) -> int:
        return self.left

    def get_right(self) -> int:
        return self.right

    def set_level(self, level: int) -> None:
        self.level = level

    def set_left(self, left: int) -> None:
        self.left = left

    def set_right(self, right: int) -> None:
        self.right = right

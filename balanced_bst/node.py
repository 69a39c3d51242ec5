"""Node representation and element ordering for the binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


def natural_order(left: Any, right: Any) -> int:
    """Three-way comparison derived from the element type's ``<`` operator."""

    if left < right:
        return -1
    if right < left:
        return 1
    return 0


@dataclass(slots=True)
class Node:
    """A single tree node owning its optional left and right children."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def __post_init__(self) -> None:
        for child in (self.left, self.right):
            if child is not None and not isinstance(child, Node):
                raise TypeError("Node children must be Node instances or None")

    def count_children(self) -> int:
        """Return how many of the two child slots are occupied."""

        return (self.left is not None) + (self.right is not None)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


__all__ = ["Comparator", "Node", "natural_order"]

"""Binary search tree with explicit, on-demand rebalancing."""

from .node import Comparator, Node, natural_order
from .rendering import pretty_print
from .tree import Tree, TreeInputError, Visitor, build_tree

__all__ = [
    "Comparator",
    "Node",
    "Tree",
    "TreeInputError",
    "Visitor",
    "build_tree",
    "natural_order",
    "pretty_print",
]

"""Human-readable tree dump used by the CLI and during debugging."""

from __future__ import annotations

from typing import List, Optional, Union

from .node import Node
from .tree import Tree

Renderable = Union[Tree, Node, None]


def _root_of(source: Renderable) -> Optional[Node]:
    return source.root if isinstance(source, Tree) else source


def _draw(node: Node, prefix: str, is_left: bool, lines: List[str]) -> None:
    if node.right is not None:
        _draw(node.right, prefix + ("│   " if is_left else "    "), False, lines)
    lines.append(f"{prefix}{'└── ' if is_left else '┌── '}{node.value}")
    if node.left is not None:
        _draw(node.left, prefix + ("    " if is_left else "│   "), True, lines)


def pretty_print(source: Renderable) -> str:
    """Draw the tree sideways: right subtree above, left subtree below.

    Each level is indented by four columns so the root sits at the left
    margin. Returns ``"<empty>"`` for an empty tree.
    """

    root = _root_of(source)
    if root is None:
        return "<empty>"
    lines: List[str] = []
    _draw(root, "", True, lines)
    return "\n".join(lines)


__all__ = ["pretty_print"]

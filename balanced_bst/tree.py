"""Binary search tree with on-demand rebalancing.

The :class:`Tree` owns a strict ownership graph of :class:`~balanced_bst.node.Node`
instances and hosts every algorithm that operates on it:

* construction from an unordered iterable – values are deduplicated, sorted
  and split recursively around the lower median, producing a tree of height
  ``ceil(log2(n + 1))``;
* ``find`` / ``insert`` / ``delete`` – iterative descents that carry the parent
  in a local variable instead of a stored back-link;
* in-order, pre-order, post-order and level-order traversals which either
  return the visited values or hand each node to a visitor callback;
* ``height`` / ``depth`` / ``is_balanced`` queries and ``rebalance`` which
  rebuilds the whole structure from its in-order sequence.

Balance is never restored automatically. Repeated insertion may degrade the
shape until :meth:`Tree.rebalance` is called.

A value that is not present in the tree is reported by returning ``None``
from ``find``, ``delete`` and ``depth``; it is never raised. The only
exception the module raises is :class:`TreeInputError`, for elements the
configured comparator cannot order.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from functools import cmp_to_key
import logging
from typing import (
    Any,
    Callable,
    Deque,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from .node import Comparator, Node, natural_order

logger = logging.getLogger(__name__)

Visitor = Callable[[Node], None]


class TreeInputError(TypeError):
    """Raised when tree elements cannot be ordered by the comparator."""


class _Start(Enum):
    ROOT = "root"


StartNode = Union[Node, None, _Start]


def _ordered(compare: Comparator, left: Any, right: Any) -> int:
    try:
        return compare(left, right)
    except TypeError as exc:
        raise TreeInputError(
            f"cannot order {left!r} against {right!r}"
        ) from exc


def _build_balanced(values: Sequence[Any], start: int, stop: int) -> Optional[Node]:
    if start >= stop:
        return None
    mid = start + (stop - start) // 2
    return Node(
        values[mid],
        _build_balanced(values, start, mid),
        _build_balanced(values, mid + 1, stop),
    )


def build_tree(
    elements: Iterable[Any], compare: Optional[Comparator] = None
) -> Optional[Node]:
    """Build a height-balanced node graph from *elements*.

    Duplicates (values comparing equal) collapse to a single node. The middle
    element of every slice becomes the subtree root, using the lower middle on
    even-length slices. Returns ``None`` for an empty input.
    """

    compare = compare or natural_order
    try:
        ordered = sorted(elements, key=cmp_to_key(compare))
    except TypeError as exc:
        raise TreeInputError("tree elements must be mutually comparable") from exc

    unique: List[Any] = []
    for value in ordered:
        if not unique or compare(unique[-1], value) != 0:
            unique.append(value)

    logger.debug(
        "Building tree from %d elements (%d unique)", len(ordered), len(unique)
    )
    return _build_balanced(unique, 0, len(unique))


def _height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    if node.is_leaf:
        return 1
    return max(_height(node.left), _height(node.right)) + 1


def _rightmost(node: Node) -> Node:
    current = node
    while current.right is not None:
        current = current.right
    return current


def _walk_inorder(node: Optional[Node]) -> Iterator[Node]:
    if node is None:
        return
    yield from _walk_inorder(node.left)
    yield node
    yield from _walk_inorder(node.right)


def _walk_preorder(node: Optional[Node]) -> Iterator[Node]:
    if node is None:
        return
    yield node
    yield from _walk_preorder(node.left)
    yield from _walk_preorder(node.right)


def _walk_postorder(node: Optional[Node]) -> Iterator[Node]:
    if node is None:
        return
    yield from _walk_postorder(node.left)
    yield from _walk_postorder(node.right)
    yield node


def _walk_level_order(node: Optional[Node]) -> Iterator[Node]:
    if node is None:
        return
    queue: Deque[Node] = deque([node])
    while queue:
        current = queue.popleft()
        yield current
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)


class Tree:
    """Binary search tree whose balance is restored only on request."""

    __slots__ = ("root", "_compare")

    def __init__(
        self,
        elements: Iterable[Any] = (),
        *,
        compare: Optional[Comparator] = None,
    ) -> None:
        self._compare: Comparator = compare or natural_order
        self.root: Optional[Node] = build_tree(elements, self._compare)

    # ------------------------------------------------------------------
    # Lookup and mutation
    # ------------------------------------------------------------------
    def find(self, value: Any) -> Optional[Node]:
        """Return the node holding *value* or ``None`` when it is absent."""

        _, node = self._locate(value)
        return node

    def insert(self, value: Any) -> None:
        """Insert *value*; inserting a value already present is a no-op.

        The new node is attached at the first empty slot reached by the
        descent. The tree is not rebalanced afterwards.
        """

        if self.root is None:
            self.root = Node(value)
            return

        current: Optional[Node] = self.root
        parent = self.root
        while current is not None:
            order = _ordered(self._compare, value, current.value)
            if order == 0:
                return
            parent = current
            current = current.left if order < 0 else current.right

        if _ordered(self._compare, value, parent.value) < 0:
            parent.left = Node(value)
        else:
            parent.right = Node(value)

    def delete(self, value: Any) -> Optional[Node]:
        """Remove *value* from the tree.

        Returns ``None`` and leaves the tree untouched when *value* is absent.
        A node with two children takes over the largest value of its left
        subtree, which is removed from its original position first; the
        returned handle is then the node that received the new value.
        Otherwise the node is unlinked and returned with its child links
        cleared.
        """

        parent, node = self._locate(value)
        if node is None:
            logger.debug("Delete skipped: %r not found", value)
            return None

        if node.left is not None and node.right is not None:
            replacement = _rightmost(node.left)
            replacement_value = replacement.value
            self.delete(replacement_value)
            node.value = replacement_value
            return node

        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)
        node.left = None
        node.right = None
        return node

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------
    def inorder(
        self, visitor: Optional[Visitor] = None, *, node: StartNode = _Start.ROOT
    ) -> Optional[List[Any]]:
        """Visit left subtree, node, right subtree (ascending order)."""

        return self._traverse(_walk_inorder, visitor, node)

    def preorder(
        self, visitor: Optional[Visitor] = None, *, node: StartNode = _Start.ROOT
    ) -> Optional[List[Any]]:
        """Visit node, left subtree, right subtree."""

        return self._traverse(_walk_preorder, visitor, node)

    def postorder(
        self, visitor: Optional[Visitor] = None, *, node: StartNode = _Start.ROOT
    ) -> Optional[List[Any]]:
        """Visit left subtree, right subtree, node."""

        return self._traverse(_walk_postorder, visitor, node)

    def level_order(
        self, visitor: Optional[Visitor] = None, *, start: StartNode = _Start.ROOT
    ) -> Optional[List[Any]]:
        """Breadth-first traversal, top to bottom and left to right."""

        return self._traverse(_walk_level_order, visitor, start)

    # ------------------------------------------------------------------
    # Shape queries
    # ------------------------------------------------------------------
    def height(self, node: StartNode = _Start.ROOT) -> int:
        """Number of nodes on the longest path from *node* down to a leaf."""

        return _height(self._resolve(node))

    def depth(self, node: Optional[Node]) -> Optional[int]:
        """Number of edges from the root to *node*, ``None`` if not in the tree."""

        if node is None:
            return None
        edges = 0
        current = self.root
        while current is not None:
            order = _ordered(self._compare, node.value, current.value)
            if order == 0:
                return edges
            current = current.left if order < 0 else current.right
            edges += 1
        return None

    def is_balanced(self, node: StartNode = _Start.ROOT) -> bool:
        """Return ``True`` when the subtrees of *node* differ in height by <= 1.

        Only the immediate subtrees of *node* are compared; deeper subtrees
        are not inspected.
        """

        target = self._resolve(node)
        if target is None:
            return True
        return abs(_height(target.left) - _height(target.right)) <= 1

    def rebalance(self) -> None:
        """Rebuild the tree from its in-order sequence."""

        before = self.height()
        self.root = build_tree(self.inorder() or [], self._compare)
        logger.debug("Rebalanced tree: height %d -> %d", before, self.height())

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return sum(1 for _ in _walk_inorder(self.root))

    def __iter__(self) -> Iterator[Any]:
        for node in _walk_inorder(self.root):
            yield node.value

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"Tree(size={len(self)}, height={self.height()})"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _resolve(self, node: StartNode) -> Optional[Node]:
        return self.root if node is _Start.ROOT else node

    def _traverse(
        self,
        walker: Callable[[Optional[Node]], Iterator[Node]],
        visitor: Optional[Visitor],
        node: StartNode,
    ) -> Optional[List[Any]]:
        nodes = walker(self._resolve(node))
        if visitor is None:
            return [current.value for current in nodes]
        for current in nodes:
            visitor(current)
        return None

    def _locate(self, value: Any) -> Tuple[Optional[Node], Optional[Node]]:
        """Return ``(parent, node)`` for *value*; ``node`` is ``None`` if absent."""

        parent: Optional[Node] = None
        current = self.root
        while current is not None:
            order = _ordered(self._compare, value, current.value)
            if order == 0:
                return parent, current
            parent = current
            current = current.left if order < 0 else current.right
        return parent, None

    def _replace_child(
        self, parent: Optional[Node], node: Node, child: Optional[Node]
    ) -> None:
        if parent is None:
            self.root = child
        elif _ordered(self._compare, node.value, parent.value) > 0:
            parent.right = child
        else:
            parent.left = child


__all__ = ["Tree", "TreeInputError", "Visitor", "build_tree"]

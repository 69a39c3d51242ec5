from __future__ import annotations

import pytest

from balanced_bst.node import Node, natural_order


def test_count_children_reports_occupied_slots() -> None:
    assert Node(1).count_children() == 0
    assert Node(2, left=Node(1)).count_children() == 1
    assert Node(2, right=Node(3)).count_children() == 1
    assert Node(2, Node(1), Node(3)).count_children() == 2


def test_is_leaf() -> None:
    assert Node(1).is_leaf
    assert not Node(2, Node(1)).is_leaf


def test_node_rejects_non_node_children() -> None:
    with pytest.raises(TypeError):
        Node(1, left=2)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [(1, 2, -1), (2, 1, 1), (3, 3, 0), ("a", "b", -1)],
)
def test_natural_order_is_three_way(left: object, right: object, expected: int) -> None:
    assert natural_order(left, right) == expected

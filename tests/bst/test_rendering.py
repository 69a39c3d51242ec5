from __future__ import annotations

from balanced_bst import Tree, pretty_print


def test_pretty_print_draws_right_subtree_first() -> None:
    tree = Tree([1, 2, 3, 4, 5, 6, 7])
    expected = "\n".join(
        [
            "│       ┌── 7",
            "│   ┌── 6",
            "│   │   └── 5",
            "└── 4",
            "    │   ┌── 3",
            "    └── 2",
            "        └── 1",
        ]
    )
    assert pretty_print(tree) == expected


def test_pretty_print_accepts_nodes_and_empty_trees() -> None:
    tree = Tree([1, 2, 3])
    assert pretty_print(tree.root) == "│   ┌── 3\n└── 2\n    └── 1"
    assert pretty_print(Tree()) == "<empty>"
    assert pretty_print(None) == "<empty>"


def test_pretty_print_skewed_tree() -> None:
    tree = Tree()
    for value in (1, 2, 3):
        tree.insert(value)
    assert pretty_print(tree) == "│       ┌── 3\n│   ┌── 2\n└── 1"

"""Command line driver for the on-demand rebalancing binary search tree.

The script walks a tree through its whole lifecycle so the behaviour of
``balanced_bst`` can be inspected directly from a terminal:

1. build a tree from random integers (or from ``--values``),
2. append ``101`` through ``105`` which skews the right spine,
3. call :meth:`~balanced_bst.Tree.rebalance` to restore the shape.

After each stage the balance flag, height and the three depth-first
traversals are reported either as text or as JSON.
"""

from __future__ import annotations

import argparse
from dataclasses import asdict, dataclass
import json
import logging
import random
from typing import List, Sequence

from balanced_bst import Tree, pretty_print

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 15
VALUE_RANGE = (1, 100)
INSERTED_VALUES = (101, 102, 103, 104, 105)


@dataclass(frozen=True)
class StageReport:
    """Snapshot of the tree after one stage of the demonstration."""

    stage: str
    balanced: bool
    height: int
    preorder: List[int]
    postorder: List[int]
    inorder: List[int]
    drawing: str = ""

    def to_lines(self) -> List[str]:
        status = "Yes" if self.balanced else "No"
        lines = [
            f"[{self.stage}] balanced? {status} (height: {self.height})",
            f"  preorder:  {self.preorder}",
            f"  postorder: {self.postorder}",
            f"  inorder:   {self.inorder}",
        ]
        if self.drawing:
            lines.append(self.drawing)
        return lines


def _snapshot(stage: str, tree: Tree, *, show_tree: bool) -> StageReport:
    return StageReport(
        stage=stage,
        balanced=tree.is_balanced(),
        height=tree.height(),
        preorder=tree.preorder() or [],
        postorder=tree.postorder() or [],
        inorder=tree.inorder() or [],
        drawing=pretty_print(tree) if show_tree else "",
    )


def run_demo(values: Sequence[int], *, show_tree: bool = False) -> List[StageReport]:
    """Build, skew and rebalance a tree, returning a report per stage."""

    tree = Tree(values)
    reports = [_snapshot("initial", tree, show_tree=show_tree)]

    for value in INSERTED_VALUES:
        tree.insert(value)
    logger.info("Inserted %s", ", ".join(str(value) for value in INSERTED_VALUES))
    reports.append(_snapshot("after insert", tree, show_tree=show_tree))

    tree.rebalance()
    reports.append(_snapshot("after rebalance", tree, show_tree=show_tree))
    return reports


def _random_values(size: int, seed: int) -> List[int]:
    rng = random.Random(seed)
    low, high = VALUE_RANGE
    return [rng.randint(low, high) for _ in range(size)]


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError("value must be a positive integer")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--size",
        type=_positive_int,
        default=DEFAULT_SIZE,
        help="Number of random integers used to seed the tree.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for the random number generator.",
    )
    parser.add_argument(
        "--values",
        type=str,
        default=None,
        help="Comma separated integers used instead of random data.",
    )
    parser.add_argument(
        "--output-format",
        choices=["text", "json"],
        default="text",
        help="Print stage reports as human-readable text or JSON.",
    )
    parser.add_argument(
        "--show-tree",
        action="store_true",
        help="Include a sideways drawing of the tree after each stage.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the demonstration flow and print one report per stage."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.values is not None:
        try:
            values = [int(item) for item in args.values.split(",") if item.strip()]
        except ValueError as exc:
            parser.error(f"Failed to parse integer payloads: {exc}")
    else:
        values = _random_values(args.size, args.seed)
    logger.debug("Demo input: %s", values)

    reports = run_demo(values, show_tree=args.show_tree)

    if args.output_format == "json":
        print(json.dumps([asdict(report) for report in reports], indent=2))
        return 0

    for report in reports:
        for line in report.to_lines():
            print(line)
        print()  # Spacer between stages
    return 0


__all__ = ["StageReport", "main", "run_demo"]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())

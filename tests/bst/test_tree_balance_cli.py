"""Tests for the ``tree_balance`` CLI demonstration script."""

from __future__ import annotations

import json

import pytest

import tree_balance


def test_cli_outputs_stage_reports(capsys: pytest.CaptureFixture[str]) -> None:
    assert tree_balance.main(["--values", "1,2,3,4,5,6,7"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0:5] == [
        "[initial] balanced? Yes (height: 3)",
        "  preorder:  [4, 2, 1, 3, 6, 5, 7]",
        "  postorder: [1, 3, 2, 5, 7, 6, 4]",
        "  inorder:   [1, 2, 3, 4, 5, 6, 7]",
        "",
    ]
    assert lines[5:8] == [
        "[after insert] balanced? No (height: 8)",
        "  preorder:  [4, 2, 1, 3, 6, 5, 7, 101, 102, 103, 104, 105]",
        "  postorder: [1, 3, 2, 5, 105, 104, 103, 102, 101, 7, 6, 4]",
    ]
    assert lines[10:12] == [
        "[after rebalance] balanced? Yes (height: 4)",
        "  preorder:  [7, 4, 2, 1, 3, 6, 5, 103, 102, 101, 105, 104]",
    ]


def test_cli_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["--size", "20", "--seed", "7", "--output-format", "json"]
    assert tree_balance.main(argv) == 0
    payload = json.loads(capsys.readouterr().out)

    assert [report["stage"] for report in payload] == [
        "initial",
        "after insert",
        "after rebalance",
    ]
    assert payload[0]["balanced"] is True
    assert payload[2]["balanced"] is True
    assert payload[2]["inorder"] == payload[1]["inorder"]
    assert payload[1]["inorder"][-5:] == [101, 102, 103, 104, 105]


def test_cli_show_tree_includes_drawing(capsys: pytest.CaptureFixture[str]) -> None:
    assert tree_balance.main(["--values", "1,2,3", "--show-tree"]) == 0
    out = capsys.readouterr().out
    assert "└── 2" in out


def test_cli_rejects_invalid_values() -> None:
    with pytest.raises(SystemExit) as excinfo:
        tree_balance.main(["--values", "1,two,3"])
    assert excinfo.value.code == 2


def test_run_demo_reports_each_stage() -> None:
    reports = tree_balance.run_demo([3, 1, 2])
    assert [report.stage for report in reports] == [
        "initial",
        "after insert",
        "after rebalance",
    ]
    assert reports[0].inorder == [1, 2, 3]
    assert reports[-1].height == 4

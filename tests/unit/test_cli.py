#!/usr/bin/env python3

import json
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest

from scc_finder import __main__ as main_module
from scc_finder import cli
from scc_finder.cli import main

GRAPH = {"a": ["b"], "b": ["a", "c"], "c": []}


def _run(tmp_path: Path, graph: Mapping, *args: str) -> int:
    filepath = tmp_path / "graph.json"
    filepath.write_text(json.dumps(graph))
    return main(
        [
            str(filepath),
            "--outputs-folder",
            str(tmp_path / "outputs"),
            "--outputs-filename",
            "run",
            *args,
        ]
    )


def test_text_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, GRAPH) == 1

    captured = capsys.readouterr()
    assert captured.out == "Component 1: c\nComponent 2: b, a\n"
    assert "Found 2 strongly connected components" in captured.err


def test_json_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, GRAPH, "--format", "json")
    assert json.loads(capsys.readouterr().out) == [["c"], ["b", "a"]]


def test_cycles_only(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, GRAPH, "--cycles-only")

    captured = capsys.readouterr()
    assert captured.out == "Component 1: b, a\n"
    assert "Found 1 cycles" in captured.err


@pytest.mark.parametrize(
    "args, exit_code",
    [
        ([], 1),
        (["--threshold", "1"], 0),
        (["--roots", "c"], 0),
    ],
)
def test_exit_code(tmp_path: Path, args: Sequence[str], exit_code: int) -> None:
    assert _run(tmp_path, GRAPH, *args) == exit_code


def test_roots(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, {"a": ["b"], "b": None, "c": ["a"]}, "--roots", "a")
    assert capsys.readouterr().out == "Component 1: b\nComponent 2: a\n"


def test_ignore_case(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    graph = {"A": ["b"], "B": ["a"]}

    assert _run(tmp_path, graph) == 0
    assert capsys.readouterr().out == (
        "Component 1: b\nComponent 2: A\nComponent 3: a\nComponent 4: B\n"
    )

    assert _run(tmp_path, graph, "--ignore-case") == 1
    assert capsys.readouterr().out == "Component 1: b, A\n"


def test_ignore_case_merges_successors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, {"a": ["b"], "A": ["c"], "b": [], "c": ["a"]}, "--ignore-case")
    assert capsys.readouterr().out == "Component 1: b\nComponent 2: c, a\n"


@pytest.mark.parametrize("content", ["[]", "{", '{"a": "b"}'])
def test_invalid_graph(tmp_path: Path, capsys: pytest.CaptureFixture[str], content: str) -> None:
    filepath = tmp_path / "graph.json"
    filepath.write_text(content)

    assert main([str(filepath), "--outputs-folder", str(tmp_path)]) == 2
    assert "Cannot load graph" in capsys.readouterr().err


def test_missing_graph(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "missing.json"), "--outputs-folder", str(tmp_path)]) == 2
    assert "Cannot load graph" in capsys.readouterr().err


def test_graph(tmp_path: Path) -> None:
    _run(tmp_path, GRAPH, "--graph")
    assert "cluster_1" in (tmp_path / "outputs" / "run.gv").read_text()


def test_debug(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(tmp_path, GRAPH, "--debug")

    assert "Write log to" in capsys.readouterr().err
    log = (tmp_path / "outputs" / "run.log").read_text()
    assert "Compute strongly connected components" in log
    assert "Component 2: b, a" in log
    assert "a -> b" in log


def test_graph_of_cycles_only(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(tmp_path, GRAPH, "--cycles-only", "--graph") == 1

    assert capsys.readouterr().out == "Component 1: b, a\n"
    source = (tmp_path / "outputs" / "run.gv").read_text()
    assert "cluster_0" in source
    assert "cluster_1" not in source
    assert "b -> c" not in source


def test_view(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[Path, Sequence[Sequence[str]], bool]] = []

    def _make_graph(
        filepath: Path,
        components: Sequence[Sequence[str]],
        key: Callable[[str], str],
        children: Callable[[str], Sequence[str] | None],
        view: bool = False,
    ) -> None:
        calls.append((filepath, components, view))

    monkeypatch.setattr(cli, "make_graph", _make_graph)

    _run(tmp_path, GRAPH, "--view")
    assert calls == [(tmp_path / "outputs" / "run.gv", [["c"], ["b", "a"]], True)]


def test_main_module_passes_arguments(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    filepath = tmp_path / "graph.json"
    filepath.write_text(json.dumps({"a": []}))

    assert main_module.main([str(filepath), "--outputs-folder", str(tmp_path)]) == 0
    assert capsys.readouterr().out == "Component 1: a\n"

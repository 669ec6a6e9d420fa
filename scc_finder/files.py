#!/usr/bin/env python3

import json
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

Graph = Mapping[str, Sequence[str] | None]


def load_graph(filepath: Path) -> Graph:
    """Read a JSON object which maps every node name to its successor names

    A successor list may be null, the node has no successors then.
    """
    with filepath.open("r") as fp:
        try:
            raw = json.load(fp)
        except json.JSONDecodeError as e:
            raise ValueError(f"{filepath}: invalid JSON: {e}") from e
    return parse_graph(raw)


def parse_graph(raw: object) -> Graph:
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a JSON object, got {type(raw).__name__}")

    graph: dict[str, list[str] | None] = {}
    for node, successors in raw.items():
        if successors is None:
            graph[node] = None
            continue
        if not isinstance(successors, list):
            raise ValueError(f"Successors of {node!r} must be a list or null")
        for successor in successors:
            if not isinstance(successor, str):
                raise ValueError(f"Successor {successor!r} of {node!r} is not a string")
        graph[node] = list(successors)
    return graph


@dataclass(frozen=True, kw_only=True)
class OutputsFilePaths:
    log: Path
    graph: Path


def get_outputs_file_paths(outputs_folder: Path | None, outputs_filename: str) -> OutputsFilePaths:
    if not outputs_folder:
        outputs_folder = Path.home() / Path(".local", "scc-finder", "outputs")
    outputs_folder.mkdir(parents=True, exist_ok=True)
    if not outputs_filename:
        outputs_filename = str(int(time.time()))
    return OutputsFilePaths(
        log=(outputs_folder / outputs_filename).with_suffix(".log"),
        graph=(outputs_folder / outputs_filename).with_suffix(".gv"),
    )

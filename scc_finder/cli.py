#!/usr/bin/env python3
"""Find the strongly connected components of a directed graph.

The graph is read from a JSON file which maps every node name to the list of
its successor names, eg. {"a": ["b"], "b": ["a", "c"], "c": []}.
Components are written in reverse topological order.
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from . import __version__
from .cycles import is_cyclic
from .files import Graph, get_outputs_file_paths, load_graph
from .graphs import make_graph
from .log import logger, setup_logging
from .tarjan import strongly_connected_components


def _parse_arguments(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "graph_file",
        metavar="GRAPH",
        help="path to JSON file with the successors of every node",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="show additional information for debug purposes",
    )
    parser.add_argument(
        "--outputs-folder",
        help="path to outputs folder. If not set $HOME/.local/scc-finder/outputs/ is used",
    )
    parser.add_argument(
        "--outputs-filename",
        help="outputs filename. If not set the current timestamp is used",
    )
    parser.add_argument(
        "--graph",
        action="store_true",
        help="create graphical representation",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="render and open the graphical representation (needs graphviz binaries)",
    )
    parser.add_argument(
        "--roots",
        nargs="+",
        help="start the search from these nodes only. If not set all nodes of the graph are used",
        default=[],
    )
    parser.add_argument(
        "--ignore-case",
        action="store_true",
        help="treat node names which only differ in case as the same node",
    )
    parser.add_argument(
        "--cycles-only",
        action="store_true",
        help="show only components which contain a cycle",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="output format of the components",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=0,
        help="Tolerate a certain number of cycles, ie. an upper threshold.",
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_arguments(argv)

    outputs_filepaths = get_outputs_file_paths(
        Path(args.outputs_folder) if args.outputs_folder else None,
        args.outputs_filename or "",
    )

    setup_logging(outputs_filepaths.log, args.debug)

    logger.info("Load graph from %s", args.graph_file)
    try:
        graph = load_graph(Path(args.graph_file))
    except (OSError, ValueError) as e:
        logger.error("Cannot load graph: %s", e)
        sys.stderr.write(f"Cannot load graph: {e}\n")
        return 2

    key = _make_key(args.ignore_case)
    children = _make_children(graph, key)

    if _debug():
        logger.debug(
            "Successors of nodes:\n%s",
            "\n".join(_make_readable_graph(graph)),
        )

    logger.info("Compute strongly connected components")
    components = strongly_connected_components(
        args.roots or list(graph),
        key,
        children,
    )
    cycles = [c for c in components if is_cyclic(c, key, children)]

    if args.cycles_only:
        shown = cycles
        sys.stderr.write(f"Found {len(cycles)} cycles\n")
    else:
        shown = components
        sys.stderr.write(f"Found {len(components)} strongly connected components\n")

    if _debug():
        logger.debug(
            "Components:\n%s",
            "\n".join(_make_readable_components(components)),
        )

    if args.format == "json":
        sys.stdout.write(json.dumps(shown) + "\n")
    else:
        for line in _make_readable_components(shown):
            sys.stdout.write(f"{line}\n")

    if args.graph or args.view:
        logger.info("Make graph")
        make_graph(outputs_filepaths.graph, shown, key, children, view=args.view)

    return int(len(cycles) > args.threshold)


#   .--helper--------------------------------------------------------------.
#   |                    _          _                                      |
#   |                   | |__   ___| |_ __   ___ _ __                      |
#   |                   | '_ \ / _ \ | '_ \ / _ \ '__|                     |
#   |                   | | | |  __/ | |_) |  __/ |                        |
#   |                   |_| |_|\___|_| .__/ \___|_|                        |
#   |                                |_|                                   |
#   '----------------------------------------------------------------------'


def _make_key(ignore_case: bool) -> Callable[[str], str]:
    if ignore_case:
        return str.casefold
    return lambda name: name


def _make_children(
    graph: Graph,
    key: Callable[[str], str],
) -> Callable[[str], Sequence[str] | None]:
    # The successors are looked up by key, so "A" finds the entry of "a" with --ignore-case
    successors_by_key: dict[str, Sequence[str] | None] = {}
    for node, successors in graph.items():
        if (node_key := key(node)) in successors_by_key:
            successors_by_key[node_key] = [
                *(successors_by_key[node_key] or ()),
                *(successors or ()),
            ]
        else:
            successors_by_key[node_key] = successors
    return lambda node: successors_by_key.get(key(node))


def _make_readable_graph(graph: Graph) -> Iterator[str]:
    for node, successors in graph.items():
        yield f"  {node} -> {', '.join(successors or ())}"


def _make_readable_components(components: Sequence[Sequence[str]]) -> Iterator[str]:
    for nr, component in enumerate(components, start=1):
        yield f"Component {nr}: {', '.join(component)}"


def _debug() -> bool:
    return logger.level == logging.DEBUG

#!/usr/bin/env python3

import random
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

from graphviz import Digraph

from .log import logger
from .type_defs import ChildrenFunction, K, KeyFunction, V

INTER_COMPONENT_COLOR = "#a0a0a0"


class ComponentEdge(NamedTuple):
    from_node: str
    to_node: str
    edge_color: str


def make_graph(
    filepath: Path,
    components: Sequence[Sequence[V]],
    key: KeyFunction[V, K],
    children: ChildrenFunction[V],
    view: bool = False,
) -> None:
    sys.stderr.write(f"Write graph data to {filepath}\n")

    if not components:
        logger.debug("No such components for graph")
        return

    colors = make_colors(len(components))
    d = Digraph("scc", filename=str(filepath))

    for nr, component in enumerate(components):
        # graphviz only draws a frame around subgraphs named "cluster_*"
        with d.subgraph(name=f"cluster_{nr}") as ds:
            ds.attr(label=f"{nr} ({len(component)})", color=colors[nr])
            for node in component:
                ds.node(str(key(node)), label=str(node), color=colors[nr])

    for edge in make_edges(components, key, children, colors):
        d.edge(edge.from_node, edge.to_node, color=edge.edge_color)

    if view:
        d.unflatten(stagger=50).view()
    else:
        d.save()


def make_colors(count: int) -> Sequence[str]:
    # Seeded so that the same components are drawn with the same colors
    rng = random.Random(count)
    return [
        "#{:02x}{:02x}{:02x}".format(  # pylint: disable=consider-using-f-string
            rng.randint(50, 200),
            rng.randint(50, 200),
            rng.randint(50, 200),
        )
        for _nr in range(count)
    ]


def make_edges(
    components: Sequence[Sequence[V]],
    key: KeyFunction[V, K],
    children: ChildrenFunction[V],
    colors: Sequence[str] | None = None,
) -> Sequence[ComponentEdge]:
    if colors is None:
        colors = make_colors(len(components))

    component_nr_by_key = {key(node): nr for nr, c in enumerate(components) for node in c}

    edges: dict[ComponentEdge, None] = {}
    for nr, component in enumerate(components):
        for node in component:
            for child in children(node) or ():
                child_key = key(child)
                if child_key not in component_nr_by_key:
                    # Successor belongs to no drawn component
                    continue
                edges.setdefault(
                    ComponentEdge(
                        str(key(node)),
                        str(child_key),
                        (
                            colors[nr]
                            if component_nr_by_key[child_key] == nr
                            else INTER_COMPONENT_COLOR
                        ),
                    )
                )
    return list(edges)

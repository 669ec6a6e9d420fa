#!/usr/bin/env python3

from collections.abc import Iterable, Iterator, Sequence

from .tarjan import strongly_connected_components
from .type_defs import ChildrenFunction, K, KeyFunction, V


def is_cyclic(
    component: Sequence[V],
    key: KeyFunction[V, K],
    children: ChildrenFunction[V],
) -> bool:
    if len(component) > 1:
        return True
    if not component:
        return False
    node_key = key(component[0])
    # A single node is only a cycle with a self-loop
    return any(key(child) == node_key for child in children(component[0]) or ())


def detect_cycles(
    nodes: Iterable[V],
    key: KeyFunction[V, K],
    children: ChildrenFunction[V],
) -> Iterator[list[V]]:
    return (
        scc
        for scc in strongly_connected_components(nodes, key, children)
        if is_cyclic(scc, key, children)
    )

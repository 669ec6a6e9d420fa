#!/usr/bin/env python3

from dataclasses import dataclass
from typing import (
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Set,
    Tuple,
    TypeVar,
)

from .type_defs import ChildrenFunction, K, KeyFunction, V

T = TypeVar("T", bound=Hashable)


@dataclass
class _Frame(Generic[V, K]):
    node: V
    key: K
    successors: Iterator[V]


def strongly_connected_components(
    nodes: Iterable[V],
    key: KeyFunction[V, K],
    children: ChildrenFunction[V],
) -> List[List[V]]:
    """
    Tarjan's Algorithm (named for its discoverer, Robert Tarjan) is a graph theory algorithm
    for finding the strongly connected components of a graph.

    The result is in reverse topological order: components further from a root appear
    before the components which point to them. Nodes within a component have no ordering
    guarantee, except that if the first value in `nodes` is contained in a cycle it is the
    last element of that component.

    `key` must return a consistent hashable identity for every node, `children` the next
    reachable nodes (`None` counts as no successors). Only nodes reachable from `nodes` are
    visited, so `nodes` must contain at least one root of every disjoint subgraph.

    The call stack of the textbook recursion is kept on an explicit work list, deep graphs
    do not hit the interpreter's recursion limit.

    Based on: http://en.wikipedia.org/wiki/Tarjan%27s_strongly_connected_components_algorithm
    """

    index_counter: List[int] = [0]
    stack: List[Tuple[V, K]] = []
    on_stack: Set[K] = set()
    lowlinks: MutableMapping[K, int] = {}
    index: MutableMapping[K, int] = {}
    result: List[List[V]] = []

    def enter(node: V, node_key: K) -> _Frame[V, K]:
        # set the depth index for this node to the smallest unused index
        index[node_key] = index_counter[0]
        lowlinks[node_key] = index_counter[0]
        index_counter[0] += 1
        stack.append((node, node_key))
        on_stack.add(node_key)
        return _Frame(node, node_key, iter(children(node) or ()))

    def strongconnect(node: V, node_key: K) -> None:
        work = [enter(node, node_key)]
        while work:
            frame = work[-1]

            # Consider successors of `frame.node`
            for successor in frame.successors:
                successor_key = key(successor)
                if successor_key not in index:
                    # Successor has not yet been visited; descend into it and come
                    # back to the remaining successors afterwards
                    work.append(enter(successor, successor_key))
                    break
                if successor_key in on_stack:
                    # the successor is in the stack and hence in the current
                    # strongly connected component (SCC)
                    lowlinks[frame.key] = min(lowlinks[frame.key], index[successor_key])
            else:
                work.pop()

                # If `frame.node` is a root node, pop the stack and generate an SCC
                if lowlinks[frame.key] == index[frame.key]:
                    component: List[V] = []
                    while True:
                        member, member_key = stack.pop()
                        on_stack.discard(member_key)
                        component.append(member)
                        if member_key == frame.key:
                            break
                    result.append(component)

                if work:
                    parent = work[-1]
                    lowlinks[parent.key] = min(lowlinks[parent.key], lowlinks[frame.key])

    for node in nodes:
        if (node_key := key(node)) not in index:
            strongconnect(node, node_key)

    return result


def components_of_mapping(graph: Mapping[T, Optional[Iterable[T]]]) -> List[List[T]]:
    """Every key of `graph` is a root, successors missing from `graph` are sinks"""
    return strongly_connected_components(graph, lambda node: node, graph.get)

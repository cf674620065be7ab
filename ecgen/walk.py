"""NetworkX view of an enumeration walk.

A materializing session visits every state once, moving along the edges of
the class's transition graph (the hypercube for Gray codes, the adjacent
transposition graph for SJT, ...). ``to_networkx`` records the walk as a path
graph so it can be compared against such graphs with NetworkX.

Example:
    >>> import networkx as nx
    >>> from ecgen import brgc
    >>> from ecgen.walk import to_networkx
    >>> walk = to_networkx(brgc(3))
    >>> cube = nx.hypercube_graph(3)
    >>> all(cube.has_edge(u, v) for u, v in walk.edges)
    True
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable

import networkx as nx

from ecgen.exceptions import InvalidArgument


def to_networkx(
    states: Iterable[Any], key: Callable[[Any], Hashable] = tuple
) -> nx.Graph:
    """Record an enumeration as a path graph.

    Each yielded state is snapshotted with ``key`` before the session
    advances, since materializing sessions reuse one container.

    Args:
        states: A materializing session (or any iterable of states).
        key: Converts a state into a hashable node.

    Returns:
        ``nx.Graph`` with one node per state (attribute ``index``, the visit
        order) and an edge between consecutive states (attribute ``step``,
        the index of the later state).

    Raises:
        InvalidArgument: If a state is visited twice.
    """
    graph = nx.Graph()
    prev = None
    for index, state in enumerate(states):
        node = key(state)
        if node in graph:
            raise InvalidArgument(
                f"state {node!r} visited twice (steps {graph.nodes[node]['index']} and {index})"
            )
        graph.add_node(node, index=index)
        if index > 0:
            graph.add_edge(prev, node, step=index)
        prev = node
    return graph


def visit_order(graph: nx.Graph) -> list:
    """Return the nodes of a walk graph in visit order."""
    return sorted(graph.nodes, key=lambda node: graph.nodes[node]["index"])

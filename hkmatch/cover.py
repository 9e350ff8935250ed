from collections.abc import Mapping
import numpy as np
from .graph import Graph
from .hopcroft_karp import HopcroftKarp
from .exceptions import InvalidInputError

__all__ = ['minimum_vertex_cover', 'maximum_independent_set']


def minimum_vertex_cover(graph: Graph, matching: Mapping[int, int] = None, sides=None) -> list[int]:
    """
    Find a minimum vertex cover of a bipartite graph based on Kőnig's theorem.

    Args:
        graph: bipartite graph
        matching: maximum-cardinality matching of the graph; computed if not provided
        sides: optional partition of the vertices (0 or 1 per vertex)

    Returns:
        list: sorted vertices of the cover

    Raises:
        InvalidInputError: the graph is not bipartite, or `matching` is not a maximum-cardinality matching
    """
    hk = HopcroftKarp(graph, sides)
    if matching is None:
        matching = hk()
    else:
        hk.set_matching(matching)
        if hk.has_augmenting_path():
            raise InvalidInputError('provided matching is not a maximum-cardinality matching')
    # unmatched vertices on side 0
    alist = [u for u in hk.roots if u not in matching]
    visited = _explore_alternating_paths(alist, graph, matching)
    # side-0 vertices not reachable by alternating paths, and reachable side-1 vertices
    cover = [v for v in graph.vertices() if (hk.sides[v] == 0) != visited[v]]
    # number of vertices in minimum vertex cover must agree with
    # maximum-cardinality matching according to Kőnig's theorem
    assert 2 * len(cover) == len(matching)
    return cover


def maximum_independent_set(graph: Graph, matching: Mapping[int, int] = None, sides=None) -> list[int]:
    """
    Find a maximum independent set of a bipartite graph,
    as complement of a minimum vertex cover.
    """
    cover = set(minimum_vertex_cover(graph, matching, sides))
    return [v for v in graph.vertices() if v not in cover]


def _explore_alternating_paths(starts: list[int], graph: Graph, matching: Mapping[int, int]) -> np.ndarray:
    """
    Mark all vertices connected to 'starts' by alternating paths,
    traversing unmatched edges away from side 0 and matched edges back to side 0.
    """
    visited = np.zeros(graph.num_vertices, dtype=bool)
    for s in starts:
        visited[s] = True
    stack = list(starts)
    while stack:
        u = stack.pop()
        for v in graph.neighbors(u):
            # traverse only unmatched edges
            if matching.get(u) == v or visited[v]:
                continue
            visited[v] = True
            # traverse only matched edges
            w = matching.get(v)
            if w is not None and not visited[w]:
                visited[w] = True
                stack.append(w)
    return visited

from collections.abc import Mapping
from .graph import Graph
from .hopcroft_karp import HopcroftKarp

__all__ = ['MATCHING_ALGORITHMS', 'hopcroft_karp_matching', 'maximum_cardinality_matching',
           'is_matching', 'is_maximum_matching', 'matching_to_pairs']


# available maximum-cardinality matching algorithms
MATCHING_ALGORITHMS = ('hopcroft_karp',)


def hopcroft_karp_matching(graph: Graph, sides=None) -> dict[int, int]:
    """
    Compute a maximum-cardinality matching of a bipartite graph via the Hopcroft-Karp algorithm.

    The algorithm runs in O((m + n) sqrt(n)) time, where n is the number of vertices
    and m the number of edges; it is particularly effective for sparse graphs.

    Args:
        graph: bipartite graph
        sides: optional partition of the vertices (0 or 1 per vertex);
               computed by a 2-coloring of the graph if not provided

    Returns:
        dict: matched vertices mapped to their partners; if `i` is matched with `j`,
              both `i -> j` and `j -> i` are included

    Raises:
        InvalidInputError: the graph is not bipartite, or `sides` is not a valid bipartition
    """
    return HopcroftKarp(graph, sides)()


def maximum_cardinality_matching(graph: Graph, algorithm: str = 'hopcroft_karp') -> dict[int, int]:
    """
    Compute a maximum-cardinality matching.

    Args:
        graph: graph for which a maximum matching is computed
        algorithm: matching algorithm, one of `MATCHING_ALGORITHMS`

    Returns:
        dict: matched vertices mapped to their partners, both directions included

    Raises:
        InvalidInputError: the graph is not bipartite but the algorithm only applies to bipartite graphs

    Example:
        >>> maximum_cardinality_matching(path_graph(6))
        {0: 1, 1: 0, 2: 3, 3: 2, 4: 5, 5: 4}
    """
    if algorithm == 'hopcroft_karp':
        return hopcroft_karp_matching(graph)
    raise ValueError(f'algorithm = {algorithm} invalid; must be one of {MATCHING_ALGORITHMS}.')


def is_matching(graph: Graph, matching: Mapping[int, int]) -> bool:
    """
    Test whether `matching` is a symmetric dictionary of vertex-disjoint edges of the graph.
    """
    for u, v in matching.items():
        if not (0 <= u < graph.num_vertices and 0 <= v < graph.num_vertices):
            return False
        if u == v or not graph.has_edge(u, v):
            return False
        if matching.get(v) != u:
            return False
    return True


def is_maximum_matching(graph: Graph, matching: Mapping[int, int], sides=None) -> bool:
    """
    Test whether `matching` is a maximum-cardinality matching of a bipartite graph,
    i.e., a valid matching without any augmenting path.
    """
    if not is_matching(graph, matching):
        return False
    hk = HopcroftKarp(graph, sides)
    hk.set_matching(matching)
    return not hk.has_augmenting_path()


def matching_to_pairs(matching: Mapping[int, int]) -> list[tuple[int, int]]:
    """
    Convert a symmetric matching dictionary to a sorted list of edges (u, v) with u < v.
    """
    return sorted({(min(u, v), max(u, v)) for u, v in matching.items()})

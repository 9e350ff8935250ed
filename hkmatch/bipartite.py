from queue import Queue
import numpy as np
from .graph import Graph
from .exceptions import InvalidInputError

__all__ = ['bipartite_map', 'is_bipartite', 'check_bipartition']


def bipartite_map(graph: Graph):
    """
    Partition the vertices into two independent sets by a breadth-first 2-coloring
    of each connected component.

    Returns:
        numpy array of sides (0 or 1) indexed by vertex, or None if the graph is not bipartite;
        the lowest-indexed vertex of each component is assigned side 0
    """
    sides = np.full(graph.num_vertices, -1, dtype=np.int8)
    for s in graph.vertices():
        if sides[s] != -1:
            # already visited as part of a previous component
            continue
        sides[s] = 0
        queue = Queue()
        queue.put(s)
        while not queue.empty():
            u = queue.get()
            for v in graph.neighbors(u):
                if sides[v] == -1:
                    sides[v] = 1 - sides[u]
                    queue.put(v)
                elif sides[v] == sides[u]:
                    # odd cycle (or self-loop)
                    return None
    return sides


def is_bipartite(graph: Graph) -> bool:
    """
    Whether the vertices of the graph admit a 2-coloring.
    """
    return bipartite_map(graph) is not None


def check_bipartition(graph: Graph, sides) -> np.ndarray:
    """
    Validate an explicitly provided partition of the vertices into two independent sets,
    and return it as numpy array.
    """
    sides = np.asarray(sides)
    if sides.shape != (graph.num_vertices,):
        raise InvalidInputError(f'expecting one side per vertex, i.e., shape ({graph.num_vertices},), '
                                f'received shape {sides.shape}')
    if not np.all((sides == 0) | (sides == 1)):
        raise InvalidInputError('sides must be 0 or 1')
    for (u, v) in graph.edges():
        if sides[u] == sides[v]:
            raise InvalidInputError(f'edge ({u}, {v}) connects two vertices on side {sides[u]}')
    return sides.astype(np.int8)

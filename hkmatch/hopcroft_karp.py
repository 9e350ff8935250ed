"""
Implementation of the Hopcroft-Karp algorithm, based on
https://en.wikipedia.org/wiki/Hopcroft%E2%80%93Karp_algorithm
"""

from queue import Queue
from collections.abc import Mapping
import numpy as np
from .graph import Graph
from .bipartite import bipartite_map, check_bipartition
from .exceptions import InvalidInputError

__all__ = ['HopcroftKarp']


class HopcroftKarp:
    """
    Implementation of the Hopcroft-Karp algorithm to find a maximum-cardinality matching,
    storing the temporary data for running the algorithm.

    Augmenting paths are rooted at the vertices on side 0 of the bipartition.
    The matching and distance labels are dense arrays indexed by vertex;
    the NIL vertex (representing "unmatched") is the out-of-range index `num_vertices`.
    """
    def __init__(self, graph: Graph, sides=None):
        # store a reference to the graph
        self.graph = graph
        if sides is None:
            sides = bipartite_map(graph)
            if sides is None:
                raise InvalidInputError('provided graph is not bipartite')
        else:
            sides = check_bipartition(graph, sides)
        self.sides = sides
        # vertices from which augmenting paths are searched
        self.roots = np.flatnonzero(sides == 0).tolist()
        self.nil = graph.num_vertices
        self.mate = np.full(graph.num_vertices, self.nil, dtype=int)
        self.dist = np.full(graph.num_vertices + 1, np.inf)
        self._num_phases = 0

    def _connect_unmatched_vertices(self) -> bool:
        """
        Find a path of minimal length connecting
        currently unmatched vertices on side 0 to currently unmatched vertices on side 1
        via a breadth-first search, and label the alternating layers in `dist`.
        Vertices beyond the shortest augmenting path length are not expanded,
        hence deeper layers keep an infinite distance.
        """
        nil = self.nil
        mate = self.mate
        dist = self.dist
        queue = Queue()
        dist.fill(np.inf)
        for u in self.roots:
            if mate[u] == nil:
                # 'u' has not been matched yet
                dist[u] = 0
                queue.put(u)
        while not queue.empty():
            u = queue.get()
            # NIL vertex and vertices beyond the shortest augmenting path are not expanded
            if dist[u] < dist[nil]:
                for v in self.graph.neighbors(u):
                    w = mate[v]
                    if dist[w] == np.inf:
                        dist[w] = dist[u] + 1
                        # 'w' could be the NIL vertex
                        queue.put(w)
        return bool(dist[nil] < np.inf)

    def _add_augmenting_path(self, root: int) -> bool:
        """
        Add an augmenting path starting at `root` to the matching by performing a depth-first search
        along the layers computed by `_connect_unmatched_vertices`.

        The search uses an explicit stack instead of recursion.
        """
        nil = self.nil
        mate = self.mate
        dist = self.dist
        stack = [root]
        # position of the next neighbor to examine, for each stack entry
        cursor = [0]
        # neighbor through which each stack entry has been reached
        via = [nil]
        while stack:
            u = stack[-1]
            if u == nil:
                # arrived at an unmatched vertex on side 1: flip edges along the path
                for k in range(1, len(stack)):
                    v = via[k]
                    w = stack[k - 1]
                    mate[w] = v
                    mate[v] = w
                return True
            neighbors = self.graph.neighbors(u)
            while cursor[-1] < len(neighbors):
                v = neighbors[cursor[-1]]
                cursor[-1] += 1
                w = mate[v]
                # traverse edges of minimum-length alternating paths only
                if dist[w] == dist[u] + 1:
                    stack.append(w)
                    cursor.append(0)
                    via.append(v)
                    break
            else:
                # do not visit the same vertex multiple times
                dist[u] = np.inf
                stack.pop()
                cursor.pop()
                via.pop()
        return False

    def set_matching(self, matching: Mapping[int, int]):
        """
        Initialize the internal state from a given (symmetric) matching dictionary.
        On invalid input, the current matching is kept.
        """
        n = self.graph.num_vertices
        mate = np.full(n, self.nil, dtype=int)
        for u, v in matching.items():
            if not (0 <= u < n and 0 <= v < n):
                raise InvalidInputError(f'matched pair ({u}, {v}) out of range for graph with {n} vertices')
            if not self.graph.has_edge(u, v) or u == v:
                raise InvalidInputError(f'matched pair ({u}, {v}) is not an edge of the graph')
            if matching.get(v) != u:
                raise InvalidInputError(f'matching is not symmetric: {u} -> {v}, but {v} -> {matching.get(v)}')
            mate[u] = v
        # state is only replaced once all pairs are valid
        self.mate = mate

    def __call__(self, initial_matching: Mapping[int, int] = None) -> dict[int, int]:
        """
        Run the Hopcroft-Karp algorithm to find a maximum-cardinality matching.

        Args:
            initial_matching: optional matching (symmetric dictionary) to start from

        Returns:
            dict: matched vertices mapped to their partners; if `i` is matched with `j`,
                  both `i -> j` and `j -> i` are included
        """
        # reset internal data
        self.set_matching(initial_matching if initial_matching is not None else {})
        self._num_phases = 0
        # outer loop of the algorithm
        while self._connect_unmatched_vertices():
            self._num_phases += 1
            # an unmatched root can only be matched by a path starting at itself,
            # hence the snapshot stays valid during the pass
            free = [u for u in self.roots if self.mate[u] == self.nil]
            for u in free:
                self._add_augmenting_path(u)
        assert self.is_consistent()
        return {u: int(self.mate[u]) for u in self.graph.vertices() if self.mate[u] != self.nil}

    def has_augmenting_path(self) -> bool:
        """
        Whether an augmenting path exists with respect to the current matching.
        """
        return self._connect_unmatched_vertices()

    def matched_pairs(self) -> list[tuple[int, int]]:
        """
        Matched edges (u, v) of the current matching, with `u` on side 0.
        """
        return [(u, int(self.mate[u])) for u in self.roots if self.mate[u] != self.nil]

    @property
    def matching_size(self) -> int:
        """
        Number of edges in the current matching.
        """
        return sum(1 for u in self.roots if self.mate[u] != self.nil)

    @property
    def num_phases(self) -> int:
        """
        Number of augmentation phases performed by the last run.
        """
        return self._num_phases

    def is_consistent(self) -> bool:
        """
        Internal consistency check of the matching.
        """
        for u in self.graph.vertices():
            v = self.mate[u]
            if v == self.nil:
                continue
            if self.mate[v] != u:
                return False
            if self.sides[u] == self.sides[v]:
                return False
            if not self.graph.has_edge(u, int(v)):
                return False
        return True

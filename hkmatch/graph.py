from collections.abc import Iterable
import warnings
import numpy as np
from scipy import sparse

__all__ = ['Graph', 'path_graph', 'cycle_graph', 'star_graph', 'complete_graph',
           'complete_bipartite_graph', 'random_bipartite_graph']


class Graph:
    """
    Simple undirected graph G = (V, E) with vertices sequentially indexed: 0, 1, ..., n - 1.

    The graph is not modified after construction; matching algorithms only
    enumerate vertices and query neighbors.
    """
    def __init__(self, num_vertices: int, edges: Iterable[tuple[int, int]] = ()):
        if num_vertices < 0:
            raise ValueError(f"'num_vertices' cannot be negative, received {num_vertices}")
        self._num_vertices = int(num_vertices)
        # adjacency lists in insertion order
        self._adj = [[] for _ in range(self._num_vertices)]
        # each edge stored once as (u, v) with u <= v
        self._edges = set()
        for (u, v) in edges:
            u, v = int(u), int(v)
            if not (0 <= u < self._num_vertices and 0 <= v < self._num_vertices):
                raise ValueError(f'edge ({u}, {v}) out of range for graph with {self._num_vertices} vertices')
            e = (min(u, v), max(u, v))
            if e in self._edges:
                continue
            self._edges.add(e)
            self._adj[u].append(v)
            if u != v:
                self._adj[v].append(u)

    @classmethod
    def from_adjacency(cls, a):
        """
        Construct a graph from a (dense or sparse) adjacency matrix,
        where any non-zero entry `a[i, j]` results in an edge {i, j}.
        """
        a = sparse.coo_matrix(a)
        if a.shape[0] != a.shape[1]:
            raise ValueError(f'adjacency matrix must be square, received shape {a.shape}')
        mask = (a.data != 0)
        rows = a.row[mask]
        cols = a.col[mask]
        # sparsity pattern, with duplicate entries summed
        p = sparse.csr_matrix((np.ones(len(rows)), (rows, cols)), shape=a.shape)
        p.data[:] = 1
        d = p - p.T
        d.eliminate_zeros()
        if d.nnz > 0:
            warnings.warn(
                'adjacency matrix is not symmetric, using its symmetrized sparsity pattern.',
                RuntimeWarning)
        return cls(a.shape[0], zip(rows, cols))

    @classmethod
    def from_biadjacency(cls, b):
        """
        Construct a bipartite graph from an `m x n` biadjacency matrix:
        row `i` corresponds to vertex `i` and column `j` to vertex `m + j`.
        """
        b = sparse.coo_matrix(b)
        m, n = b.shape
        mask = (b.data != 0)
        return cls(m + n, zip(b.row[mask], m + b.col[mask]))

    @property
    def num_vertices(self) -> int:
        """
        Number of vertices.
        """
        return self._num_vertices

    @property
    def num_edges(self) -> int:
        """
        Number of (undirected) edges.
        """
        return len(self._edges)

    def vertices(self):
        """
        Enumerate the vertices.
        """
        return range(self._num_vertices)

    def neighbors(self, v: int) -> list[int]:
        """
        Neighbors of vertex `v`; the returned list must not be modified.
        """
        return self._adj[v]

    def degree(self, v: int) -> int:
        return len(self._adj[v])

    def has_edge(self, u: int, v: int) -> bool:
        return (min(u, v), max(u, v)) in self._edges

    def edges(self) -> list[tuple[int, int]]:
        """
        Sorted list of edges, each edge listed once as (u, v) with u <= v.
        """
        return sorted(self._edges)

    def adjacency_matrix(self) -> sparse.csr_matrix:
        """
        Symmetric adjacency matrix in sparse CSR format.
        """
        rows = []
        cols = []
        for (u, v) in self._edges:
            rows.append(u)
            cols.append(v)
            if u != v:
                rows.append(v)
                cols.append(u)
        n = self._num_vertices
        return sparse.csr_matrix((np.ones(len(rows), dtype=int), (rows, cols)), shape=(n, n))

    def __repr__(self) -> str:
        return f'Graph({self.num_vertices} vertices, {self.num_edges} edges)'


def path_graph(n: int) -> Graph:
    """
    Path 0 - 1 - ... - (n - 1).
    """
    return Graph(n, [(i, i + 1) for i in range(n - 1)])


def cycle_graph(n: int) -> Graph:
    """
    Cycle 0 - 1 - ... - (n - 1) - 0.
    """
    if n < 3:
        raise ValueError(f'a cycle requires at least 3 vertices, received {n}')
    return Graph(n, [(i, (i + 1) % n) for i in range(n)])


def star_graph(n: int) -> Graph:
    """
    Star graph on `n` vertices, with center vertex 0 connected to all others.
    """
    return Graph(n, [(0, i) for i in range(1, n)])


def complete_graph(n: int) -> Graph:
    return Graph(n, [(i, j) for i in range(n) for j in range(i + 1, n)])


def complete_bipartite_graph(m: int, n: int) -> Graph:
    """
    Complete bipartite graph K_{m,n}, with vertices 0, ..., m - 1 on the left
    and m, ..., m + n - 1 on the right.
    """
    return Graph.from_biadjacency(np.ones((m, n), dtype=int))


def random_bipartite_graph(num_u: int, num_v: int, p: float, rng: np.random.Generator) -> Graph:
    """
    Random bipartite graph with `num_u` left and `num_v` right vertices,
    including each of the possible edges independently with probability `p`.
    """
    if not 0 <= p <= 1:
        raise ValueError(f"'p' must be in [0, 1], received {p}")
    return Graph.from_biadjacency(rng.uniform(size=(num_u, num_v)) < p)

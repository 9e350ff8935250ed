import unittest
import numpy as np
from scipy.sparse.csgraph import maximum_bipartite_matching
import hkmatch as hkm


class TestHopcroftKarp(unittest.TestCase):

    def test(self):

        rng = np.random.default_rng()

        # generate a random bipartite graph
        num_u = rng.integers(1, 101)
        num_v = rng.integers(1, 101)
        graph = hkm.random_bipartite_graph(num_u, num_v, 0.2, rng)

        # run Hopcroft-Karp algorithm
        hopcroft_karp = hkm.HopcroftKarp(graph)
        matching = hopcroft_karp()

        # check validity of matching
        for u, v in matching.items():
            self.assertTrue(graph.has_edge(u, v))
            self.assertEqual(matching[v], u)
        self.assertEqual(len(matching), 2 * hopcroft_karp.matching_size)
        self.assertEqual(len(hopcroft_karp.matched_pairs()), hopcroft_karp.matching_size)
        for (u, v) in hopcroft_karp.matched_pairs():
            self.assertEqual(hopcroft_karp.sides[u], 0)
            self.assertEqual(matching[u], v)
        # cardinality cannot exceed size of the smaller side
        num_side0 = np.count_nonzero(hopcroft_karp.sides == 0)
        self.assertLessEqual(hopcroft_karp.matching_size, min(num_side0, graph.num_vertices - num_side0))

        # no augmenting path may remain
        self.assertFalse(hopcroft_karp.has_augmenting_path())

        # compare cardinality with reference implementation
        perm = maximum_bipartite_matching(graph.adjacency_matrix()[:num_u, num_u:], perm_type='column')
        self.assertEqual(hopcroft_karp.matching_size, np.count_nonzero(perm != -1))

        # stochastic search must not return a higher-cardinality matching
        max_sms_len = 0
        for _ in range(100):
            sms = stochastic_matching_search(graph, rng)
            max_sms_len = max(len(sms), max_sms_len)
        self.assertLessEqual(max_sms_len, hopcroft_karp.matching_size)

        # number of phases is bounded by O(sqrt(n))
        self.assertLessEqual(hopcroft_karp.num_phases, 2 * np.sqrt(graph.num_vertices) + 2)


    def test_small_graphs(self):

        # path graph has a perfect matching
        hopcroft_karp = hkm.HopcroftKarp(hkm.path_graph(6))
        matching = hopcroft_karp()
        self.assertEqual(matching, {0: 1, 1: 0, 2: 3, 3: 2, 4: 5, 5: 4})
        self.assertEqual(hopcroft_karp.matched_pairs(), [(0, 1), (2, 3), (4, 5)])

        # star graph: center is matched with a single leaf
        matching = hkm.HopcroftKarp(hkm.star_graph(4))()
        self.assertEqual(len(matching), 2)
        self.assertIn(matching[0], [1, 2, 3])
        self.assertEqual(matching[matching[0]], 0)

        # graph without edges
        self.assertEqual(hkm.HopcroftKarp(hkm.Graph(5))(), {})
        self.assertEqual(hkm.HopcroftKarp(hkm.Graph(0))(), {})

        # even cycle
        matching = hkm.HopcroftKarp(hkm.cycle_graph(8))()
        self.assertEqual(len(matching), 8)

        # complete bipartite graph
        hopcroft_karp = hkm.HopcroftKarp(hkm.complete_bipartite_graph(3, 5))
        hopcroft_karp()
        self.assertEqual(hopcroft_karp.matching_size, 3)


    def test_not_bipartite(self):

        # triangle
        with self.assertRaises(hkm.InvalidInputError):
            hkm.HopcroftKarp(hkm.Graph(3, [(0, 1), (1, 2), (0, 2)]))
        # invalid explicit partition
        with self.assertRaises(hkm.InvalidInputError):
            hkm.HopcroftKarp(hkm.path_graph(3), sides=[0, 0, 1])


    def test_explicit_sides(self):

        # root the augmenting path search at the larger side
        graph = hkm.complete_bipartite_graph(2, 4)
        hopcroft_karp = hkm.HopcroftKarp(graph, sides=[1, 1, 0, 0, 0, 0])
        matching = hopcroft_karp()
        self.assertEqual(len(matching), 4)
        for (u, v) in hopcroft_karp.matched_pairs():
            self.assertIn(u, [2, 3, 4, 5])
            self.assertIn(v, [0, 1])


    def test_layers(self):

        # path 0 - 1 - 2 - 3 - 4 - 5, with edges (1, 2) and (3, 4) matched
        hopcroft_karp = hkm.HopcroftKarp(hkm.path_graph(6))
        hopcroft_karp.set_matching({1: 2, 2: 1, 3: 4, 4: 3})
        self.assertTrue(hopcroft_karp._connect_unmatched_vertices())
        nil = hopcroft_karp.nil
        self.assertEqual(hopcroft_karp.dist[0], 0)
        self.assertEqual(hopcroft_karp.dist[2], 1)
        self.assertEqual(hopcroft_karp.dist[4], 2)
        # length of the shortest augmenting path
        self.assertEqual(hopcroft_karp.dist[nil], 3)

        # augmenting along the path flips all its edges
        self.assertTrue(hopcroft_karp._add_augmenting_path(0))
        self.assertEqual(hopcroft_karp.matched_pairs(), [(0, 1), (2, 3), (4, 5)])
        self.assertTrue(hopcroft_karp.is_consistent())
        self.assertFalse(hopcroft_karp.has_augmenting_path())


    def test_exhausted_vertex(self):

        # two vertices competing for the same partner
        hopcroft_karp = hkm.HopcroftKarp(hkm.Graph(3, [(0, 2), (1, 2)]))
        self.assertEqual(hopcroft_karp.roots, [0, 1])
        self.assertTrue(hopcroft_karp._connect_unmatched_vertices())
        self.assertTrue(hopcroft_karp._add_augmenting_path(0))
        self.assertFalse(hopcroft_karp._add_augmenting_path(1))
        # failed vertex must not be visited again within the same phase
        self.assertEqual(hopcroft_karp.dist[1], np.inf)


    def test_initial_matching(self):

        graph = hkm.path_graph(8)
        hopcroft_karp = hkm.HopcroftKarp(graph)
        # maximal, but not maximum matching
        matching = hopcroft_karp({1: 2, 2: 1, 5: 6, 6: 5})
        self.assertEqual(len(matching), 8)
        self.assertFalse(hopcroft_karp.has_augmenting_path())

        with self.assertRaises(hkm.InvalidInputError):
            hopcroft_karp({0: 2, 2: 0})
        with self.assertRaises(hkm.InvalidInputError):
            hopcroft_karp({0: 1})
        with self.assertRaises(hkm.InvalidInputError):
            hopcroft_karp({0: 8, 8: 0})
        # failed runs keep the previous matching
        self.assertEqual(hopcroft_karp.matching_size, 4)


    def test_set_matching_invalid(self):

        hopcroft_karp = hkm.HopcroftKarp(hkm.path_graph(6))
        hopcroft_karp.set_matching({1: 2, 2: 1})
        # first pair is valid, second one is not an edge
        with self.assertRaises(hkm.InvalidInputError):
            hopcroft_karp.set_matching({3: 4, 4: 3, 0: 2, 2: 0})
        self.assertEqual(hopcroft_karp.matched_pairs(), [(2, 1)])
        self.assertEqual(hopcroft_karp.matching_size, 1)
        self.assertTrue(hopcroft_karp.is_consistent())


    def test_long_path(self):

        # augmenting paths much longer than the default recursion limit
        n = 5000
        graph = hkm.path_graph(n)
        hopcroft_karp = hkm.HopcroftKarp(graph)
        initial = {}
        for i in range(1, n - 1, 2):
            initial[i] = i + 1
            initial[i + 1] = i
        matching = hopcroft_karp(initial)
        self.assertEqual(len(matching), n)
        self.assertEqual(hopcroft_karp.num_phases, 1)


def stochastic_matching_search(graph: hkm.Graph, rng: np.random.Generator):
    """
    Perform a stochastic matching search.
    """
    # collect all edges
    edges = graph.edges()
    matching = []
    while edges:
        # randomly pick one of the remaining edges
        i = rng.integers(len(edges))
        edge = edges.pop(i)
        # filter out edges with a vertex overlapping with the current edge
        edges = [e for e in edges if not set(e) & set(edge)]
        matching.append(edge)
    return matching


if __name__ == '__main__':
    unittest.main()

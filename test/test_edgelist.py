import unittest
import warnings
import numpy as np
import pyblossom as pbl


class TestEdgeList(unittest.TestCase):

    def test_graph_conversion(self):

        edges = [3, 1, 1, 2, 2, 3, 5, 3]
        graph = pbl.graph_from_edges(edges)
        self.assertEqual(graph.edges(), [(1, 2), (1, 3), (2, 3), (3, 5)])
        self.assertTrue(np.array_equal(pbl.edges_from_graph(graph), [1, 2, 1, 3, 2, 3, 3, 5]))

        # array of shape (k, 2)
        graph2 = pbl.graph_from_edges(np.array(edges, dtype=np.uint32).reshape((-1, 2)))
        self.assertEqual(graph, graph2)

        self.assertEqual(pbl.edges_from_graph(pbl.Graph()).shape, (0,))
        self.assertTrue(pbl.graph_from_edges([]).empty())


    def test_invalid_input(self):

        # odd number of entries
        with self.assertRaises(ValueError):
            pbl.graph_from_edges([0, 1, 2])
        with self.assertRaises(ValueError):
            pbl.graph_from_edges([0, -1])
        with self.assertRaises(ValueError):
            pbl.graph_from_edges([0.0, 1.5])
        with self.assertRaises(ValueError):
            pbl.graph_from_edges(np.zeros((2, 3), dtype=int))
        # self-loop
        with self.assertRaises(ValueError):
            pbl.graph_from_edges([0, 1, 2, 2])
        # unsigned indices beyond the signed 64-bit range must not wrap around
        with self.assertRaises(ValueError):
            pbl.graph_from_edges(np.array([2**63 + 5, 1], dtype=np.uint64))
        graph = pbl.graph_from_edges(np.array([2**63 - 1, 1], dtype=np.uint64))
        self.assertEqual(graph.edges(), [(1, 2**63 - 1)])


    def test_duplicate_edges(self):

        with self.assertWarns(RuntimeWarning):
            graph = pbl.graph_from_edges([0, 1, 1, 0, 1, 2])
        self.assertEqual(graph.num_edges, 2)

        with warnings.catch_warnings():
            warnings.simplefilter('error')
            pbl.graph_from_edges([0, 1, 1, 2])


    def test_matching(self):

        # triangle
        pairs = pbl.matching([0, 1, 1, 2, 2, 0])
        self.assertEqual(pairs.shape, (2,))
        self.assertIn(tuple(pairs), [(0, 1), (1, 2), (0, 2)])

        # 4-cycle
        pairs = pbl.matching([0, 1, 1, 2, 2, 3, 3, 0]).reshape((-1, 2))
        self.assertEqual(len(pairs), 2)
        self.assertEqual(sorted(pairs.reshape(-1).tolist()), [0, 1, 2, 3])

        self.assertEqual(len(pbl.matching([])), 0)


    def test_matching_random(self):

        rng = np.random.default_rng()

        num_nodes = 30
        edges = []
        for u in range(num_nodes):
            for v in range(u):
                if rng.uniform() < 0.15:
                    edges += [u, v]
        pairs = pbl.matching(edges).reshape((-1, 2))
        graph = pbl.graph_from_edges(edges)
        # every node appears in at most one pair
        self.assertEqual(len(np.unique(pairs)), pairs.size)
        for (u, v) in pairs.tolist():
            self.assertTrue(graph.has_edge(u, v))
        self.assertEqual(len(pairs), pbl.maximum_matching(graph).num_edges)


    def test_hamiltonian_cycle(self):

        # triangular prism
        edges = [0, 1, 1, 2, 2, 0, 3, 4, 4, 5, 5, 3, 0, 3, 1, 4, 2, 5]
        cycle_edges, subdivisions = pbl.hamiltonian_cycle(edges)
        self.assertEqual(subdivisions.size % 4, 0)
        cycle = pbl.graph_from_edges(cycle_edges)
        self.assertTrue(pbl.is_hamiltonian_cycle(cycle))
        self.assertEqual(cycle.num_nodes, 6 + subdivisions.size // 2)
        # node degrees in the flat edge list
        _, counts = np.unique(cycle_edges, return_counts=True)
        self.assertTrue(np.all(counts == 2))


if __name__ == '__main__':
    unittest.main()

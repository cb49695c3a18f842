import unittest
from graphrep.arc_graph import ArcGraph

class TestArcGraph(unittest.TestCase):
    def test_arcs(self):
        g = ArcGraph(4)
        g.add_edge(3, 1)
        g.add_edge(0, 1)
        g.add_edge(3, 1)
        g.add_edge(1, 1)

        self.assertEqual(g.vertex_count(), 4)
        self.assertEqual(g.arcs, [(3,1), (0,1), (1,1)])
        self.assertEqual(g.edge_count(), 3)

    def test_insertion_order(self):
        g = ArcGraph(4)
        g.add_edge(2, 1)
        g.add_edge(0, 1)
        g.add_edge(3, 1)

        self.assertEqual(g.predecessors(1), [2,0,3])
        self.assertEqual(list(g.edges()), [(2,1), (0,1), (3,1)])

    def test_edges_snapshot(self):
        g = ArcGraph(3)
        g.add_edge(0, 1)
        edges = g.edges()
        g.add_edge(1, 2)
        self.assertEqual(list(edges), [(0,1)])

if __name__ == '__main__':
    unittest.main()

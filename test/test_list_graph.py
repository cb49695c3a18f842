import unittest
from graphrep.list_graph import AdjListGraph

class TestAdjListGraph(unittest.TestCase):
    def test_adding(self):
        g = AdjListGraph(4)
        g.add_edge(0, 1)
        g.add_edge(0, 2)
        g.add_edge(3, 2)

        self.assertEqual(g.out_lists, [[1,2], [], [], [2]])
        self.assertEqual(g.in_lists, [[], [0], [0,3], []])

    def test_no_duplicates_stored(self):
        g = AdjListGraph(2)
        g.add_edge(0, 1)
        g.add_edge(0, 1)
        g.add_edge(1, 1)
        g.add_edge(1, 1)

        self.assertEqual(g.out_lists, [[1], [1]])
        self.assertEqual(g.in_lists, [[], [0,1]])

    def test_insertion_order(self):
        g = AdjListGraph(5)
        for v in [4, 2, 3]:
            g.add_edge(0, v)
        self.assertEqual(g.successors(0), [4,2,3])

if __name__ == '__main__':
    unittest.main()

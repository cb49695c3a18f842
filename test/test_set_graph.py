import unittest
from graphrep.set_graph import SetGraph

class TestSetGraph(unittest.TestCase):
    def test_sets(self):
        g = SetGraph(3)
        g.add_edge(0, 1)
        g.add_edge(0, 2)
        g.add_edge(0, 2)
        g.add_edge(2, 0)

        self.assertEqual(g.out_sets, [{1,2}, set(), {0}])
        self.assertEqual(g.in_sets, [{2}, {0}, {0}])

    def test_has_edge(self):
        g = SetGraph(3)
        g.add_edge(0, 1)
        self.assertTrue(g.has_edge(0, 1))
        self.assertFalse(g.has_edge(1, 0))
        with self.assertRaises(AssertionError):
            g.has_edge(3, 0)

if __name__ == '__main__':
    unittest.main()

from graphrep.graph import DirectedGraph

import numpy as np


class MatrixGraph(DirectedGraph):
    """
    A directed graph stored as a dense N x N boolean adjacency matrix, where
    matrix[u, v] is True exactly when (u, v) is an edge.

    Adding and testing an edge are O(1). Enumerating neighbours scans a whole
    row (successors) or column (predecessors), so it is O(N) regardless of
    degree. Memory use is N^2 bits' worth of booleans.
    """
    def _allocate(self, n):
        self.matrix = np.zeros((n, n), dtype=bool)

    def vertex_count(self):
        return self.matrix.shape[0]

    def add_edge(self, from_vertex, to_vertex):
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        self.matrix[from_vertex, to_vertex] = True

    def successors(self, vertex):
        self.check_vertex(vertex)
        return np.flatnonzero(self.matrix[vertex, :]).tolist()

    def predecessors(self, vertex):
        self.check_vertex(vertex)
        return np.flatnonzero(self.matrix[:, vertex]).tolist()

    def has_edge(self, from_vertex, to_vertex):
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        return bool(self.matrix[from_vertex, to_vertex])

    def edge_count(self):
        return int(np.count_nonzero(self.matrix))

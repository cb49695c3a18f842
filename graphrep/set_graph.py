from graphrep.graph import DirectedGraph


class SetGraph(DirectedGraph):
    """
    A directed graph stored as two hash sets per vertex, one of outgoing and
    one of incoming neighbours.

    Edge insertion and edge tests are O(1) on average, and neighbour
    enumeration is O(deg) in either direction. Set semantics make add_edge
    idempotent for free.
    """
    def _allocate(self, n):
        self.out_sets = [set() for _ in range(n)]
        self.in_sets = [set() for _ in range(n)]

    def vertex_count(self):
        return len(self.out_sets)

    def add_edge(self, from_vertex, to_vertex):
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        self.out_sets[from_vertex].add(to_vertex)
        self.in_sets[to_vertex].add(from_vertex)

    def successors(self, vertex):
        self.check_vertex(vertex)
        return list(self.out_sets[vertex])

    def predecessors(self, vertex):
        self.check_vertex(vertex)
        return list(self.in_sets[vertex])

    def has_edge(self, from_vertex, to_vertex):
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)
        return to_vertex in self.out_sets[from_vertex]

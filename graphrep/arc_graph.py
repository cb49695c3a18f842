from graphrep.graph import DirectedGraph


class ArcGraph(DirectedGraph):
    """
    A directed graph stored as a single list of (from, to) arcs.

    This is the most compact representation for very sparse graphs, but every
    query, including the duplicate check in add_edge, is a linear scan over
    all arcs. Arcs are kept in insertion order.
    """
    def _allocate(self, n):
        self.n = n
        self.arcs = []  # represented as tuples of indices [(1,3),...]

    def vertex_count(self):
        return self.n

    def add_edge(self, from_vertex, to_vertex):
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)

        arc = (from_vertex, to_vertex)
        if arc not in self.arcs:
            self.arcs.append(arc)

    def successors(self, vertex):
        self.check_vertex(vertex)
        return [v for (u, v) in self.arcs if u == vertex]

    def predecessors(self, vertex):
        self.check_vertex(vertex)
        return [u for (u, v) in self.arcs if v == vertex]

    def edges(self):
        return iter(list(self.arcs))

    def edge_count(self):
        return len(self.arcs)

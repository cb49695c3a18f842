from graphrep.graph import DirectedGraph


class AdjListGraph(DirectedGraph):
    """
    A directed graph stored as two adjacency lists per vertex: one of outgoing
    neighbours and one of incoming neighbours. Both are kept up to date by
    add_edge, so successors and predecessors are equally cheap to enumerate.

    Duplicate edges are rejected on insertion, which keeps every stored list
    free of repeats at the cost of an O(outdeg) scan per add_edge.
    """
    def _allocate(self, n):
        self.out_lists = [[] for _ in range(n)]
        self.in_lists = [[] for _ in range(n)]

    def vertex_count(self):
        return len(self.out_lists)

    def add_edge(self, from_vertex, to_vertex):
        """
        Add a new edge to the graph

        Args:
            from_vertex: index of the source vertex
            to_vertex: index of the target vertex
        """
        self.check_vertex(from_vertex)
        self.check_vertex(to_vertex)

        if to_vertex in self.out_lists[from_vertex]:
            return
        self.out_lists[from_vertex].append(to_vertex)
        self.in_lists[to_vertex].append(from_vertex)

    def successors(self, vertex):
        self.check_vertex(vertex)
        return list(self.out_lists[vertex])

    def predecessors(self, vertex):
        self.check_vertex(vertex)
        return list(self.in_lists[vertex])

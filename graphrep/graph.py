from abc import ABC, abstractmethod
import logging
import numbers

import graphviz

logger = logging.getLogger(__name__)


class DirectedGraph(ABC):
    """
    A directed graph over the fixed vertex set {0, 1, ..., N-1}.

    This is the capability shared by every graph representation: a vertex
    count that never changes, edge addition, and enumeration of the successors
    and predecessors of a vertex. The edges form a set, so adding an edge twice
    has no effect, and self-loops are allowed.

    Subclasses choose the storage scheme by implementing _allocate, add_edge,
    successors and predecessors. Everything else is derived from those.

    Vertex ids are checked with assert statements, so running Python with -O
    turns off range checking and an invalid vertex may then be stored or
    silently wrap around as a negative index.
    """
    def __init__(self, source):
        """
        Create a directed graph.

        Args:
            source: either a non-negative integer N, giving an empty graph with
                    vertices 0..N-1, or another DirectedGraph (of any
                    representation) whose edges are copied into this one.
        """
        if isinstance(source, DirectedGraph):
            n = source.vertex_count()
        else:
            n = source
        assert isinstance(n, numbers.Integral), "vertex count must be an integer"
        assert n >= 0, "vertex count must be non-negative"

        self._allocate(n)

        # The source is only borrowed while we copy it
        if isinstance(source, DirectedGraph):
            copy_edges(source, self)

    @abstractmethod
    def _allocate(self, n):
        """
        Set up empty storage for n vertices.
        """

    @abstractmethod
    def vertex_count(self):
        """
        Return the number of vertices in this graph
        """

    @abstractmethod
    def add_edge(self, from_vertex, to_vertex):
        """
        Add the directed edge (from_vertex, to_vertex). Adding an edge that
        already exists leaves the graph unchanged.

        Args:
            from_vertex: index of the source vertex, in [0, N)
            to_vertex: index of the target vertex, in [0, N)
        """

    @abstractmethod
    def successors(self, vertex):
        """
        Return a new list of every u such that (vertex, u) is an edge. Each
        such u appears exactly once, in no particular order.
        """

    @abstractmethod
    def predecessors(self, vertex):
        """
        Return a new list of every u such that (u, vertex) is an edge. Each
        such u appears exactly once, in no particular order.
        """

    def check_vertex(self, vertex):
        """
        Assert that vertex is an integer index in [0, N).
        """
        assert isinstance(vertex, numbers.Integral), \
                f"vertex {vertex!r} is not an integer"
        assert 0 <= vertex < self.vertex_count(), \
                f"vertex {vertex} out of range [0, {self.vertex_count()})"

    def has_edge(self, from_vertex, to_vertex):
        """
        Check whether (from_vertex, to_vertex) is an edge of this graph.
        """
        self.check_vertex(to_vertex)
        return to_vertex in self.successors(from_vertex)

    def edges(self):
        """
        Iterate over every edge of this graph as a (from, to) tuple.
        """
        for u in range(self.vertex_count()):
            for v in self.successors(u):
                yield (u, v)

    def edge_count(self):
        """
        Return the number of edges in this graph
        """
        return sum(self.out_degree(v) for v in range(self.vertex_count()))

    def out_degree(self, vertex):
        return len(self.successors(vertex))

    def in_degree(self, vertex):
        return len(self.predecessors(vertex))

    def is_equivalent(self, other):
        """
        Check whether another graph, possibly with a different representation,
        has the same vertices and the same edges as this one.

        Neighbours are compared as sets since enumeration order depends on the
        representation.
        """
        assert isinstance(other, DirectedGraph)
        if self.vertex_count() != other.vertex_count():
            return False
        for v in range(self.vertex_count()):
            if set(self.successors(v)) != set(other.successors(v)):
                return False
        return True

    def to_graphviz(self, name=None):
        """
        Build a graphviz representation of this graph.

        Args:
            name: optional graph name, defaults to the class name

        Returns:
            a graphviz.Digraph with one node per vertex and one edge per edge
        """
        dot = graphviz.Digraph(name=name or type(self).__name__)
        for v in range(self.vertex_count()):
            dot.node(str(v))
        for u, v in self.edges():
            dot.edge(str(u), str(v))
        return dot

    def visualize(self, filename='/tmp/graph.gv', format='png', view=True):
        """
        Render this graph with graphviz.

        Args:
            filename: where to write the dot source; the image is written
                      next to it
            format:   output image format understood by graphviz
            view:     whether to open the rendered image

        Returns:
            path of the rendered image
        """
        return self.to_graphviz().render(filename, format=format, view=view)

    def __str__(self):
        return f"directed graph with {self.vertex_count()} vertices and {self.edge_count()} edges."


def copy_edges(source, target):
    """
    Add every edge of source to target, using nothing but the graph capability.
    This works for any pair of representations.

    Reading successors alone is enough: every predecessor relation is the
    mirror of some successor relation, which target.add_edge rebuilds.

    Args:
        source: DirectedGraph to read from
        target: DirectedGraph with the same vertex count to add edges to
    """
    assert source.vertex_count() == target.vertex_count(), \
            "source and target must have the same vertex count"

    copied = 0
    for u in range(source.vertex_count()):
        for v in source.successors(u):
            target.add_edge(u, v)
            copied += 1

    logger.debug("copied %d edges from %s into %s", copied,
            type(source).__name__, type(target).__name__)

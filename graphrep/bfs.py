from collections import deque
import logging

logger = logging.getLogger(__name__)


def breadth_first(graph, start, visit):
    """
    Visit every vertex reachable from start in breadth-first order.

    The start vertex is visited first, then its successors, then their
    successors, and so on. Within a layer, vertices come in whatever order the
    graph enumerates successors, so only the layers themselves are
    meaningful. Each reachable vertex is visited exactly once; unreachable
    vertices are never visited.

    Args:
        graph: any DirectedGraph
        start: index of the vertex to start from, in [0, N)
        visit: callable taking a single vertex index. It must not modify the
               graph.
    """
    graph.check_vertex(start)
    n = graph.vertex_count()

    # A vertex is marked when it enters the queue rather than when it is
    # visited, so vertices with several parents are only queued once
    enqueued = [False] * n
    queue = deque([start])
    enqueued[start] = True

    visited = 0
    while queue:
        vertex = queue.popleft()
        visit(vertex)
        visited += 1
        for successor in graph.successors(vertex):
            if not enqueued[successor]:
                enqueued[successor] = True
                queue.append(successor)

    logger.debug("breadth-first search from %d visited %d of %d vertices",
            start, visited, n)

from graphrep.list_graph import AdjListGraph
from graphrep.matrix_graph import MatrixGraph
from graphrep.arc_graph import ArcGraph
from graphrep.set_graph import SetGraph
from graphrep.bfs import breadth_first

import logging
import time

##
#
# Build the same graph in each representation by copying it around, then
# traverse every copy breadth-first and compare timings.
#
##

logging.basicConfig(level=logging.DEBUG)

# Construct a small tree with a few extra cross edges
graph = AdjListGraph(9)
for edge in [(1,2), (1,3), (1,4), (2,5), (3,6), (3,7), (3,8), (5,8), (8,1)]:
    graph.add_edge(*edge)

# Copy it through every other representation and back
matrix = MatrixGraph(graph)
arc = ArcGraph(matrix)
sets = SetGraph(arc)
round_trip = AdjListGraph(sets)
print("Round trip preserved edges: ", round_trip.is_equivalent(graph))
print("")

for g in [graph, matrix, arc, sets]:
    order = []
    start_time = time.time()
    breadth_first(g, 1, order.append)
    bfs_time = time.time() - start_time

    print(type(g).__name__)
    print("    ", g)
    print("    BFS order from 1 : ", order)
    print("    BFS time         : ", bfs_time)

# Render the graph (requires the graphviz binaries)
graph.visualize('/tmp/representations.gv')

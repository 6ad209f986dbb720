"""
Construction of a Hamiltonian cycle from a cubic "dual" graph:
removing a perfect matching leaves a cover by disjoint cycles,
which are then spliced together by subdividing matched nodes.
"""

from collections import deque
import logging
from .graph import Graph, unused_node
from .forest import Forest
from .blossom import maximum_matching

__all__ = ['cycle_components', 'splice_cycles', 'solve_hamiltonian_cycle', 'is_hamiltonian_cycle']

LOGGER = logging.getLogger(__name__)


def cycle_components(graph: Graph) -> Forest:
    """
    Connected components of a graph, each represented by one tree
    (obtained from a breadth-first search) of the returned forest.
    """
    trees = Forest()
    for start in graph.nodes():
        if trees.has(start):
            continue
        trees.add_node(start)
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for w in sorted(graph.edges_of_node(v)):
                if not trees.has(w):
                    trees.set_edge(v, w)
                    queue.append(w)
    return trees


def splice_cycles(graph: Graph, v1: int, v2: int) -> tuple[int, int]:
    """
    Merge the two disjoint cycles through 'v1' and 'v2' into a single cycle (in-place).

    Each of 'v1' and 'v2' gets a new twin node which takes over one of its cycle edges;
    the nodes are then connected by the edges (v1, v2) and (new1, new2).
    Returns the two new nodes.
    """
    for v in (v1, v2):
        if graph.degree(v) != 2:
            raise ValueError(f'node {v} must have exactly two neighbors on its cycle, found {graph.degree(v)}')
    new1 = unused_node(graph)
    graph.add_node(new1)
    new2 = unused_node(graph)
    graph.add_node(new2)
    for v, new in ((v1, new1), (v2, new2)):
        other = max(graph.edges_of_node(v))
        graph.remove_edge(v, other)
        graph.add_edge(other, new)
    graph.add_edge(v1, v2)
    graph.add_edge(new1, new2)
    return new1, new2


def solve_hamiltonian_cycle(dual: Graph) -> tuple[Graph, list[tuple[int, int, int, int]]]:
    """
    Construct a Hamiltonian cycle from a cubic graph with a perfect matching.

    Returns the cycle (containing additional subdivision nodes if the
    cycle cover had to be merged) and the list of subdivisions
    (v1, new1, v2, new2), one for each merge.
    """
    matching = maximum_matching(dual)
    cycle = dual.copy()
    cycle.remove_edges_from(matching)
    for v in cycle.nodes():
        if cycle.degree(v) != 2:
            raise ValueError(
                f'node {v} has degree {cycle.degree(v)} after removing a maximum matching; '
                'expecting a cubic graph with a perfect matching')
    components = cycle_components(cycle)
    subdivisions = []
    if len(components.roots()) > 1:
        for (v1, v2) in matching.edges():
            if components.same_tree(v1, v2):
                continue
            new1, new2 = splice_cycles(cycle, v1, v2)
            components.set_edge(v1, v2)
            components.set_edge(v1, new1)
            components.set_edge(v2, new2)
            LOGGER.debug('merged cycles via matching edge (%d, %d), new nodes %d and %d', v1, v2, new1, new2)
            subdivisions.append((v1, new1, v2, new2))
    if len(components.roots()) > 1:
        raise ValueError(f'dual graph consists of {len(components.roots())} disconnected components')
    return cycle, subdivisions


def is_hamiltonian_cycle(graph: Graph) -> bool:
    """
    Whether the graph is a single cycle through all its nodes.
    """
    if graph.num_nodes < 3:
        return False
    if any(graph.degree(v) != 2 for v in graph.nodes()):
        return False
    return len(cycle_components(graph).roots()) == 1

"""
Implementation of Edmonds' blossom algorithm for maximum-cardinality matchings
in general graphs, based on
https://en.wikipedia.org/wiki/Blossom_algorithm

Blossoms are contracted into a single synthetic node, the search is repeated
on the contracted graph and the resulting augmenting path is lifted back
through the blossom.
"""

from collections import deque
from collections.abc import Sequence
import logging
from .graph import Graph, unused_node
from .forest import Forest

__all__ = ['augmenting_path', 'augment_matching', 'maximum_matching',
           'contracted', 'lift_path', 'find_alternating_path']

LOGGER = logging.getLogger(__name__)


def _path_graph(nodes: Sequence[int]) -> Graph:
    """
    Graph consisting of the edges between consecutive nodes.
    """
    path = Graph()
    for u, v in zip(nodes[:-1], nodes[1:]):
        path.add_edge(u, v)
    return path


def contracted(graph: Graph, blossom: Graph, contract_node: int) -> Graph:
    """
    Copy of 'graph' with all blossom nodes replaced by 'contract_node';
    edges leaving the blossom are redirected to 'contract_node'.
    """
    ret = graph.copy()
    need_connection = set()
    for v in blossom.nodes():
        for w in ret.edges_of_node(v):
            if not blossom.has_node(w):
                need_connection.add(w)
        ret.remove_node(v)
    for w in sorted(need_connection):
        ret.add_edge(contract_node, w)
    return ret


def find_alternating_path(matching: Graph, blossom: Graph, path_ends: Sequence[tuple[int, int]]) -> list[int]:
    """
    Find the even-length walk through the blossom which connects its base
    with the exit node, via a breadth-first enumeration of simple paths.

    Each entry of 'path_ends' is a pair (outside node, blossom node) of an
    edge of the augmenting path entering the blossom.
    """
    if len(path_ends) == 1:
        # the blossom is at the end of the augmenting path, thus its base is exposed
        exposed = [v for v in blossom.nodes() if matching.degree(v) == 0]
        assert len(exposed) == 1, f'expecting a single exposed blossom node, found {exposed}'
        start = exposed[0]
        end = path_ends[0][1]
    else:
        assert len(path_ends) == 2, f'expecting at most two path ends, received {len(path_ends)}'
        (n0, x0), (n1, x1) = path_ends
        # the base is the blossom node which is matched to its outside neighbor
        if matching.has_edge(n0, x0):
            start, end = x0, x1
        else:
            assert matching.has_edge(n1, x1), 'none of the path ends enters the blossom via a matching edge'
            start, end = x1, x0

    queue = deque([[start]])
    while queue:
        walk = queue.popleft()
        if walk[-1] == end:
            if (len(walk) - 1) % 2 == 0:
                return walk
            continue
        for v in sorted(blossom.edges_of_node(walk[-1])):
            if v not in walk:
                queue.append(walk + [v])
    raise AssertionError(f'no even-length walk from {start} to {end} within blossom {blossom}')


def lift_path(graph: Graph, matching: Graph, blossom: Graph, path: Graph, contract_node: int):
    """
    Replace 'contract_node' in the augmenting path (in-place)
    by the corresponding alternating walk through the blossom.
    """
    if not path.has_node(contract_node):
        return
    path_ends = []
    for n in sorted(path.edges_of_node(contract_node)):
        partners = {x for x in matching.edges_of_node(n) if blossom.has_node(x)}
        if partners:
            # matching edge into the blossom, necessarily ending at the base
            x = partners.pop()
        else:
            x = min(x for x in graph.edges_of_node(n) if blossom.has_node(x))
        path_ends.append((n, x))
    path.remove_node(contract_node)
    for (n, x) in path_ends:
        path.add_edge(n, x)
    walk = find_alternating_path(matching, blossom, path_ends)
    path.add_edges_from(_path_graph(walk))


def _blossom(trees: Forest, v: int, w: int) -> Graph:
    """
    Odd cycle formed by the edge (v, w) and the tree paths from 'v' and 'w'
    to their nearest common ancestor (the base).
    """
    path_v = trees.path(v)
    path_w = trees.path(w)
    common = set(path_v) & set(path_w)
    base = max(common, key=trees.distance)
    blossom = Graph([(v, w)])
    blossom.add_edges_from(_path_graph(path_v[:path_v.index(base) + 1]))
    blossom.add_edges_from(_path_graph(path_w[:path_w.index(base) + 1]))
    assert blossom.num_edges % 2 == 1, f'blossom {blossom} must have an odd number of edges'
    return blossom


def augmenting_path(graph: Graph, matching: Graph) -> Graph:
    """
    Find an augmenting path with respect to 'matching' by growing alternating trees
    from all exposed nodes. Blossoms are contracted and the search continues recursively
    on the contracted graph.

    Returns an empty graph if no augmenting path exists, i.e., if 'matching' is maximum.
    """
    exposed = [v for v in graph.nodes() if matching.degree(v) == 0]
    trees = Forest(exposed)
    queue = deque(exposed)
    # candidate edges which have not been explored yet
    unmarked_edges = graph.copy()
    unmarked_edges.remove_edges_from(matching)
    while queue:
        v = queue.popleft()
        if trees.distance(v) % 2 != 0:
            continue
        for w in sorted(unmarked_edges.edges_of_node(v)):
            unmarked_edges.remove_edge(v, w)
            if not trees.has(w):
                # 'w' is matched, otherwise it would be a root already
                partners = matching.edges_of_node(w)
                assert len(partners) == 1, f'node {w} must be matched exactly once, found partners {partners}'
                m = partners.pop()
                trees.set_edge(v, w)
                trees.set_edge(w, m)
                queue.append(m)
            elif trees.distance(w) % 2 == 0:
                if not trees.same_tree(v, w):
                    path = _path_graph(trees.path(v)[::-1] + trees.path(w))
                    assert path.num_edges % 2 == 1, f'augmenting path {path} must have an odd number of edges'
                    return path
                blossom = _blossom(trees, v, w)
                contract_node = unused_node(graph, matching)
                LOGGER.debug('contracting blossom %s into node %d', blossom.nodes(), contract_node)
                path = augmenting_path(contracted(graph, blossom, contract_node),
                                       contracted(matching, blossom, contract_node))
                lift_path(graph, matching, blossom, path, contract_node)
                assert not path.has_node(contract_node), f'contracted node {contract_node} remains in lifted path'
                assert path.empty() or path.num_edges % 2 == 1, f'lifted augmenting path {path} must have an odd number of edges'
                return path
    return Graph()


def augment_matching(matching: Graph, path: Graph):
    """
    Augment the matching along an augmenting path (in-place),
    by taking the symmetric difference of their edge sets.
    """
    augmented = matching.symmetric_difference(path)
    matching.clear()
    matching.add_edges_from(augmented)


def maximum_matching(graph: Graph) -> Graph:
    """
    Compute a maximum-cardinality matching of 'graph' by augmenting
    an initially empty matching until no augmenting path remains (Berge's theorem).
    """
    matching = Graph()
    path = augmenting_path(graph, matching)
    while not path.empty():
        num_edges = matching.num_edges
        augment_matching(matching, path)
        assert matching.num_edges == num_edges + 1, 'augmentation must increase the matching size by one'
        LOGGER.debug('augmented matching to %d edges', matching.num_edges)
        path = augmenting_path(graph, matching)
    assert matching.is_matching()
    return matching

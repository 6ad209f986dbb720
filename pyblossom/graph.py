"""
Undirected simple graph stored as adjacency sets, used for the input graph,
matchings, blossoms and augmenting paths alike.
"""

from collections.abc import Iterable
import numpy as np
from scipy import sparse

__all__ = ['Graph', 'unused_node']


class Graph:
    """
    Undirected graph G = (V, E) without self-loops and parallel edges.

    Nodes are non-negative integers. Iteration over nodes and edges
    is in ascending order, such that results are reproducible.
    """
    def __init__(self, edges: Iterable[tuple[int, int]] = ()):
        # adjacency sets, with an entry for every node (also isolated ones)
        self.adj = {}
        for (u, v) in edges:
            self.add_edge(u, v)

    def add_node(self, v: int):
        """
        Add node 'v' to the graph (no-op if already present).
        """
        if v not in self.adj:
            self.adj[v] = set()

    def remove_node(self, v: int) -> bool:
        """
        Remove node 'v' together with all its incident edges.
        Returns whether the node was present.
        """
        if v not in self.adj:
            return False
        for w in self.adj.pop(v):
            self.adj[w].discard(v)
        return True

    def add_edge(self, u: int, v: int) -> bool:
        """
        Add the edge {u, v}, creating missing nodes.
        Returns whether the edge is new.
        """
        if u == v:
            raise ValueError(f'self-loops are not supported, received edge ({u}, {v})')
        self.add_node(u)
        self.add_node(v)
        if v in self.adj[u]:
            return False
        self.adj[u].add(v)
        self.adj[v].add(u)
        return True

    def remove_edge(self, u: int, v: int) -> bool:
        """
        Remove the edge {u, v}; the end nodes are kept.
        Returns whether the edge was present.
        """
        if not self.has_edge(u, v):
            return False
        self.adj[u].remove(v)
        self.adj[v].remove(u)
        return True

    def add_edges_from(self, other) -> int:
        """
        Add all edges of another graph, and return the number of new edges.
        """
        return sum(self.add_edge(u, v) for (u, v) in other.edges())

    def remove_edges_from(self, other) -> int:
        """
        Remove all edges of another graph, and return the number of removed edges.
        """
        return sum(self.remove_edge(u, v) for (u, v) in other.edges())

    def has_node(self, v: int) -> bool:
        return v in self.adj

    def has_edge(self, u: int, v: int) -> bool:
        return u in self.adj and v in self.adj[u]

    def __contains__(self, v: int) -> bool:
        return v in self.adj

    def nodes(self) -> list[int]:
        """
        Nodes in ascending order.
        """
        return sorted(self.adj)

    def edges(self) -> list[tuple[int, int]]:
        """
        Edges as sorted list of pairs (u, v) with u < v, each edge listed once.
        """
        return sorted((u, v) for u, nbrs in self.adj.items() for v in nbrs if u < v)

    def edges_of_node(self, v: int) -> set[int]:
        """
        Neighbors of node 'v' (as a copy); empty if 'v' is not in the graph.
        """
        return set(self.adj.get(v, ()))

    def degree(self, v: int) -> int:
        return len(self.adj.get(v, ()))

    @property
    def num_nodes(self) -> int:
        """
        Number of nodes.
        """
        return len(self.adj)

    @property
    def num_edges(self) -> int:
        """
        Number of edges.
        """
        # every edge is stored in both adjacency sets
        return sum(len(nbrs) for nbrs in self.adj.values()) // 2

    def empty(self) -> bool:
        """
        Whether the graph has no nodes.
        """
        return not self.adj

    def edgeless(self) -> bool:
        """
        Whether the graph has no edges (it may still contain nodes).
        """
        return not any(self.adj.values())

    def clear(self):
        self.adj.clear()

    def copy(self):
        """
        Independent copy of the graph.
        """
        g = Graph()
        g.adj = {v: set(nbrs) for v, nbrs in self.adj.items()}
        return g

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return self.adj == other.adj

    def __repr__(self):
        return f'Graph({self.edges()})'

    def symmetric_difference(self, other):
        """
        Graph formed by the edges contained in exactly one of 'self' and 'other'.
        """
        g = Graph()
        g.add_edges_from(_edge_difference(self, other))
        g.add_edges_from(_edge_difference(other, self))
        return g

    def is_matching(self) -> bool:
        """
        Whether the edges form a matching, i.e., every node has degree at most one.
        """
        return all(len(nbrs) <= 1 for nbrs in self.adj.values())

    def adjacency_matrix(self, sparse_format: bool = False):
        """
        Adjacency matrix with rows and columns ordered as in `nodes()`.
        """
        index = {v: i for i, v in enumerate(self.nodes())}
        n = len(index)
        if not sparse_format:
            a = np.zeros((n, n), dtype=int)
            for (u, v) in self.edges():
                a[index[u], index[v]] = 1
                a[index[v], index[u]] = 1
            return a
        else:
            edges = self.edges()
            rows = [index[u] for (u, _) in edges] + [index[v] for (_, v) in edges]
            cols = [index[v] for (_, v) in edges] + [index[u] for (u, _) in edges]
            data = np.ones(len(rows), dtype=int)
            return sparse.csr_array((data, (rows, cols)), shape=(n, n))

    def is_consistent(self, verbose: bool = False) -> bool:
        """
        Perform an internal consistency check.
        """
        for v, nbrs in self.adj.items():
            if v in nbrs:
                if verbose:
                    print(f'Consistency check failed: node {v} has a self-loop.')
                return False
            for w in nbrs:
                if w not in self.adj:
                    if verbose:
                        print(f'Consistency check failed: neighbor {w} of node {v} is not a node of the graph.')
                    return False
                if v not in self.adj[w]:
                    if verbose:
                        print(f'Consistency check failed: edge ({v}, {w}) is not stored symmetrically.')
                    return False
        return True


def _edge_difference(g: Graph, h: Graph) -> Graph:
    """
    Edges of 'g' which are not edges of 'h'.
    """
    d = g.copy()
    d.remove_edges_from(h)
    return d


def unused_node(*graphs: Graph) -> int:
    """
    Smallest non-negative integer which is not a node of any of the graphs.
    """
    v = 0
    while any(g.has_node(v) for g in graphs):
        v += 1
    return v

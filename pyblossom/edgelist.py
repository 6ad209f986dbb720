"""
Conversion between flat integer edge lists and graphs, and the
corresponding entry points for maximum matchings and Hamiltonian cycles.

An edge list is a flat sequence of 2k non-negative integers
[u0, v0, u1, v1, ...], or equivalently an array of shape (k, 2).
"""

import warnings
import numpy as np
from .graph import Graph
from .blossom import maximum_matching
from .hamiltonian import solve_hamiltonian_cycle

__all__ = ['graph_from_edges', 'edges_from_graph', 'matching', 'hamiltonian_cycle']


def _as_edge_array(edges) -> np.ndarray:
    """
    Validate an edge list and return it as integer array of shape (k, 2).
    """
    a = np.asarray(edges)
    if a.size == 0:
        return np.zeros((0, 2), dtype=np.int64)
    if not np.issubdtype(a.dtype, np.integer):
        raise ValueError(f'edge list must contain integers, received data type {a.dtype}')
    if a.ndim == 1:
        if len(a) % 2 != 0:
            raise ValueError(f'edge list must have even length, received {len(a)} entries')
        a = a.reshape((-1, 2))
    elif a.ndim != 2 or a.shape[1] != 2:
        raise ValueError(f'edge list must be flat or of shape (k, 2), received shape {a.shape}')
    if np.any(a < 0):
        raise ValueError(f'node indices must be non-negative, received {a.min()}')
    if a.dtype.kind == 'u' and np.any(a > np.iinfo(np.int64).max):
        raise ValueError(f'node indices must not exceed {np.iinfo(np.int64).max}, received {a.max()}')
    return a.astype(np.int64)


def graph_from_edges(edges) -> Graph:
    """
    Construct a graph from an edge list. Repeated edges are ignored with a warning.
    """
    graph = Graph()
    for u, v in _as_edge_array(edges).tolist():
        if not graph.add_edge(u, v):
            warnings.warn(f'duplicate edge ({u}, {v}) encountered in edge list, ignoring it', RuntimeWarning)
    return graph


def edges_from_graph(graph: Graph) -> np.ndarray:
    """
    Flat edge list of a graph, ordered as in `Graph.edges()`.
    """
    return np.array(graph.edges(), dtype=np.int64).reshape(-1)


def matching(edges) -> np.ndarray:
    """
    Maximum-cardinality matching of the graph given by an edge list,
    returned as flat list of matched pairs.
    """
    return edges_from_graph(maximum_matching(graph_from_edges(edges)))


def hamiltonian_cycle(edges) -> tuple[np.ndarray, np.ndarray]:
    """
    Hamiltonian cycle through the (subdivided) cubic graph given by an edge list.

    Returns the flat edge list of the cycle and the flat list of subdivisions,
    consisting of runs of four nodes (v1, new1, v2, new2) per merge of two cycles.
    """
    cycle, subdivisions = solve_hamiltonian_cycle(graph_from_edges(edges))
    return edges_from_graph(cycle), np.array(subdivisions, dtype=np.int64).reshape(-1)

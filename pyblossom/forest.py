"""
Rooted forest used as index of the alternating trees during an augmenting path search.
"""

from collections.abc import Iterable

__all__ = ['Forest']


class Forest:
    """
    Disjoint rooted trees over a growing set of nodes.

    Every node stores its parent; roots are their own parent.
    The depth of a node (its distance to the root) distinguishes
    outer (even) and inner (odd) vertices of an alternating tree.
    """
    def __init__(self, nodes: Iterable[int] = ()):
        self._parent = {}
        for v in nodes:
            self.add_node(v)

    def add_node(self, v: int):
        """
        Add 'v' as singleton tree (no-op if already present).
        """
        if v not in self._parent:
            self._parent[v] = v

    def has(self, v: int) -> bool:
        return v in self._parent

    def __contains__(self, v: int) -> bool:
        return v in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def nodes(self) -> list[int]:
        """
        Nodes in insertion order.
        """
        return list(self._parent)

    def parent(self, v: int) -> int:
        """
        Parent of node 'v' ('v' itself for a root).
        """
        if v not in self._parent:
            raise KeyError(f'node {v} is not contained in the forest')
        return self._parent[v]

    def root(self, v: int) -> int:
        """
        Root of the tree containing 'v'.
        """
        return self.path(v)[-1]

    def distance(self, v: int) -> int:
        """
        Depth of node 'v', i.e., its distance to the root.
        """
        return len(self.path(v)) - 1

    def path(self, v: int) -> list[int]:
        """
        Path from 'v' up to its root, both inclusive.
        """
        p = self.parent(v)
        path = [v]
        while p != path[-1]:
            path.append(p)
            p = self._parent[p]
        return path

    def same_tree(self, u: int, v: int) -> bool:
        return self.root(u) == self.root(v)

    def set_edge(self, parent: int, child: int):
        """
        Attach the tree containing 'child' below node 'parent' by reparenting its root.
        Missing nodes are created; nothing happens if both nodes are already in the same tree.
        """
        self.add_node(parent)
        self.add_node(child)
        r = self.root(child)
        if r != self.root(parent):
            self._parent[r] = parent

    def roots(self) -> list[int]:
        return [v for v, p in self._parent.items() if v == p]

    def trees(self) -> dict[int, list[int]]:
        """
        Nodes grouped by tree, as dictionary from root to nodes.
        """
        trees = {r: [] for r in self.roots()}
        for v in self._parent:
            trees[self.root(v)].append(v)
        return trees

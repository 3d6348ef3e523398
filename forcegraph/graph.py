"""A graph with stable indices whose nodes carry simulation state."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Iterator

from forcegraph.vector import Vec3


@dataclass
class Node:
    """A node on a ForceGraph: a name, arbitrary data and its physical state."""

    name: str
    data: Any = None
    location: Vec3 = Vec3.ZERO
    old_location: Vec3 = field(default=Vec3.ZERO, repr=False)
    velocity: Vec3 = field(default=Vec3.ZERO, repr=False)

    def __post_init__(self) -> None:
        self.name = str(self.name)


@dataclass(frozen=True)
class Edge:
    """An edge between two node indices, carrying an arbitrary weight."""

    index: int
    source: int
    target: int
    weight: Any = None


class ForceGraph:
    """A graph whose node and edge indices stay valid when others are removed.

    Freed indices are reused by later additions, most recently freed first.
    """

    def __init__(self, directed: bool = False) -> None:
        self.directed = directed
        self._nodes: list[Node | None] = []
        self._edges: list[Edge | None] = []
        self._free_nodes: list[int] = []
        self._free_edges: list[int] = []

    def _check_node(self, index: int) -> None:
        if not self.__contains__(index):
            raise IndexError(f"node index {index} is not in the graph")

    def __contains__(self, index: object) -> bool:
        return (
            isinstance(index, int)
            and 0 <= index < len(self._nodes)
            and self._nodes[index] is not None
        )

    def __getitem__(self, index: int) -> Node:
        self._check_node(index)
        node = self._nodes[index]
        assert node is not None
        return node

    def __len__(self) -> int:
        return self.node_count()

    def add_node(self, node: Node) -> int:
        """Add a node and return its index."""
        if self._free_nodes:
            index = self._free_nodes.pop()
            self._nodes[index] = node
        else:
            index = len(self._nodes)
            self._nodes.append(node)
        return index

    def add_force_node(self, name: str, data: Any = None) -> int:
        """Add a node with a name and data, placed at the origin."""
        return self.add_node(Node(name, data))

    def add_force_node_with_coords(self, name: str, data: Any, location: Vec3) -> int:
        """Add a node with a name, data and a starting location."""
        return self.add_node(Node(name, data, location))

    def add_edge(self, source: int, target: int, weight: Any = None) -> int:
        """Add an edge between two existing nodes and return its index."""
        self._check_node(source)
        self._check_node(target)
        if self._free_edges:
            index = self._free_edges.pop()
            self._edges[index] = Edge(index, source, target, weight)
        else:
            index = len(self._edges)
            self._edges.append(Edge(index, source, target, weight))
        return index

    def remove_node(self, index: int) -> Node:
        """Remove a node and every edge touching it; return the removed node."""
        node = self[index]
        for edge in list(self.edges()):
            if edge.source == index or edge.target == index:
                self._edges[edge.index] = None
                self._free_edges.append(edge.index)
        self._nodes[index] = None
        self._free_nodes.append(index)
        return node

    def node_indices(self) -> Iterator[int]:
        """Indices of all live nodes, in ascending order."""
        return (i for i, node in enumerate(self._nodes) if node is not None)

    def nodes(self) -> Iterator[Node]:
        """All live nodes, in index order."""
        return (node for node in self._nodes if node is not None)

    def edges(self) -> Iterator[Edge]:
        """All live edges, in index order."""
        return (edge for edge in self._edges if edge is not None)

    def edges_of(self, index: int) -> Iterator[Edge]:
        """Edges leaving a node (any incident edge when undirected)."""
        self._check_node(index)
        for edge in self.edges():
            if edge.source == index or (not self.directed and edge.target == index):
                yield edge

    def neighbors(self, index: int) -> Iterator[int]:
        """Indices of the nodes reached through ``edges_of``; self-loops count once."""
        for edge in self.edges_of(index):
            yield edge.target if edge.source == index else edge.source

    def edge_endpoints(self, edge_index: int) -> tuple[int, int] | None:
        """The (source, target) of an edge, or None if there is no such edge."""
        if 0 <= edge_index < len(self._edges):
            edge = self._edges[edge_index]
            if edge is not None:
                return edge.source, edge.target
        return None

    def node_count(self) -> int:
        return sum(1 for _ in self.nodes())

    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def copy(self) -> ForceGraph:
        """A deep copy: nodes, data and weights are independent of this graph."""
        return copy.deepcopy(self)
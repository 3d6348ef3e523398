"""The simulation loop that places a graph's nodes and applies a force to them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from forcegraph.force import Force, fruchterman_reingold
from forcegraph.graph import ForceGraph, Node
from forcegraph.vector import Vec3


class Dimensions(Enum):
    """Number of dimensions the simulation runs in."""

    TWO = 2
    THREE = 3

    def __str__(self) -> str:
        return str(self.value)


def _default_force() -> Force:
    return fruchterman_reingold(45.0, 0.975)


@dataclass
class SimulationParameters:
    """Settings for a simulation.

    ``node_start_size`` is the width of the box that nodes are randomly placed
    in when the simulation starts.
    """

    node_start_size: float = 200.0
    dimensions: Dimensions = Dimensions.TWO
    force: Force = field(default_factory=_default_force)

    @classmethod
    def from_force(cls, force: Force) -> SimulationParameters:
        """Default parameters that use the given force."""
        return cls(force=force)


class Simulation:
    """Holds a graph and the parameters that drive its layout."""

    def __init__(
        self,
        graph: ForceGraph | None = None,
        parameters: SimulationParameters | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.graph = graph if graph is not None else ForceGraph()
        self.parameters = parameters if parameters is not None else SimulationParameters()
        self._rng = rng if rng is not None else random.Random()
        self.reset_node_placement()

    def reset_node_placement(self) -> None:
        """Place every node randomly inside the starting box and stop it moving."""
        half = self.parameters.node_start_size / 2.0
        three_d = self.parameters.dimensions is Dimensions.THREE
        for node in self.graph.nodes():
            location = Vec3(
                self._rng.uniform(-half, half),
                self._rng.uniform(-half, half),
                self._rng.uniform(-half, half) if three_d else 0.0,
            )
            node.velocity = Vec3.ZERO
            node.location = location
            node.old_location = location

    def update(self, dt: float) -> None:
        """Advance the layout by ``dt`` with the configured force."""
        self.parameters.force.update(self.graph, dt)

    def update_custom(self, force: Force, dt: float) -> None:
        """Advance the layout by ``dt`` with another force."""
        force.update(self.graph, dt)

    def visit_nodes(self, callback: Callable[[Node], object]) -> None:
        """Call ``callback`` with every node, in index order."""
        for node in self.graph.nodes():
            callback(node)

    def visit_edges(self, callback: Callable[[Node, Node], object]) -> None:
        """Call ``callback`` with the source and target node of every edge."""
        for edge in self.graph.edges():
            callback(self.graph[edge.source], self.graph[edge.target])

    def find(self, query: Vec3, radius: float) -> int | None:
        """Index of the first node inside the cube of half-width ``radius`` around ``query``."""
        for index in self.graph.node_indices():
            location = self.graph[index].location
            if all(
                q - radius <= coordinate <= q + radius
                for q, coordinate in zip(query, location)
            ):
                return index
        return None
"""Forces that move the nodes of a ForceGraph, with tunable parameters."""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from typing import Callable, Union

from forcegraph.graph import ForceGraph
from forcegraph.vector import Vec3, unit_vector


@dataclass
class NumberValue:
    """A tunable number with the inclusive range it is meant to stay in."""

    value: float
    minimum: float
    maximum: float

    @property
    def range(self) -> tuple[float, float]:
        return (self.minimum, self.maximum)


@dataclass
class BoolValue:
    """A tunable on/off switch."""

    value: bool


Value = Union[NumberValue, BoolValue]
Values = dict[str, Value]
UpdateFn = Callable[[Values, ForceGraph, float], None]


def _div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: zero divisors give inf or nan instead of raising."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _number(values: Values, key: str) -> float:
    entry = values[key]
    if not isinstance(entry, NumberValue):
        raise TypeError(f"value {key!r} is not a number")
    return entry.value


def _flag(values: Values, key: str) -> bool:
    entry = values[key]
    if not isinstance(entry, BoolValue):
        raise TypeError(f"value {key!r} is not a bool")
    return entry.value


@dataclass(eq=False)
class Force:
    """How a graph behaves: a named update rule with tunable values.

    Continuous forces are meant to run every frame; the others run once on demand.
    """

    name: str
    values: Values
    updater: UpdateFn
    continuous: bool = True
    info: str | None = None
    defaults: Values = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.defaults:
            self.defaults = copy.deepcopy(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Force):
            return NotImplemented
        return (
            self.defaults == other.defaults
            and self.name == other.name
            and self.continuous == other.continuous
            and self.info == other.info
        )

    __hash__ = None  # type: ignore[assignment]

    def update(self, graph: ForceGraph, dt: float) -> None:
        """Move the graph's nodes for an interval of ``dt``."""
        self.updater(self.values, graph, dt)

    def reset(self) -> None:
        """Restore every value to its default."""
        self.values = copy.deepcopy(self.defaults)

    def number(self, key: str) -> float:
        """The current value of a number entry."""
        return _number(self.values, key)

    def flag(self, key: str) -> bool:
        """The current value of a bool entry."""
        return _flag(self.values, key)


def _remember_locations(graph: ForceGraph) -> None:
    for node in graph.nodes():
        node.old_location = node.location


def _apply(graph: ForceGraph, index: int, force: Vec3, dt: float, cooloff: float) -> None:
    node = graph[index]
    node.velocity = (node.velocity + force * dt) * cooloff
    node.location = node.location + node.velocity * dt


def fr_get_repulsion(index: int, scale: float, graph: ForceGraph) -> Vec3:
    """Repulsion on a node from every other node."""
    node = graph[index]
    force = Vec3.ZERO
    for alt_index in graph.node_indices():
        if alt_index == index:
            continue
        alt = graph[alt_index]
        magnitude = -_div(scale * scale, node.old_location.distance(alt.old_location))
        force = force + magnitude * unit_vector(node.old_location, alt.old_location)
    return force


def fr_get_attraction(index: int, scale: float, graph: ForceGraph) -> Vec3:
    """Attraction on a node towards its neighbours."""
    node = graph[index]
    force = Vec3.ZERO
    for alt_index in graph.neighbors(index):
        alt = graph[alt_index]
        magnitude = _div(node.old_location.distance_squared(alt.old_location), scale)
        force = force + magnitude * unit_vector(node.old_location, alt.old_location)
    return force


def fr_get_attraction_weighted(index: int, scale: float, graph: ForceGraph) -> Vec3:
    """Attraction towards neighbours, each multiplied by the connecting edge's weight."""
    node = graph[index]
    force = Vec3.ZERO
    for edge in graph.edges_of(index):
        alt_index = edge.target if edge.source == index else edge.source
        alt = graph[alt_index]
        weight = float(edge.weight)
        magnitude = _div(node.old_location.distance_squared(alt.old_location), scale)
        force = force + magnitude * unit_vector(node.old_location, alt.old_location) * weight
    return force


def _fr_values(scale: float, cooloff_factor: float) -> Values:
    return {
        "Scale": NumberValue(scale, 1.0, 200.0),
        "Cooloff Factor": NumberValue(cooloff_factor, 0.0, 1.0),
    }


def _fr_update(attraction: Callable[[int, float, ForceGraph], Vec3]) -> UpdateFn:
    def update(values: Values, graph: ForceGraph, dt: float) -> None:
        scale_value = _number(values, "Scale")
        cooloff = _number(values, "Cooloff Factor")
        _remember_locations(graph)
        for index in list(graph.node_indices()):
            force = fr_get_repulsion(index, scale_value, graph)
            force = force + attraction(index, scale_value, graph)
            _apply(graph, index, force, dt, cooloff)

    return update


def fruchterman_reingold(scale: float, cooloff_factor: float) -> Force:
    """The force-directed drawing algorithm of Fruchterman and Reingold (1991)."""
    return Force(
        name="Fruchterman-Reingold (1991)",
        values=_fr_values(scale, cooloff_factor),
        updater=_fr_update(fr_get_attraction),
        continuous=True,
        info="The force-directed graph drawing algorithm by Fruchterman-Reingold (1991).",
    )


def fruchterman_reingold_weighted(scale: float, cooloff_factor: float) -> Force:
    """Fruchterman-Reingold with attractions multiplied by edge weights."""
    return Force(
        name="Weighted Fruchterman-Reingold (1991)",
        values=_fr_values(scale, cooloff_factor),
        updater=_fr_update(fr_get_attraction_weighted),
        continuous=True,
        info=(
            "The force-directed graph drawing algorithm by Fruchterman-Reingold (1991). "
            "This version multiplies the edge force by the edge weight."
        ),
    )


def _handy_update(values: Values, graph: ForceGraph, dt: float) -> None:
    repulsion = _flag(values, "Repulsive Force")
    attraction = _flag(values, "Attractive Force")
    scale_value = _number(values, "Scale")
    cooloff = _number(values, "Cooloff Factor")
    gravity_factor = _number(values, "Gravity Factor")
    centering = _flag(values, "Centering")
    gravity = _flag(values, "Gravity")

    location_sum = Vec3.ZERO
    _remember_locations(graph)

    for index in list(graph.node_indices()):
        if centering:
            location_sum = location_sum + graph[index].old_location

        force = Vec3.ZERO
        if repulsion:
            force = force + fr_get_repulsion(index, scale_value, graph)
        if attraction:
            force = force + fr_get_attraction(index, scale_value, graph)
        if gravity:
            force = force + (-graph[index].old_location) / _div(1.0, gravity_factor)

        _apply(graph, index, force, dt, cooloff)

    if centering:
        average = location_sum / graph.node_count()
        for node in graph.nodes():
            node.location = node.location - average


def handy(scale: float, cooloff_factor: float, gravity: bool, centering: bool) -> Force:
    """Fruchterman-Reingold with optional gravity towards the origin and recentering."""
    return Force(
        name="Handy",
        values={
            "Repulsive Force": BoolValue(True),
            "Attractive Force": BoolValue(True),
            "Scale": NumberValue(scale, 1.0, 200.0),
            "Cooloff Factor": NumberValue(cooloff_factor, 0.0, 1.0),
            "Gravity Factor": NumberValue(1.0, 0.1, 5.0),
            "Centering": BoolValue(centering),
            "Gravity": BoolValue(gravity),
        },
        updater=_handy_update,
        continuous=True,
        info="Force Directed Algorithm by Grant Handy (2022)",
    )


def _scale_update(values: Values, graph: ForceGraph, dt: float) -> None:
    factor = _number(values, "Scale Factor")
    center = sum((node.location for node in graph.nodes()), Vec3.ZERO) / graph.node_count()
    for node in graph.nodes():
        node.location = (node.location - center) * factor + center


def scale() -> Force:
    """A one-shot force that scales the layout around its center."""
    return Force(
        name="Scale",
        values={"Scale Factor": NumberValue(1.5, 0.1, 2.0)},
        updater=_scale_update,
        continuous=False,
        info="Scales the graph around its center.",
    )


def _translate_update(values: Values, graph: ForceGraph, dt: float) -> None:
    distance = _number(values, "Distance")
    for node in graph.nodes():
        x, y, z = node.location
        if _flag(values, "Up"):
            y -= distance
        if _flag(values, "Down"):
            y += distance
        if _flag(values, "Left"):
            x -= distance
        if _flag(values, "Right"):
            x += distance
        node.location = Vec3(x, y, z)


def translate() -> Force:
    """A one-shot force that moves the whole layout in the chosen directions."""
    return Force(
        name="Translate",
        values={
            "Distance": NumberValue(7.0, 0.0, 100.0),
            "Up": BoolValue(False),
            "Down": BoolValue(False),
            "Left": BoolValue(False),
            "Right": BoolValue(False),
        },
        updater=_translate_update,
        continuous=False,
        info="Moves the entire layout in any direction.",
    )
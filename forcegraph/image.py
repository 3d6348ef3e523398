"""Render a laid-out graph as an SVG image."""

from __future__ import annotations

import math
import random
import unicodedata
from dataclasses import dataclass, field, replace
from xml.sax.saxutils import escape, quoteattr

from forcegraph.graph import ForceGraph
from forcegraph.simulation import Dimensions, Simulation, SimulationParameters
from forcegraph.vector import Vec3

_IMAGE_SCALE = 1.5
_AVERAGE_ADVANCE = 0.6
_SVG_NAMESPACE = "http://www.w3.org/2000/svg"
_ANCHORS = {"left": "start", "center": "middle", "right": "end"}
_BASELINES = {"top": "0.76em", "center": "0.5ex", "bottom": "-0.5ex"}


def _fmt(number: float) -> str:
    number = float(number)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _to_int(value: float, low: int, high: int) -> int:
    """Truncate towards zero, saturating at the bounds; nan becomes 0."""
    if math.isnan(value):
        return 0
    return int(max(low, min(value, high)))


def _to_i32(value: float) -> int:
    return _to_int(value, -(2**31), 2**31 - 1)


def _to_u32(value: float) -> int:
    return _to_int(value, 0, 2**32 - 1)


@dataclass(frozen=True)
class RGBAColor:
    """A colour with 8-bit channels and an opacity between 0 and 1."""

    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"colour channel {channel!r} is not in 0..=255")

    def to_svg(self) -> str:
        """The colour as an SVG hex string, without its opacity."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class TextStyle:
    """How node names are written next to their nodes."""

    font_family: str = "sans-serif"
    font_size: float = 20.0
    color: RGBAColor = RGBAColor(0, 0, 0, 1.0)
    h_pos: str = "left"
    v_pos: str = "center"

    def __post_init__(self) -> None:
        if self.h_pos not in _ANCHORS:
            raise ValueError(f"h_pos must be one of {sorted(_ANCHORS)}")
        if self.v_pos not in _BASELINES:
            raise ValueError(f"v_pos must be one of {sorted(_BASELINES)}")

    def text_width(self, text: str) -> float:
        """Estimated rendered width of ``text``; wide characters count double."""
        units = sum(
            2 if unicodedata.east_asian_width(char) in ("W", "F") else 1 for char in text
        )
        return units * self.font_size * _AVERAGE_ADVANCE


@dataclass
class Settings:
    """Parameters for laying out and drawing a graph.

    ``rng`` seeds the starting placement; leave it None for a fresh random one.
    """

    sim_parameters: SimulationParameters = field(default_factory=SimulationParameters)
    iterations: int = 2000
    dt: float = 0.035
    node_size: int = 10
    node_color: RGBAColor = RGBAColor(0, 0, 0, 1.0)
    edge_size: int = 3
    edge_color: RGBAColor = RGBAColor(255, 0, 0, 1.0)
    background_color: RGBAColor = RGBAColor(255, 255, 255, 1.0)
    print_progress: bool = False
    text_style: TextStyle | None = None
    rng: random.Random | None = None


def _bounds(graph: ForceGraph, settings: Settings) -> tuple[float, float]:
    top = bottom = left = right = 0.0
    style = settings.text_style
    for node in graph.nodes():
        location = node.location
        rightmost = location.x + (style.text_width(node.name) if style else 0.0)
        if rightmost > right:
            right = rightmost
        if location.x < left:
            left = location.x
        if location.y > top:
            top = location.y
        if location.y < bottom:
            bottom = location.y
    size = float(settings.node_size)
    return (right + size) - (left - size), (top + size) - (bottom - size)


def gen_image(graph: ForceGraph, settings: Settings | None = None) -> str:
    """Run a two-dimensional layout of ``graph`` and return it drawn as SVG text.

    The graph passed in is left untouched.
    """
    settings = settings if settings is not None else Settings()
    parameters = replace(settings.sim_parameters)
    sim = Simulation(graph.copy(), parameters, rng=settings.rng)
    sim.parameters.dimensions = Dimensions.TWO

    for step in range(settings.iterations):
        if settings.print_progress and step % 10 == 0:
            print(f"{step}/{settings.iterations}")
        sim.update(settings.dt)

    layout = sim.graph
    graph_x, graph_y = _bounds(layout, settings)
    image_x = _to_u32(graph_x * _IMAGE_SCALE)
    image_y = _to_u32(graph_y * _IMAGE_SCALE)

    nodes = list(layout.nodes())
    if nodes:
        average = sum((node.location for node in nodes), Vec3.ZERO) / len(nodes)
        shift = Vec3(float(image_x // 2), float(image_y // 2), 0.0)
        for node in nodes:
            node.location = (node.location - average) + shift

    lines = [
        f'<svg width="{image_x}" height="{image_y}" viewBox="0 0 {image_x} {image_y}" '
        f'xmlns="{_SVG_NAMESPACE}">'
    ]

    background = settings.background_color
    lines.append(
        f'<rect x="0" y="0" width="{image_x}" height="{image_y}" '
        f'opacity="{_fmt(background.a)}" fill="{background.to_svg()}" stroke="none"/>'
    )

    edge_color = settings.edge_color
    for edge in layout.edges():
        source = layout[edge.source].location
        target = layout[edge.target].location
        points = (
            f"{_to_i32(source.x)},{_to_i32(source.y)} "
            f"{_to_i32(target.x)},{_to_i32(target.y)} "
        )
        lines.append(
            f'<polyline fill="none" opacity="{_fmt(edge_color.a)}" '
            f'stroke="{edge_color.to_svg()}" stroke-width="{settings.edge_size}" '
            f'points="{points}"/>'
        )

    node_color = settings.node_color
    for node in nodes:
        lines.append(
            f'<circle cx="{_to_i32(node.location.x)}" cy="{_to_i32(node.location.y)}" '
            f'r="{settings.node_size}" opacity="{_fmt(node_color.a)}" '
            f'fill="{node_color.to_svg()}" stroke="none"/>'
        )

    style = settings.text_style
    if style is not None:
        offset = _to_i32(style.font_size / 2.0)
        for node in nodes:
            x = _to_i32(node.location.x) + offset
            y = _to_i32(node.location.y)
            lines.append(
                f'<text x="{x}" y="{y}" dy="{_BASELINES[style.v_pos]}" '
                f'text-anchor="{_ANCHORS[style.h_pos]}" '
                f"font-family={quoteattr(style.font_family)} "
                f'font-size="{_fmt(style.font_size)}" opacity="{_fmt(style.color.a)}" '
                f'fill="{style.color.to_svg()}">{escape(node.name)}</text>'
            )

    lines.append("</svg>")
    return "\n".join(lines) + "\n"
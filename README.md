# forcegraph

Force-directed graph layout in pure Python, with no dependencies outside the
standard library. You build a graph and a simulation moves its nodes until
the layout settles. Graphs can be read from and written to the JSON Graph
format and GML, exported to DOT, and drawn as SVG.

## Installation

```
pip install forcegraph
```

## Graphs

`forcegraph.graph.ForceGraph` stores `Node` objects and `Edge` records under
integer indices. An index stays valid when other nodes or edges are removed.
A freed index is reused by the next addition, and the most recently freed
index is reused first. Graphs are undirected unless you create them with
`ForceGraph(directed=True)`.

```python
from forcegraph.graph import ForceGraph

graph = ForceGraph()
one = graph.add_force_node("one", None)
two = graph.add_force_node("two", None)
graph.add_force_node("three", None)
graph.add_edge(one, two, None)

graph.node_count()       # 3
list(graph.neighbors(one))  # [1]
graph[one].name          # "one"
```

Each `Node` has these fields:

- `name`
- `data`, which can hold any value
- `location`, `old_location` and `velocity`, each a `forcegraph.vector.Vec3`

Each `Edge` has `index`, `source`, `target` and `weight`.

Other methods:

- `add_force_node_with_coords(name, data, location)` adds a node at a given location.
- `remove_node(index)` removes a node and every edge that touches it.
- `nodes()`, `edges()` and `node_indices()` iterate over the graph in index order.
- `edges_of(index)` iterates over the edges of one node.
- `edge_endpoints(edge_index)` returns the two ends of an edge.
- `copy()` returns a deep copy.

Adding an edge to a node that does not exist raises `IndexError`.

## Simulation

```python
from forcegraph.simulation import Simulation, SimulationParameters

simulation = Simulation(graph, SimulationParameters())
for _ in range(50):
    simulation.update(0.035)

for node in simulation.graph.nodes():
    print(node.name, node.location)
```

`SimulationParameters` has these fields:

| Field | Default | Meaning |
| --- | --- | --- |
| `node_start_size` | `200.0` | Side of the square or cube that nodes start in |
| `dimensions` | `Dimensions.TWO` | `Dimensions.TWO` or `Dimensions.THREE` |
| `force` | `fruchterman_reingold(45.0, 0.975)` | The force applied on each update |

When a `Simulation` is created, it places every node at a random spot inside
the start square. In three dimensions it uses a cube instead. Pass
`rng=random.Random(seed)` to make the placement repeatable.
`reset_node_placement()` places the nodes again and sets their velocity to
zero.

Other methods:

- `update_custom(force, dt)` applies a different force for one step.
- `visit_nodes(callback)` calls `callback` with each node.
- `visit_edges(callback)` calls `callback` with the two end nodes of each edge.
- `find(query, radius)` returns the index of the first node inside the cube of half-width `radius` around `query`. It returns `None` if no node is inside.

## Forces

`forcegraph.force` provides these forces:

- `fruchterman_reingold(scale, cooloff_factor)`: the 1991 Fruchterman-Reingold algorithm.
- `fruchterman_reingold_weighted(scale, cooloff_factor)`: the same algorithm, with each attraction multiplied by its edge weight. Each weight is converted with `float()`.
- `handy(scale, cooloff_factor, gravity, centering)`: repulsion and attraction that can each be switched on or off. It can also pull nodes towards the origin (gravity) and move the layout back to the origin after each step (centering).
- `scale()`: a one-shot force that scales the layout around its centre.
- `translate()`: a one-shot force that moves the whole layout up, down, left or right.

```python
from forcegraph.force import handy, translate
from forcegraph.simulation import SimulationParameters

parameters = SimulationParameters.from_force(handy(45.0, 0.975, True, True))

move = translate()
move.values["Right"].value = True
simulation.update_custom(move, 0.0)
```

Each `Force` keeps its settings in `values`, a dictionary in insertion order.
An entry is either a `NumberValue`, which holds a value and its suggested
minimum and maximum, or a `BoolValue`.

- `number(key)` reads a number entry.
- `flag(key)` reads a bool entry.
- `reset()` restores the defaults.

`continuous` is true for forces that are meant to run on every frame. It is
false for the one-shot forces. The helpers `fr_get_repulsion`,
`fr_get_attraction` and `fr_get_attraction_weighted` return the force acting
on one node, computed from the nodes' `old_location` values.

## Formats

```python
from forcegraph.dot import graph_to_dot
from forcegraph.gml import graph_from_gml, graph_to_gml
from forcegraph.jsongraph import graph_from_json, graph_to_json

print(graph_to_dot(graph))           # undirected DOT, labelled with node names

same_shape = graph_from_gml(graph_to_gml(graph))

document = graph_to_json(graph)      # a dict ready for json.dumps
```

- **DOT:** export only.
- **GML:**
  - Ids are node indices and labels are node names.
  - Reading only picks up ids, sources and targets of a single digit.
  - Nodes read from GML carry `None` as data. Edges read from GML carry `None` as weight.
  - Errors raise `GmlParseError`, which has `kind` and `value` attributes.
- **JSON Graph:**
  - Writing puts node data and edge weights under `metadata`. It raises `TypeError` for values that JSON cannot represent.
  - Reading gives each node a dict `{"label": ..., "metadata": ...}` as data, and each edge its `metadata` as weight.
  - Hyperedges are rejected.
  - Errors raise `JsonParseError`, whose `kind` is `"bad_formatting"`, `"hyper_edges"` or `"node_not_found"`.

## Rendering to SVG

```python
import random

from forcegraph.image import RGBAColor, Settings, TextStyle, gen_image

svg = gen_image(graph, Settings(
    iterations=2000,
    node_color=RGBAColor(100, 100, 100, 1.0),
    text_style=TextStyle(font_size=20.0),
    rng=random.Random(1),
))
with open("graph.svg", "w", encoding="utf-8") as handle:
    handle.write(svg)
```

`gen_image` works on a copy of the graph, so the graph you pass in is not
changed. It runs the simulation in two dimensions for `iterations` steps of
`dt` and sizes the image to fit the layout. It then draws the background,
the edges, the nodes, and finally the node names if a `TextStyle` is given.

Text width is an estimate: about 0.6 of the font size per character, and
twice that for wide characters. Set `print_progress=True` to print a
progress line every ten steps.

## What it does not do

- There is no interactive viewer and no command-line program. Use the package from Python code.
- The only image output is SVG text. Labels are placed using estimated text widths, not measured font metrics.
"""Import and export graphs in the JSON Graph format (hyperedges are not supported)."""

from __future__ import annotations

import json
from typing import Any

from forcegraph.graph import ForceGraph


class JsonParseError(ValueError):
    """Raised when JSON text cannot be turned into a graph.

    ``kind`` is one of ``"bad_formatting"``, ``"hyper_edges"`` or ``"node_not_found"``;
    ``name`` holds the missing node's name for the last of these.
    """

    def __init__(self, kind: str, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.name = name


def _bad(detail: object) -> JsonParseError:
    return JsonParseError("bad_formatting", f"Input not JSON: {detail}")


def _to_value(obj: Any) -> Any:
    """The plain JSON value of an object: tuples become lists, keys become strings."""
    return json.loads(json.dumps(obj))


def graph_to_json(graph: ForceGraph) -> dict[str, Any]:
    """Build a JSON Graph document from a graph.

    Node data goes into each node's ``metadata``, edge weights into each edge's.
    Raises TypeError when data or weights cannot be represented as JSON.
    """
    nodes: dict[str, Any] = {}
    for node in graph.nodes():
        nodes[node.name] = {"label": None, "metadata": _to_value(node.data)}

    edges = [
        {
            "source": graph[edge.source].name,
            "target": graph[edge.target].name,
            "metadata": _to_value(edge.weight),
        }
        for edge in graph.edges()
    ]

    return {"graph": {"nodes": nodes, "edges": edges}}


def _check_node(name: str, node: Any) -> tuple[str | None, Any]:
    if not isinstance(node, dict):
        raise _bad(f"node {name!r} must be an object")
    label = node.get("label")
    if label is not None and not isinstance(label, str):
        raise _bad(f"label of node {name!r} must be a string")
    return label, node.get("metadata")


def _check_edge(edge: Any) -> tuple[str, str, Any]:
    if not isinstance(edge, dict):
        raise _bad("edges must be objects")
    for key in ("source", "target"):
        if key not in edge:
            raise _bad(f"missing field `{key}`")
        if not isinstance(edge[key], str):
            raise _bad(f"edge {key} must be a string")
    return edge["source"], edge["target"], edge.get("metadata")


def graph_from_json(text: str | bytes) -> ForceGraph:
    """Build a graph from JSON Graph text.

    Each node's data is a dict with its ``label`` and ``metadata``; each edge's
    weight is its ``metadata`` (None when absent).
    """
    try:
        document = json.loads(text)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as err:
        raise _bad(err) from err

    if not isinstance(document, dict):
        raise _bad("document must be an object")
    if "graph" not in document:
        raise _bad("missing field `graph`")
    inner = document["graph"]
    if not isinstance(inner, dict):
        raise _bad("graph must be an object")
    if "nodes" not in inner:
        raise _bad("missing field `nodes`")
    raw_nodes = inner["nodes"]
    if not isinstance(raw_nodes, dict):
        raise _bad("nodes must be an object")

    nodes = [(name, *_check_node(name, node)) for name, node in raw_nodes.items()]

    raw_edges = inner.get("edges")
    if raw_edges is not None and not isinstance(raw_edges, list):
        raise _bad("edges must be an array")
    edges = [_check_edge(edge) for edge in raw_edges or []]

    if inner.get("hyperedges") is not None:
        raise JsonParseError("hyper_edges", "Graphs with hyperedges are not supported")

    graph = ForceGraph()
    indices: dict[str, int] = {}
    for name, label, metadata in nodes:
        index = graph.add_force_node(name, {"label": label, "metadata": metadata})
        indices.setdefault(name, index)

    for source, target, metadata in edges:
        for endpoint in (source, target):
            if endpoint not in indices:
                raise JsonParseError(
                    "node_not_found", f"Node {endpoint} not defined in graph", endpoint
                )
        graph.add_edge(indices[source], indices[target], metadata)

    return graph
"""Import and export graphs in Graph Modelling Language (GML)."""

from __future__ import annotations

import re

from forcegraph.graph import ForceGraph

_GRAPH_RE = re.compile(r"graph\s\[([\d\D]+)\]")
_NODE_RE = re.compile(r"node\s\[([^]]+)\]")
_EDGE_RE = re.compile(r"edge\s\[([^]]+)\]")
_ID_RE = re.compile(r"\sid\s(\d)")
_LABEL_RE = re.compile(r'\slabel\s"([^]]+)"')
_SOURCE_RE = re.compile(r"\ssource\s(\d)")
_TARGET_RE = re.compile(r"\starget\s(\d)")


class GmlParseError(ValueError):
    """Raised when GML text cannot be turned into a graph.

    ``kind`` names the problem, ``value`` holds the offending id where there is one.
    """

    def __init__(self, kind: str, message: str, value: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.value = value


def _parse_number(text: str, kind: str, message: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise GmlParseError(kind, message) from None


def graph_from_gml(gml: str) -> ForceGraph:
    """Build a graph from GML text; node data and edge weights are None."""
    match = _GRAPH_RE.search(gml)
    if match is None:
        raise GmlParseError(
            "graph_structure", 'Graph must be structured as "graph [ [CONTENT] ]"'
        )
    content = match.group(1)

    nodes = _NODE_RE.findall(content)
    if not nodes:
        raise GmlParseError("no_nodes", "Graph include nodes")

    graph = ForceGraph()
    indices: dict[int, int] = {}

    for node in nodes:
        id_match = _ID_RE.search(node)
        if id_match is None:
            raise GmlParseError("no_id", "Nodes must have an id")
        node_id = _parse_number(id_match.group(1), "id_not_number", "Node ids must be a number")
        label_match = _LABEL_RE.search(node)
        label = label_match.group(1) if label_match else ""
        indices[node_id] = graph.add_force_node(label)

    for edge in _EDGE_RE.findall(content):
        source_match = _SOURCE_RE.search(edge)
        if source_match is None:
            raise GmlParseError("no_source", "Edges must have a source")
        target_match = _TARGET_RE.search(edge)
        if target_match is None:
            raise GmlParseError("no_target", "Edges must have a target")

        source = _parse_number(
            source_match.group(1), "source_not_number", "Edge sources must be numbers"
        )
        target = _parse_number(
            target_match.group(1), "target_not_number", "Edge targets must be numbers"
        )

        if source not in indices:
            raise GmlParseError(
                "invalid_source", f"Edge source {source} not found in nodes", source
            )
        if target not in indices:
            raise GmlParseError(
                "invalid_target", f"Edge target {target} not found in nodes", target
            )

        graph.add_edge(indices[source], indices[target])

    return graph


def graph_to_gml(graph: ForceGraph) -> str:
    """Render a graph as GML, using node indices as ids and names as labels."""
    parts = ["graph [\n"]
    for index in graph.node_indices():
        parts.append(f'  node [\n    id {index}\n    label "{graph[index].name}"\n  ]\n')
    for edge in graph.edges():
        parts.append(f"  edge [\n    source {edge.source}\n    target {edge.target}\n  ]\n")
    parts.append("]")
    return "".join(parts)
"""Export graphs to the DOT language."""

from __future__ import annotations

from forcegraph.graph import ForceGraph

_INDENT = "    "

_DEBUG_ESCAPES = {
    "\0": "\\0",
    "\t": "\\t",
    "\r": "\\r",
    "\n": "\\n",
    "\\": "\\\\",
    '"': '\\"',
}


class DotParseError(ValueError):
    """Raised when a node name cannot be resolved while building DOT output."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Index for {name} was not found in the graph")
        self.name = name


def _debug_quote(text: str) -> str:
    """Quote a string the way a debug formatter does."""
    parts = []
    for char in text:
        if char in _DEBUG_ESCAPES:
            parts.append(_DEBUG_ESCAPES[char])
        elif char != " " and not char.isprintable():
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    return '"' + "".join(parts) + '"'


def _dot_escape(text: str) -> str:
    parts = []
    for char in text:
        if char in ('"', "\\"):
            parts.append("\\" + char)
        elif char == "\n":
            parts.append("\\l")
        else:
            parts.append(char)
    return "".join(parts)


def graph_to_dot(graph: ForceGraph) -> str:
    """Render a graph as an undirected DOT graph labelled with node names.

    Nodes sharing a name collapse onto the last of them for edge endpoints.
    """
    names: list[str] = []
    indices: dict[str, int] = {}
    for node in graph.nodes():
        indices[node.name] = len(names)
        names.append(node.name)

    edges: list[tuple[int, int]] = []
    for edge in graph.edges():
        source = graph[edge.source].name
        target = graph[edge.target].name
        if source not in indices:
            raise DotParseError(source)
        if target not in indices:
            raise DotParseError(target)
        edges.append((indices[source], indices[target]))

    lines = ["graph {"]
    for index, name in enumerate(names):
        label = _dot_escape(_debug_quote(name))
        lines.append(f'{_INDENT}{index} [ label = "{label}" ]')
    for source, target in edges:
        lines.append(f"{_INDENT}{source} -- {target} [ ]")
    lines.append("}")
    return ("\n".join(lines) + "\n").replace('\\"', "")
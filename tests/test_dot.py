import pytest

from forcegraph.dot import DotParseError, graph_to_dot
from forcegraph.graph import ForceGraph

RESULT = (
    "graph {\n"
    '    0 [ label = "one" ]\n'
    '    1 [ label = "two" ]\n'
    '    2 [ label = "three" ]\n'
    "    0 -- 1 [ ]\n"
    "    1 -- 2 [ ]\n"
    "}\n"
)


def test_dot():
    graph = ForceGraph()
    one = graph.add_force_node("one")
    two = graph.add_force_node("two")
    three = graph.add_force_node("three")
    graph.add_edge(one, two)
    graph.add_edge(two, three)
    assert graph_to_dot(graph) == RESULT


def test_empty_graph():
    assert graph_to_dot(ForceGraph()) == "graph {\n}\n"


def test_indices_are_renumbered_after_removal():
    graph = ForceGraph()
    a = graph.add_force_node("a")
    b = graph.add_force_node("b")
    c = graph.add_force_node("c")
    graph.add_edge(b, c)
    graph.remove_node(a)
    assert graph_to_dot(graph) == (
        "graph {\n"
        '    0 [ label = "b" ]\n'
        '    1 [ label = "c" ]\n'
        "    0 -- 1 [ ]\n"
        "}\n"
    )


def test_duplicate_names_use_last_node():
    graph = ForceGraph()
    first = graph.add_force_node("x")
    graph.add_force_node("x")
    other = graph.add_force_node("y")
    graph.add_edge(first, other)
    output = graph_to_dot(graph)
    assert "    1 -- 2 [ ]\n" in output
    assert output.count('label = "x"') == 2


def test_error_message():
    error = DotParseError("ghost")
    assert str(error) == "Index for ghost was not found in the graph"
    assert error.name == "ghost"
    with pytest.raises(ValueError):
        raise error
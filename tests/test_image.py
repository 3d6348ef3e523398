import random
import re

import pytest

from forcegraph.force import fruchterman_reingold_weighted
from forcegraph.graph import ForceGraph
from forcegraph.image import RGBAColor, Settings, TextStyle, gen_image
from forcegraph.simulation import SimulationParameters
from forcegraph.vector import Vec3


def _pyramid():
    graph = ForceGraph()
    one = graph.add_force_node("one")
    two = graph.add_force_node("two")
    three = graph.add_force_node("three")
    four = graph.add_force_node("four")
    center = graph.add_force_node("center")
    for a, b in [(one, two), (two, three), (three, four), (four, one)]:
        graph.add_edge(a, b)
    for other in (one, two, three, four):
        graph.add_edge(center, other)
    return graph


def _size(svg):
    match = re.match(r'<svg width="(\d+)" height="(\d+)"', svg)
    assert match is not None
    return int(match.group(1)), int(match.group(2))


def _settings(**kwargs):
    kwargs.setdefault("iterations", 30)
    kwargs.setdefault("rng", random.Random(3))
    return Settings(**kwargs)


def test_color_hex():
    assert RGBAColor(255, 0, 0).to_svg() == "#FF0000"


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        RGBAColor(256, 0, 0)


def test_text_style_rejects_bad_anchor():
    with pytest.raises(ValueError):
        TextStyle(h_pos="middle")


def test_text_width_grows_with_text():
    style = TextStyle()
    assert style.text_width("") == 0
    assert style.text_width("abcd") == 2 * style.text_width("ab")


def test_svg_shape_counts():
    graph = _pyramid()
    svg = gen_image(graph, _settings())
    assert svg.startswith("<svg ")
    assert svg.endswith("</svg>\n")
    assert svg.count("<circle") == graph.node_count()
    assert svg.count("<polyline") == graph.edge_count()
    assert svg.count("<text") == 0


def test_colors_used():
    settings = _settings(
        node_color=RGBAColor(100, 100, 100), edge_color=RGBAColor(150, 150, 150)
    )
    svg = gen_image(_pyramid(), settings)
    assert f'fill="{settings.node_color.to_svg()}"' in svg
    assert f'stroke="{settings.edge_color.to_svg()}"' in svg
    assert f'fill="{settings.background_color.to_svg()}"' in svg


def test_nodes_centred_in_image():
    svg = gen_image(_pyramid(), _settings())
    width, height = _size(svg)
    xs = [int(x) for x in re.findall(r'<circle cx="(-?\d+)"', svg)]
    ys = [int(y) for y in re.findall(r'cy="(-?\d+)"', svg)]
    assert abs(sum(xs) / len(xs) - width // 2) <= 1
    assert abs(sum(ys) / len(ys) - height // 2) <= 1


def test_deterministic_with_seed():
    first = gen_image(_pyramid(), _settings(rng=random.Random(11)))
    second = gen_image(_pyramid(), _settings(rng=random.Random(11)))
    assert first == second


def test_input_graph_untouched():
    graph = _pyramid()
    gen_image(graph, _settings())
    assert all(node.location == Vec3.ZERO for node in graph.nodes())


def test_text_written_and_escaped():
    graph = ForceGraph()
    a = graph.add_force_node("a<b")
    b = graph.add_force_node("plain")
    graph.add_edge(a, b)
    svg = gen_image(graph, _settings(text_style=TextStyle()))
    assert svg.count("<text") == 2
    assert ">a&lt;b</text>" in svg
    assert ">plain</text>" in svg


def test_text_widens_image():
    graph = ForceGraph()
    graph.add_force_node("a rather long node name")
    graph.add_force_node("another long node name")
    plain = gen_image(graph, _settings(rng=random.Random(5)))
    labelled = gen_image(graph, _settings(rng=random.Random(5), text_style=TextStyle()))
    assert _size(labelled)[0] > _size(plain)[0]
    assert _size(labelled)[1] == _size(plain)[1]


def test_empty_graph():
    svg = gen_image(ForceGraph(), _settings())
    assert svg.count("<circle") == 0
    assert svg.count("<polyline") == 0
    width, height = _size(svg)
    assert width == height


def test_progress_printed(capsys):
    gen_image(_pyramid(), _settings(iterations=20, print_progress=True))
    assert capsys.readouterr().out == "0/20\n10/20\n"


def test_weighted_force():
    graph = ForceGraph()
    root = graph.add_force_node("")
    left = graph.add_force_node("")
    right = graph.add_force_node("")
    graph.add_edge(root, left, 1.0)
    graph.add_edge(root, right, 0.25)
    settings = _settings(
        sim_parameters=SimulationParameters.from_force(
            fruchterman_reingold_weighted(45.0, 0.975)
        )
    )
    svg = gen_image(graph, settings)
    assert svg.count("<circle") == 3
    assert svg.count("<polyline") == 2


def test_default_settings_values():
    settings = Settings()
    assert settings.iterations == 2000
    assert settings.dt == 0.035
    assert settings.text_style is None
    assert settings.edge_color == RGBAColor(255, 0, 0, 1.0)
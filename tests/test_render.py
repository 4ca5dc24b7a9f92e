from __future__ import annotations

from relmap.config import Canvas, LayoutOptions
from relmap.model import Edge, Graph, Node
from relmap.render import build_render_plan, render_svg, render_tikz, render_tikz_document


def _graph() -> Graph:
    return Graph(
        nodes=[
            Node('A', category='location', name='Port & Bay', x=100.0, y=50.0, color='#ff8800', size=6),
            Node('B', category='region', name=None, x=300.0, y=200.0),
            Node('C', category='world', name='Ring_World', x=500.0, y=400.0, color='teal'),
        ],
        edges=[Edge('A', 'B', 0.4), Edge('B', 'Ghost', 0.2), Edge('C', 'A')],
    )


def test_render_plan_skips_dangling_edges():
    plan = build_render_plan(_graph(), LayoutOptions())

    assert plan.skipped_edges == 1
    assert [(s.from_id, s.to_id) for s in plan.segments] == [('A', 'B'), ('C', 'A')]
    assert plan.segments[0].start == (100.0, 50.0)
    assert plan.segments[0].end == (300.0, 200.0)


def test_render_plan_node_styles():
    plan = build_render_plan(_graph(), LayoutOptions(default_node_size=8))

    a, b, c = plan.nodes
    assert (a.radius, a.opacity, a.fill, a.label) == (6.0, 1.0, '#ff8800', 'Port & Bay')
    assert (b.radius, b.opacity, b.fill, b.label) == (8.0, 0.5, None, None)
    assert a.label_anchor == (108.0, 42.0)
    assert c.opacity == 0.5


def test_svg_output():
    svg = render_svg(build_render_plan(_graph()), Canvas(800, 600, 24))

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" width="800" height="600" viewBox="0 0 800 600">')
    assert '<g class="map-content">' in svg
    assert svg.count('<line ') == 2
    assert svg.count('<circle ') == 3
    assert svg.count('<text ') == 2
    assert 'Port &amp; Bay' in svg
    assert '<line x1="100" y1="50" x2="300" y2="200"' in svg
    assert 'fill="#ff8800"' in svg
    assert 'var(--interactive-accent' in svg
    # edges are drawn below nodes
    assert svg.rindex('<line ') < svg.index('<circle ')


def test_tikz_output():
    tikz = render_tikz(build_render_plan(_graph()), Canvas(800, 600, 24))

    assert '\\definecolor{mapcolor0}{HTML}{FF8800}' in tikz
    assert '\\begin{tikzpicture}[x=0.75pt, y=-0.75pt]' in tikz
    assert '\\draw[pathway] (100, 50) -- (300, 200);' in tikz
    assert '\\fill[mapcolor0, opacity=1] (100, 50) circle[radius=6];' in tikz
    assert '\\fill[mapaccent, opacity=0.5] (300, 200) circle[radius=10];' in tikz
    assert '\\fill[teal, opacity=0.5]' in tikz
    assert 'Port \\& Bay' in tikz
    assert 'Ring\\_World' in tikz
    assert tikz.count('\\draw[pathway]') == 2


def test_tikz_document_wraps_picture():
    document = render_tikz_document(build_render_plan(_graph()))

    assert document.startswith('\\documentclass[border=2pt]{standalone}')
    assert 'pathway/.style={draw=mapmuted, line width=1.125pt}' in document
    assert '\\begin{tikzpicture}' in document
    assert document.rstrip().endswith('\\end{document}')


def test_empty_plan_renders():
    plan = build_render_plan(Graph())
    assert '<circle' not in render_svg(plan)
    assert '\\fill' not in render_tikz(plan)


def test_non_positive_size_falls_back_to_default():
    graph = Graph(nodes=[Node('A', x=10.0, y=10.0, size=-3), Node('B', x=20.0, y=20.0, size=0)])

    plan = build_render_plan(graph, LayoutOptions(default_node_size=7))

    assert [n.radius for n in plan.nodes] == [7.0, 7.0]
    assert 'r="-3"' not in render_svg(plan, Canvas(100, 100, 5))

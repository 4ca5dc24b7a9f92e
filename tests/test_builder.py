import math

import pytest

from relmap.builder import build_graph, build_graph_from_records, edges_from_record, node_from_record
from relmap.config import LayoutOptions
from relmap.records import InMemoryRecordSource, Record


def _source(data):
    return InMemoryRecordSource([Record.from_raw(record_id, attrs) for record_id, attrs in data])


def test_builds_nodes_with_defaults_and_attributes():
    source = _source(
        [
            ('places/Harbor.md', {'type': 'region', 'name': 'The Harbor', 'color': '#ff0000', 'size': 14}),
            ('places/Mill.md', {}),
        ]
    )

    graph = build_graph(source)

    harbor, mill = graph.nodes
    assert harbor.id == 'places/Harbor.md'
    assert harbor.category == 'region'
    assert harbor.name == 'The Harbor'
    assert harbor.color == '#ff0000'
    assert harbor.size == 14.0
    assert mill.category == 'location'
    assert mill.name == 'Mill'
    assert mill.color is None and mill.size is None
    assert math.isnan(mill.x) and math.isnan(mill.y)
    assert graph.edges == []


def test_unknown_category_and_non_numeric_size_fall_back():
    graph = build_graph(_source([('A', {'type': 'galaxy', 'size': 'big', 'color': 3})]))

    node = graph.nodes[0]
    assert node.category == 'location'
    assert node.size is None
    assert node.color is None


def test_records_without_identity_are_skipped():
    records = [Record.from_raw(None, {'distances': ['B']}), Record.from_raw('', {}), Record.from_raw('B', {})]

    graph = build_graph_from_records(records)

    assert [node.id for node in graph.nodes] == ['B']
    assert graph.edges == []


def test_edges_from_all_distance_keys_with_resolution():
    source = _source(
        [
            (
                'world/CityA.md',
                {
                    'distances': ['CityB @ 0.4', '[[CityC#50]]', 'Nowhere', 'bad @ 900', 42],
                    'pathways': [{'target': 'CityB', 'length': 20}],
                },
            ),
            ('world/CityB.md', {}),
            ('world/CityC.md', {'distances': 'CityA @ 0.3'}),
        ]
    )

    graph = build_graph(source)

    pairs = [(e.from_id, e.to_id, e.length) for e in graph.edges]
    assert pairs == [
        ('world/CityA.md', 'world/CityB.md', 0.4),
        ('world/CityA.md', 'world/CityC.md', 0.5),
        ('world/CityA.md', 'Nowhere', None),
        ('world/CityA.md', 'bad', None),
        ('world/CityA.md', 'world/CityB.md', 0.2),
    ]


def test_resolution_can_be_disabled():
    source = _source([('world/CityA.md', {'distances': ['CityB @ 0.4']}), ('world/CityB.md', {})])

    graph = build_graph(source, LayoutOptions(resolve_links=False))

    assert graph.edges[0].to_id == 'CityB'


def test_custom_keys():
    options = LayoutOptions(distances_keys=('roads',), type_key='kind', name_key='title', size_key='r', color_key='c')
    source = _source([('A', {'kind': 'World', 'title': 'Earth', 'r': 3, 'c': 'blue', 'roads': ['B'], 'distances': ['C']})])

    graph = build_graph(source, options)

    node = graph.nodes[0]
    assert (node.category, node.name, node.size, node.color) == ('world', 'Earth', 3.0, 'blue')
    assert [e.to_id for e in graph.edges] == ['B']


def test_resolver_failure_keeps_literal_target():
    class FailingSource:
        def records(self):
            return [Record.from_raw('A', {'distances': ['B @ 0.5']})]

        def resolve(self, raw_target, from_id):
            raise RuntimeError('store offline')

    graph = build_graph(FailingSource())

    assert graph.edges[0].to_id == 'B'
    assert graph.edges[0].length == pytest.approx(0.5)


def test_duplicate_ids_keep_last_node():
    records = [Record.from_raw('A', {'name': 'first'}), Record.from_raw('B', {}), Record.from_raw('A', {'name': 'second'})]

    graph = build_graph_from_records(records)

    assert [node.id for node in graph.nodes] == ['A', 'B']
    assert graph.nodes[0].name == 'second'


def test_empty_source():
    graph = build_graph(_source([]))
    assert graph.nodes == [] and graph.edges == []


@pytest.mark.parametrize('build', [node_from_record, edges_from_record])
def test_single_record_helpers_require_an_id(build):
    with pytest.raises(ValueError):
        build(Record.from_raw(None, {'distances': ['Harbor']}), LayoutOptions())

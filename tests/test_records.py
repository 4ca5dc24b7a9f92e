import json

import pytest

from relmap.attributes import AttributeValue
from relmap.records import InMemoryRecordSource, Record, RecordLoadError, load_records, records_from_json


def test_attribute_values_are_tagged_once():
    assert AttributeValue.from_raw(None).kind == 'none'
    assert AttributeValue.from_raw(True).kind == 'boolean'
    assert AttributeValue.from_raw(3).as_number() == 3.0
    assert AttributeValue.from_raw(float('nan')).is_none
    assert AttributeValue.from_raw('x').as_text() == 'x'
    assert AttributeValue.from_raw(['a', {'target': 'b'}]).items() == ('a', {'target': 'b'})
    assert AttributeValue.from_raw({'a': 1}).kind == 'mapping'
    assert AttributeValue.from_raw(True).as_number() is None
    assert AttributeValue.from_raw(12).as_text() == '12'
    assert AttributeValue.from_raw('x').items() == ()


def test_record_get_and_basename():
    record = Record.from_raw('notes/places/Old Town.md', {'size': 4})

    assert record.get('size').as_number() == 4.0
    assert record.get('missing').is_none
    assert record.basename == 'Old Town'
    assert Record.from_raw('Plain', {}).basename == 'Plain'
    assert Record.from_raw(None, {}).basename is None


def test_resolve_by_id_extension_and_basename():
    source = InMemoryRecordSource(
        [Record.from_raw('a/CityA.md'), Record.from_raw('CityB.md'), Record.from_raw('b/CityA.md')]
    )

    assert source.resolve('a/CityA.md', 'x') == 'a/CityA.md'
    assert source.resolve('CityB', 'x') == 'CityB.md'
    assert source.resolve('citya', 'x') == 'a/CityA.md'
    assert source.resolve('Nowhere', 'x') is None
    assert source.resolve('  ', 'x') is None
    assert len(source) == 3


def test_records_from_json_list_and_mapping():
    records = records_from_json(
        [
            {'path': 'A.md', 'frontmatter': {'type': 'world'}},
            {'id': 'B', 'attributes': {'distances': ['A']}},
            {'attributes': {}},
        ]
    )
    assert [r.id for r in records] == ['A.md', 'B', None]
    assert records[0].get('type').as_text() == 'world'

    records = records_from_json({'A': {'name': 'Alpha'}, 'B': None})
    assert [r.id for r in records] == ['A', 'B']
    assert records[1].attributes == {}


@pytest.mark.parametrize('data', ['text', 3, [1, 2], [{'id': 'A', 'attributes': []}], {'A': ['x']}])
def test_records_from_json_rejects_bad_shapes(data):
    with pytest.raises(RecordLoadError):
        records_from_json(data)


def test_load_records(tmp_path):
    path = tmp_path / 'records.json'
    path.write_text(json.dumps({'A': {'distances': ['B @ 0.5']}, 'B': {}}), encoding='utf-8')

    source = load_records(path)

    assert [r.id for r in source.records()] == ['A', 'B']


def test_load_records_invalid_json(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{not json', encoding='utf-8')

    with pytest.raises(RecordLoadError):
        load_records(path)


def test_resolve_basename_keeps_dotted_names():
    source = InMemoryRecordSource(
        [Record.from_raw('x/St. Ives.md'), Record.from_raw('docs/v1.2'), Record.from_raw('y/Notes.txt')]
    )

    assert source.resolve('st. ives', 'x') == 'x/St. Ives.md'
    assert source.resolve('St. Ives.md', 'x') == 'x/St. Ives.md'
    assert source.resolve('V1.2', 'x') == 'docs/v1.2'
    assert source.resolve('Notes.txt', 'x') == 'y/Notes.txt'
    assert source.resolve('Notes', 'x') is None

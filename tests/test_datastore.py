"""Tests for loading and validating the bundled datasets."""

import json
from pathlib import Path

import pytest

from annual_report.core import ReportDataError, ReportDataStore, get_report_data, init_report_data


def _write(path: Path, data) -> None:
    path.write_text(json.dumps(data), encoding='utf-8')


def test_bundled_data_loads() -> None:
    store = ReportDataStore()
    store.load_all()
    assert len(store.entities()) == 13
    assert store.metrics()['entities'] == 13
    assert store.comparison('elevate')['competitorName'] == 'Elevate Rapid City'
    assert store.comparison('bhb') is not None


def test_entity_ranges_are_ordered() -> None:
    for entity in ReportDataStore().entities():
        assert entity['revenueY1Floor'] <= entity['revenueY1Ceiling']
        assert entity['revenueY5Floor'] <= entity['revenueY5Ceiling']


def test_entity_breakdown_matches_entities() -> None:
    store = ReportDataStore()
    breakdown = {row['slug']: row for row in store.financials()['entityBreakdown']}
    assert set(breakdown) == set(store.entity_slugs())
    for entity in store.entities():
        assert breakdown[entity['slug']]['revenueY1Floor'] == entity['revenueY1Floor']


def test_lookup_helpers() -> None:
    store = ReportDataStore()
    assert store.entity('growwise')['name'] == 'FlowBot'
    assert store.entity('no-such-entity') is None
    assert store.entity_color('growwise') == '#22c55e'
    assert store.entity_color('no-such-entity') == '#6b7280'
    assert store.entity_color('no-such-entity', default='#000000') == '#000000'
    assert store.comparison('unknown') is None


def test_missing_file_raises(data_copy: Path) -> None:
    (data_copy / 'goals.json').unlink()
    with pytest.raises(ReportDataError, match='goals.json'):
        ReportDataStore(data_copy).load_all()


def test_invalid_json_raises(data_copy: Path) -> None:
    (data_copy / 'team.json').write_text('{"staff": 51,', encoding='utf-8')
    with pytest.raises(ReportDataError, match='Invalid JSON'):
        ReportDataStore(data_copy).team()


def test_wrong_top_level_type_raises(data_copy: Path) -> None:
    _write(data_copy / 'entities.json', {'growwise': {}})
    with pytest.raises(ReportDataError, match='expected a JSON list'):
        ReportDataStore(data_copy).entities()


def test_entity_without_slug_raises(data_copy: Path) -> None:
    _write(data_copy / 'entities.json', [{'name': 'Nameless'}])
    with pytest.raises(ReportDataError, match='no slug'):
        ReportDataStore(data_copy).entities()


def test_duplicate_slug_raises(data_copy: Path) -> None:
    _write(data_copy / 'entities.json', [{'slug': 'bhc'}, {'slug': 'bhc'}])
    with pytest.raises(ReportDataError, match='duplicate slug'):
        ReportDataStore(data_copy).entities()


@pytest.mark.parametrize('key', ['name', 'revenueY1Floor', 'revenueY5Ceiling'])
def test_entity_missing_revenue_or_name_raises(data_copy: Path, key: str) -> None:
    path = data_copy / 'entities.json'
    entities = json.loads(path.read_text(encoding='utf-8'))
    del entities[0][key]
    _write(path, entities)

    with pytest.raises(ReportDataError, match=f'entity 0 missing keys {key}'):
        ReportDataStore(data_copy).load_all()


def test_goal_missing_target_raises(data_copy: Path) -> None:
    path = data_copy / 'goals.json'
    goals = json.loads(path.read_text(encoding='utf-8'))
    del goals[2]['target']
    _write(path, goals)

    with pytest.raises(ReportDataError, match='goal 2 missing keys target'):
        ReportDataStore(data_copy).goals()


def test_flywheel_records_need_ids_and_endpoints(data_copy: Path) -> None:
    path = data_copy / 'flywheel.json'
    flywheel = json.loads(path.read_text(encoding='utf-8'))
    del flywheel['connections'][1]['to']
    _write(path, flywheel)
    with pytest.raises(ReportDataError, match='connection 1 missing keys to'):
        ReportDataStore(data_copy).flywheel()

    _write(path, {'nodes': [{'label': 'FlowBot'}], 'connections': []})
    with pytest.raises(ReportDataError, match='node 0 missing keys id'):
        ReportDataStore(data_copy).flywheel()


def test_app_creation_fails_on_incomplete_entity(data_copy: Path) -> None:
    path = data_copy / 'entities.json'
    entities = json.loads(path.read_text(encoding='utf-8'))
    del entities[0]['revenueY1Floor']
    _write(path, entities)

    with pytest.raises(ReportDataError, match='revenueY1Floor'):
        init_report_data(data_copy)


def test_missing_required_key_raises(data_copy: Path) -> None:
    _write(data_copy / 'flywheel.json', {'nodes': []})
    with pytest.raises(ReportDataError, match='connections'):
        ReportDataStore(data_copy).flywheel()


def test_comparison_without_data_points_raises(data_copy: Path) -> None:
    _write(data_copy / 'comparison' / 'bhb.json', {'competitorName': 'X'})
    with pytest.raises(ReportDataError, match='dataPoints'):
        ReportDataStore(data_copy).load_all()


def test_init_report_data_replaces_shared_store_only_on_success(data_copy: Path) -> None:
    before = get_report_data()
    (data_copy / 'metrics.json').unlink()
    with pytest.raises(ReportDataError):
        init_report_data(data_copy)
    assert get_report_data() is before

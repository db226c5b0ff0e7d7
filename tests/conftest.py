"""Shared fixtures for the annual report tests."""

import shutil
from pathlib import Path

import pytest

from annual_report.config import TestingConfig
from annual_report.config.settings import PACKAGE_DIR
from annual_report.report_app import create_app

BUNDLED_DATA = Path(PACKAGE_DIR) / 'data'


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def data_copy(tmp_path: Path) -> Path:
    """A writable copy of the bundled datasets."""
    target = tmp_path / 'data'
    shutil.copytree(BUNDLED_DATA, target)
    return target


class StubStore:
    """Minimal stand-in for ReportDataStore, built from plain dicts."""

    def __init__(self, **datasets):
        self.datasets = datasets

    def entities(self):
        return self.datasets.get('entities', [])

    def entity(self, slug):
        for entity in self.entities():
            if entity['slug'] == slug:
                return entity
        return None

    def entity_slugs(self):
        return [entity['slug'] for entity in self.entities()]

    def entity_color(self, slug, default='#6b7280'):
        entity = self.entity(slug)
        return entity.get('color', default) if entity else default

    def metrics(self):
        return self.datasets['metrics']

    def goals(self):
        return self.datasets['goals']

    def flywheel(self):
        return self.datasets['flywheel']

    def financials(self):
        return self.datasets['financials']

    def investors(self):
        return self.datasets['investors']

    def team(self):
        return self.datasets['team']


@pytest.fixture
def stub_store(monkeypatch):
    """Patch a service module so it reads from a StubStore.

    Usage: stub_store(module, goals=[...])
    """
    def install(module, **datasets):
        store = StubStore(**datasets)
        monkeypatch.setattr(module, 'get_report_data', lambda: store)
        return store
    return install

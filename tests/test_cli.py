"""Tests for the annual-report command line."""

import json
from pathlib import Path

import pytest

from annual_report import cli
from annual_report.config import ReportConfig, TestingConfig
from annual_report.core import RemoteDataClient
from annual_report.report_app import create_app


def test_export_writes_every_page(tmp_path: Path) -> None:
    app = create_app(TestingConfig)
    written = cli.export_site(app, tmp_path / 'site')

    site = tmp_path / 'site'
    assert '/' in written
    assert (site / 'index.html').exists()
    assert (site / 'entities' / 'index.html').exists()
    assert (site / 'entity' / 'growwise' / 'index.html').exists()
    assert (site / 'compare' / 'bhb' / 'index.html').exists()
    assert (site / 'print' / 'index.html').exists()
    assert (site / 'static' / 'css' / 'report.css').exists()
    assert len(written) == 10 + 13


def test_main_export(tmp_path: Path) -> None:
    assert cli.main(['export', '--out', str(tmp_path)]) == 0
    assert (tmp_path / 'flywheel' / 'index.html').exists()


def test_main_export_with_bad_data_fails(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(ReportConfig, 'DATA_DIR', str(tmp_path / 'missing'))
    assert cli.main(['export', '--out', str(tmp_path / 'out')]) == 1


def test_remote_without_configuration(monkeypatch) -> None:
    monkeypatch.setattr(ReportConfig, 'SUPABASE_URL', '')
    monkeypatch.setattr(ReportConfig, 'SUPABASE_ANON_KEY', '')
    assert cli.main(['remote', 'totals']) == 1


def test_remote_entity_prints_json(monkeypatch, capsys) -> None:
    monkeypatch.setattr(ReportConfig, 'SUPABASE_URL', 'https://example.supabase.co')
    monkeypatch.setattr(ReportConfig, 'SUPABASE_ANON_KEY', 'anon-key')
    monkeypatch.setattr(RemoteDataClient, 'get_entity_detail', lambda self, slug: {'slug': slug})

    assert cli.main(['remote', 'entity', 'bhc']) == 0
    assert json.loads(capsys.readouterr().out) == {'slug': 'bhc'}


def test_remote_entity_requires_slug(monkeypatch) -> None:
    monkeypatch.setattr(ReportConfig, 'SUPABASE_URL', 'https://example.supabase.co')
    monkeypatch.setattr(ReportConfig, 'SUPABASE_ANON_KEY', 'anon-key')
    assert cli.main(['remote', 'entity']) == 2


def test_unknown_command_exits() -> None:
    with pytest.raises(SystemExit):
        cli.main(['publish'])

"""Tests for the hosted backend RPC client."""

import pytest
import requests

from annual_report.config import TestingConfig
from annual_report.core import RemoteConfigError, RemoteDataClient


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error', response=self)

    def json(self):
        return self.payload


class FakeSession:
    def __init__(self, response):
        self.response = response
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        return self.response


def test_get_entities_posts_to_rpc() -> None:
    session = FakeSession(FakeResponse([{'slug': 'growwise'}]))
    client = RemoteDataClient('https://example.supabase.co/', 'anon-key', timeout=5, session=session)

    assert client.get_entities() == [{'slug': 'growwise'}]

    url, kwargs = session.calls[0]
    assert url == 'https://example.supabase.co/rest/v1/rpc/get_v6_entities'
    assert kwargs['json'] == {}
    assert kwargs['headers']['apikey'] == 'anon-key'
    assert kwargs['headers']['Authorization'] == 'Bearer anon-key'
    assert kwargs['timeout'] == 5


def test_get_entity_detail_sends_slug() -> None:
    session = FakeSession(FakeResponse({'slug': 'bhc'}))
    client = RemoteDataClient('https://example.supabase.co', 'anon-key', session=session)

    assert client.get_entity_detail('bhc') == {'slug': 'bhc'}

    url, kwargs = session.calls[0]
    assert url.endswith('/rpc/get_v6_entity_detail')
    assert kwargs['json'] == {'p_slug': 'bhc'}


def test_get_ecosystem_totals_uses_session_post(monkeypatch) -> None:
    calls = []

    def fake_post(self, url, **kwargs):
        calls.append(url)
        return FakeResponse({'entities': 13})

    monkeypatch.setattr(requests.Session, 'post', fake_post)
    client = RemoteDataClient('https://example.supabase.co', 'anon-key')

    assert client.get_ecosystem_totals() == {'entities': 13}
    assert calls == ['https://example.supabase.co/rest/v1/rpc/get_v6_ecosystem_totals']


def test_http_errors_propagate() -> None:
    session = FakeSession(FakeResponse({'message': 'denied'}, status_code=401))
    client = RemoteDataClient('https://example.supabase.co', 'bad-key', session=session)

    with pytest.raises(requests.HTTPError):
        client.get_entities()


def test_connection_errors_propagate() -> None:
    class BrokenSession:
        def post(self, url, **kwargs):
            raise requests.ConnectionError('unreachable')

    client = RemoteDataClient('https://example.supabase.co', 'anon-key', session=BrokenSession())
    with pytest.raises(requests.ConnectionError):
        client.get_ecosystem_totals()


@pytest.mark.parametrize('url, key', [('', 'anon-key'), ('https://example.supabase.co', ''), (None, None)])
def test_missing_configuration_raises(url, key) -> None:
    with pytest.raises(RemoteConfigError):
        RemoteDataClient(url, key)


def test_from_config() -> None:
    config = {
        'SUPABASE_URL': TestingConfig.SUPABASE_URL,
        'SUPABASE_ANON_KEY': TestingConfig.SUPABASE_ANON_KEY,
        'REMOTE_TIMEOUT': 3,
    }
    client = RemoteDataClient.from_config(config)
    assert client.base_url == 'https://example.supabase.co'
    assert client.api_key == 'test-anon-key'
    assert client.timeout == 3

"""HTTP tests for every page and API route."""

import pytest

from annual_report.core import ReportDataStore

PAGES = [
    '/',
    '/entities',
    '/financials',
    '/compare',
    '/compare/bhb',
    '/flywheel',
    '/team',
    '/goals',
    '/investors',
    '/print',
]


@pytest.mark.parametrize('path', PAGES)
def test_page_renders(client, path: str) -> None:
    response = client.get(path)
    assert response.status_code == 200
    assert response.mimetype == 'text/html'
    assert b'<nav class="site-nav">' in response.data


@pytest.mark.parametrize('slug', ReportDataStore().entity_slugs())
def test_every_entity_page_renders(client, slug: str) -> None:
    response = client.get(f'/entity/{slug}')
    assert response.status_code == 200
    assert b'Five-Year Projection' in response.data


def test_unknown_entity_is_404(client) -> None:
    response = client.get('/entity/no-such-thing')
    assert response.status_code == 404
    assert b'No Such Thing' in response.data


def test_unknown_page_is_404_html(client) -> None:
    response = client.get('/annual-report-2019')
    assert response.status_code == 404
    assert b'Page not found' in response.data


def test_layout_has_nav_and_footer_groups(client) -> None:
    html = client.get('/').get_data(as_text=True)
    for label in ('Entities', 'Financials', 'Compare', 'Flywheel', 'Team', 'Goals', 'Investors'):
        assert f'>{label}</a>' in html
    for heading in ('Technology', 'Community', 'Real Estate', 'Education &amp; Media'):
        assert f'<h4>{heading}</h4>' in html
    assert '/entity/seed-academy' in html


def test_home_shows_hero_and_entities_in_data_order(client) -> None:
    html = client.get('/').get_data(as_text=True)
    assert '$52M Capital Raise' in html
    assert '$71.59M' in html
    assert html.index('FlowBot') < html.index('Grow Campus')


def test_entity_page_content(client) -> None:
    html = client.get('/entity/growwise').get_data(as_text=True)
    assert 'FlowBot Platform' in html
    assert 'data-countup' in html
    assert '<svg' in html
    assert 'Related Entities' in html


def test_flywheel_page_draws_connections(client) -> None:
    html = client.get('/flywheel').get_data(as_text=True)
    assert html.count('class="flywheel-connection"') == 11
    assert 'stroke-dasharray="6 4"' in html


def test_print_page_totals(client) -> None:
    html = client.get('/print').get_data(as_text=True)
    assert '$71.59M' in html
    assert 'Top Entities by Year 1 Floor' in html


def test_api_entities(client) -> None:
    response = client.get('/api/entities')
    assert response.status_code == 200
    cards = response.get_json()
    assert len(cards) == 13
    assert cards[0]['slug'] == 'growwise'


def test_api_entity_detail_and_404(client) -> None:
    detail = client.get('/api/entities/bhc').get_json()
    assert detail['entity']['name'] == 'Black Hills Consortium'
    assert len(detail['projection']) == 5

    response = client.get('/api/entities/nope')
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_api_compare(client) -> None:
    assert client.get('/api/compare/bhb').get_json()['short_name'] == 'BH&B'
    response = client.get('/api/compare/nope')
    assert response.status_code == 404
    assert response.get_json() == {'error': 'Comparison not found: nope'}


@pytest.mark.parametrize('path, key', [
    ('/api/overview', 'key_metrics'),
    ('/api/financials', 'bar_chart'),
    ('/api/flywheel', 'connections'),
    ('/api/team', 'departments'),
    ('/api/goals', 'summary'),
    ('/api/investors', 'use_of_funds'),
])
def test_api_endpoints(client, path: str, key: str) -> None:
    response = client.get(path)
    assert response.status_code == 200
    assert key in response.get_json()


def test_unknown_api_path_returns_json_404(client) -> None:
    response = client.get('/api/nothing-here')
    assert response.status_code == 404
    assert response.get_json()['path'] == '/api/nothing-here'


def test_health(client) -> None:
    assert client.get('/health').get_json() == {
        'status': 'ok',
        'entities': 13,
        'goals': 9,
        'flywheel_nodes': 8,
    }


def test_api_index_lists_components(client) -> None:
    components = client.get('/api').get_json()['components']
    assert set(components) == {
        'home', 'entities', 'financials', 'compare', 'flywheel', 'team', 'goals', 'investors', 'print_report',
    }
    assert '/entity/growwise' in components['entities']

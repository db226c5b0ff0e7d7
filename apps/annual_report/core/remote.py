"""
Remote data access
Read-only calls against the hosted backend's RPC interface
"""
import logging

import requests

logger = logging.getLogger(__name__)


class RemoteConfigError(Exception):
    """Raised when the remote backend is not configured"""


class RemoteDataClient:
    """Client for the hosted backend's stored procedures

    Errors from the backend call are propagated unmodified: connection
    problems surface as requests exceptions and non-2xx responses as
    requests.HTTPError.
    """

    def __init__(self, base_url, api_key, timeout=10, session=None):
        if not base_url or not api_key:
            raise RemoteConfigError('Remote backend URL and API key are required')
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config):
        """Build a client from a Flask config mapping"""
        return cls(
            config.get('SUPABASE_URL'),
            config.get('SUPABASE_ANON_KEY'),
            timeout=config.get('REMOTE_TIMEOUT', 10),
        )

    def _rpc(self, function_name, params=None):
        """Call a stored procedure and return its decoded JSON result"""
        url = f'{self.base_url}/rest/v1/rpc/{function_name}'
        headers = {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
        }
        logger.debug('Calling remote procedure %s', function_name)
        response = self.session.post(url, json=params or {}, headers=headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_entities(self):
        """Fetch the entity list"""
        return self._rpc('get_v6_entities')

    def get_entity_detail(self, slug):
        """Fetch a single entity's detail"""
        return self._rpc('get_v6_entity_detail', {'p_slug': slug})

    def get_ecosystem_totals(self):
        """Fetch ecosystem-wide totals"""
        return self._rpc('get_v6_ecosystem_totals')

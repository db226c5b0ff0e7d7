"""
Report data store
Loads the bundled JSON datasets once and serves them read-only
"""
import json
import logging
from pathlib import Path

from ..config.settings import ReportConfig

logger = logging.getLogger(__name__)


class ReportDataError(Exception):
    """Raised when a dataset is missing or malformed"""


# dataset name -> (file, expected top-level type)
DATASETS = {
    'entities': ('entities.json', list),
    'metrics': ('metrics.json', dict),
    'financials': ('financials.json', dict),
    'flywheel': ('flywheel.json', dict),
    'goals': ('goals.json', list),
    'investors': ('investors.json', dict),
    'team': ('team.json', dict),
}

REQUIRED_KEYS = {
    'financials': ('aggregate', 'pricing', 'entityBreakdown'),
    'flywheel': ('nodes', 'connections'),
    'investors': ('capitalRaise', 'thesis', 'useOfFunds', 'tiers', 'returnProjections'),
    'team': ('staff', 'aiEquivalent', 'departments', 'benefits', 'fullyLoadedCosts'),
}

# keys every record of a dataset must carry
ENTITY_KEYS = (
    'name', 'category', 'revenueY1Floor', 'revenueY1Ceiling', 'revenueY5Floor', 'revenueY5Ceiling',
)
GOAL_KEYS = ('label', 'current', 'target')
FLYWHEEL_NODE_KEYS = ('id', 'label')
FLYWHEEL_CONNECTION_KEYS = ('from', 'to', 'label')


def _check_records(filename, records, required, label):
    if not isinstance(records, list):
        raise ReportDataError(f'{filename}: {label}s must be a list')
    for i, record in enumerate(records):
        if not isinstance(record, dict):
            raise ReportDataError(f'{filename}: {label} {i} is not an object')
        missing = [key for key in required if key not in record]
        if missing:
            raise ReportDataError(f"{filename}: {label} {i} missing keys {', '.join(missing)}")


class ReportDataStore:
    """Read-only access to the report datasets"""

    def __init__(self, data_dir=None):
        self.data_dir = Path(data_dir or ReportConfig.DATA_DIR)
        self._cache = {}

    def _read_json(self, relative_path):
        path = self.data_dir / relative_path
        if not path.exists():
            raise ReportDataError(f'Dataset not found: {path}')
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ReportDataError(f'Invalid JSON in {path}: {e}') from e

    def _dataset(self, name):
        if name in self._cache:
            return self._cache[name]

        filename, expected_type = DATASETS[name]
        data = self._read_json(filename)
        if not isinstance(data, expected_type):
            raise ReportDataError(
                f'{filename}: expected a JSON {expected_type.__name__}, got {type(data).__name__}'
            )
        missing = [key for key in REQUIRED_KEYS.get(name, ()) if key not in data]
        if missing:
            raise ReportDataError(f"{filename}: missing keys {', '.join(missing)}")
        if name == 'entities':
            self._check_entities(data)
        elif name == 'goals':
            _check_records(filename, data, GOAL_KEYS, 'goal')
        elif name == 'flywheel':
            _check_records(filename, data['nodes'], FLYWHEEL_NODE_KEYS, 'node')
            _check_records(filename, data['connections'], FLYWHEEL_CONNECTION_KEYS, 'connection')

        logger.debug('Loaded %s from %s', name, filename)
        self._cache[name] = data
        return data

    @staticmethod
    def _check_entities(entities):
        seen = set()
        for i, entity in enumerate(entities):
            slug = entity.get('slug') if isinstance(entity, dict) else None
            if not slug:
                raise ReportDataError(f'entities.json: entry {i} has no slug')
            if slug in seen:
                raise ReportDataError(f'entities.json: duplicate slug {slug!r}')
            seen.add(slug)
        _check_records('entities.json', entities, ENTITY_KEYS, 'entity')

    def load_all(self):
        """Load every dataset, failing fast on the first bad one"""
        for name in DATASETS:
            self._dataset(name)
        for key in ReportConfig.COMPARISONS:
            self.comparison(key)
        logger.info('Loaded %d datasets from %s', len(self._cache), self.data_dir)

    def entities(self):
        return self._dataset('entities')

    def entity(self, slug):
        """Get one entity by slug, or None when unknown"""
        for entity in self.entities():
            if entity['slug'] == slug:
                return entity
        return None

    def entity_slugs(self):
        return [entity['slug'] for entity in self.entities()]

    def entity_color(self, slug, default=ReportConfig.FALLBACK_COLOR):
        entity = self.entity(slug)
        return entity.get('color', default) if entity else default

    def metrics(self):
        return self._dataset('metrics')

    def financials(self):
        return self._dataset('financials')

    def flywheel(self):
        return self._dataset('flywheel')

    def goals(self):
        return self._dataset('goals')

    def investors(self):
        return self._dataset('investors')

    def team(self):
        return self._dataset('team')

    def comparison(self, key):
        """Get a comparison dataset by key, or None when unknown"""
        config = ReportConfig.get_comparison_config(key)
        if not config:
            return None
        cache_key = f'comparison:{key}'
        if cache_key not in self._cache:
            data = self._read_json(config['file'])
            if not isinstance(data, dict) or 'dataPoints' not in data:
                raise ReportDataError(f"{config['file']}: missing dataPoints")
            self._cache[cache_key] = data
        return self._cache[cache_key]

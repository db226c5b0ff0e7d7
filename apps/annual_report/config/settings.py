"""
Annual report configuration settings
"""
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class ReportConfig:
    """Centralized configuration for the annual report site"""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'your-secret-key-here-change-in-production')
    TESTING = False

    # Rate limiting
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '100 per minute')
    RATELIMIT_ENABLED = True

    # Bundled datasets
    DATA_DIR = os.environ.get('REPORT_DATA_DIR', str(PACKAGE_DIR / 'data'))

    # Hosted backend (optional remote data access)
    SUPABASE_URL = os.environ.get('SUPABASE_URL', '')
    SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY', '')
    REMOTE_TIMEOUT = float(os.environ.get('REMOTE_TIMEOUT', '10'))

    # Server
    HOST = os.environ.get('REPORT_HOST', '0.0.0.0')
    PORT = int(os.environ.get('REPORT_PORT', '8081'))

    SITE_NAME = 'Black Hills Consortium'
    REPORT_TITLE = 'BHC Annual Report'
    REPORT_YEAR = 2026
    CONTACT_EMAIL = 'luke@bhconsortium.com'

    NAV_LINKS = [
        {'href': '/', 'label': 'Home'},
        {'href': '/entities', 'label': 'Entities'},
        {'href': '/financials', 'label': 'Financials'},
        {'href': '/compare', 'label': 'Compare'},
        {'href': '/flywheel', 'label': 'Flywheel'},
        {'href': '/team', 'label': 'Team'},
        {'href': '/goals', 'label': 'Goals'},
        {'href': '/investors', 'label': 'Investors'},
    ]

    # Footer columns: heading -> entity categories shown under it
    FOOTER_GROUPS = [
        {'title': 'Technology', 'categories': ['Technology']},
        {'title': 'Community', 'categories': ['Community']},
        {'title': 'Real Estate', 'categories': ['Real Estate']},
        {'title': 'Education & Media', 'categories': ['Education', 'Media']},
    ]

    COMPARISONS = {
        'elevate': {
            'file': 'comparison/elevate.json',
            'path': '/compare',
        },
        'bhb': {
            'file': 'comparison/bhb.json',
            'path': '/compare/bhb',
        },
    }
    DEFAULT_COMPARISON = 'elevate'

    FALLBACK_COLOR = '#6b7280'

    @classmethod
    def get_comparison_config(cls, key):
        """Get configuration for a specific comparison page"""
        return cls.COMPARISONS.get(key, {})


class TestingConfig(ReportConfig):
    """Configuration used by the test suite"""

    TESTING = True
    RATELIMIT_ENABLED = False
    SUPABASE_URL = 'https://example.supabase.co'
    SUPABASE_ANON_KEY = 'test-anon-key'

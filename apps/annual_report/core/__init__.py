"""
Core services for report components
"""
from .datastore import ReportDataStore, ReportDataError
from .remote import RemoteDataClient, RemoteConfigError

# Global state - shared across all components
_report_data = ReportDataStore()


def init_report_data(data_dir=None):
    """Replace the shared data store and load every dataset"""
    global _report_data
    store = ReportDataStore(data_dir)
    store.load_all()
    _report_data = store
    return store


def get_report_data():
    """Get the shared data store"""
    return _report_data


__all__ = [
    'ReportDataStore',
    'ReportDataError',
    'RemoteDataClient',
    'RemoteConfigError',
    'init_report_data',
    'get_report_data',
]

"""
Configuration for the annual report site
"""
from .settings import ReportConfig, TestingConfig

__all__ = ['ReportConfig', 'TestingConfig']

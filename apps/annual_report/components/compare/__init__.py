"""
Comparison Component
"""

from .routes import compare_bp, init_compare
from .service import ComparisonService

__all__ = ['compare_bp', 'init_compare', 'ComparisonService']

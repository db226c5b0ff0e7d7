"""
Home Component
Landing page of the annual report
"""

from .routes import home_bp, init_home
from .service import OverviewService

__all__ = ['home_bp', 'init_home', 'OverviewService']

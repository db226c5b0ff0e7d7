"""
Investors Component
"""

from .routes import investors_bp, init_investors
from .service import InvestorsService

__all__ = ['investors_bp', 'init_investors', 'InvestorsService']

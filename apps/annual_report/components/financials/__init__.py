"""
Financials Component
Complete financial overview of the ecosystem
"""

from .routes import financials_bp, init_financials
from .service import FinancialsService

__all__ = ['financials_bp', 'init_financials', 'FinancialsService']

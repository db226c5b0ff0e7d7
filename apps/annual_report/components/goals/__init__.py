"""
Goals Component
Tracks progress toward the five-year targets
"""

from .routes import goals_bp, init_goals
from .service import GoalsService

__all__ = ['goals_bp', 'init_goals', 'GoalsService']

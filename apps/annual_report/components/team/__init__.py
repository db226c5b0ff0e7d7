"""
Team Component
"""

from .routes import team_bp, init_team
from .service import TeamService

__all__ = ['team_bp', 'init_team', 'TeamService']

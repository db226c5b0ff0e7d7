"""
Flywheel Component
Interactive diagram of value flows between entities
"""

from .routes import flywheel_bp, init_flywheel
from .service import FlywheelService

__all__ = ['flywheel_bp', 'init_flywheel', 'FlywheelService']

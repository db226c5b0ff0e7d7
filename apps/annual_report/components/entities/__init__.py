"""
Entities Component
Ecosystem index and one page per entity
"""

from .routes import entities_bp, init_entities
from .service import EntitiesService

__all__ = ['entities_bp', 'init_entities', 'EntitiesService']

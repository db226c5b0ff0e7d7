"""
Entities Routes
Entity pages are static paths keyed by slug
"""
import logging

from flask import Blueprint, abort, jsonify, render_template
from ...core.formatting import title_from_slug
from .service import EntitiesService

logger = logging.getLogger(__name__)

# Create blueprint for entities
entities_bp = Blueprint(
    'entities',
    __name__,
    template_folder='templates'
)

# Initialize service
service = EntitiesService()


@entities_bp.route('/entities')
def entities_index():
    """Render the ecosystem index"""
    return render_template('entities_index.html', page_title='Entities', entities=service.get_entity_cards())


@entities_bp.route('/entity/<slug>')
def entity_page(slug):
    """Render a single entity page"""
    detail = service.get_entity_detail(slug)
    if detail is None:
        logger.info('Unknown entity requested: %s', slug)
        abort(404, description=f'There is no entity called {title_from_slug(slug)}.')

    return render_template(
        'entity_detail.html',
        page_title=detail['entity']['name'],
        projection_chart=service.get_projection_chart(detail),
        **detail
    )


@entities_bp.route('/api/entities')
def api_entities():
    """Get the entity cards"""
    return jsonify(service.get_entity_cards())


@entities_bp.route('/api/entities/<slug>')
def api_entity(slug):
    """Get one entity's page data"""
    detail = service.get_entity_detail(slug)
    if detail is None:
        return jsonify({'error': f'Entity not found: {slug}'}), 404
    return jsonify(detail)


def init_entities(app):
    """Initialize entities component with Flask app"""
    app.register_blueprint(entities_bp)
    return entities_bp

"""
Site-wide routes for the annual report
"""
import logging

from flask import Blueprint, jsonify, render_template, request

from ..components import registry
from ..core import get_report_data

logger = logging.getLogger(__name__)

# Create main blueprint
main_bp = Blueprint('main', __name__)


def _wants_json():
    return request.path.startswith('/api/')


@main_bp.route('/health')
def health():
    """Liveness check with dataset counts"""
    store = get_report_data()
    return jsonify({
        'status': 'ok',
        'entities': len(store.entities()),
        'goals': len(store.goals()),
        'flywheel_nodes': len(store.flywheel()['nodes']),
    })


@main_bp.route('/api')
def api_index():
    """List registered components and their pages"""
    return jsonify({'components': registry.page_map()})


@main_bp.app_errorhandler(404)
def not_found(error):
    if _wants_json():
        return jsonify({'error': 'Not found', 'path': request.path}), 404
    return render_template('404.html', page_title='Page Not Found', error=error), 404


@main_bp.app_errorhandler(500)
def server_error(error):
    logger.exception('Unhandled error serving %s', request.path)
    if _wants_json():
        return jsonify({'error': 'Internal server error'}), 500
    return render_template('500.html', page_title='Server Error'), 500

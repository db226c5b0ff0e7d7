"""
Comparison Routes
"""

from flask import Blueprint, abort, jsonify, render_template
from ...config.settings import ReportConfig
from .service import ComparisonService

# Create blueprint for comparisons
compare_bp = Blueprint(
    'compare',
    __name__,
    template_folder='templates'
)

# Initialize service
service = ComparisonService()


def _render(key):
    page_data = service.get_page_data(key)
    if page_data is None:
        abort(404)
    return render_template(
        'comparison.html',
        page_title=f"BHC vs {page_data['competitor_name']}",
        **page_data
    )


@compare_bp.route('/compare')
def compare_default():
    """Render the default comparison"""
    return _render(ReportConfig.DEFAULT_COMPARISON)


@compare_bp.route('/compare/bhb')
def compare_bhb():
    """Render the Black Hills & Badlands comparison"""
    return _render('bhb')


@compare_bp.route('/api/compare/<key>')
def api_compare(key):
    """Get a comparison's shaped data"""
    page_data = service.get_page_data(key)
    if page_data is None:
        return jsonify({'error': f'Comparison not found: {key}'}), 404
    return jsonify(page_data)


def init_compare(app):
    """Initialize comparison component with Flask app"""
    app.register_blueprint(compare_bp)
    return compare_bp

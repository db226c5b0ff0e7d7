"""
Overview Routes
"""

from flask import Blueprint, jsonify, render_template
from .service import OverviewService

# Create blueprint for the home page
home_bp = Blueprint(
    'home',
    __name__,
    template_folder='templates'
)

# Initialize service
service = OverviewService()


@home_bp.route('/')
def home_page():
    """Render the report home page"""
    return render_template('home.html', **service.get_page_data())


@home_bp.route('/api/overview')
def api_overview():
    """Get the home page data"""
    return jsonify(service.get_page_data())


def init_home(app):
    """Initialize home component with Flask app"""
    app.register_blueprint(home_bp)
    return home_bp

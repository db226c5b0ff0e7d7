"""
Flywheel Routes
"""

from flask import Blueprint, jsonify, render_template
from .service import FlywheelService

# Create blueprint for the flywheel diagram
flywheel_bp = Blueprint(
    'flywheel',
    __name__,
    template_folder='templates'
)

# Initialize service
service = FlywheelService()


@flywheel_bp.route('/flywheel')
def flywheel_page():
    """Render the flywheel diagram page"""
    return render_template('flywheel.html', page_title='The Perpetual Flywheel', **service.get_page_data())


@flywheel_bp.route('/api/flywheel')
def api_flywheel():
    """Get node positions and connection paths"""
    return jsonify(service.get_page_data())


def init_flywheel(app):
    """Initialize flywheel component with Flask app"""
    app.register_blueprint(flywheel_bp)
    return flywheel_bp

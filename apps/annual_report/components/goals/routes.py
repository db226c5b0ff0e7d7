"""
Goals Routes
"""

from flask import Blueprint, jsonify, render_template
from .service import GoalsService

# Create blueprint for goals
goals_bp = Blueprint(
    'goals',
    __name__,
    template_folder='templates'
)

# Initialize service
service = GoalsService()


@goals_bp.route('/goals')
def goals_page():
    """Render the goals & milestones page"""
    return render_template('goals.html', page_title='Goals & Milestones', **service.get_page_data())


@goals_bp.route('/api/goals')
def api_goals():
    """Get goals with progress, summary and category breakdown"""
    return jsonify(service.get_page_data())


def init_goals(app):
    """Initialize goals component with Flask app"""
    app.register_blueprint(goals_bp)
    return goals_bp

"""
Team Routes
"""

from flask import Blueprint, jsonify, render_template
from .service import TeamService

# Create blueprint for the team page
team_bp = Blueprint(
    'team',
    __name__,
    template_folder='templates'
)

# Initialize service
service = TeamService()


@team_bp.route('/team')
def team_page():
    """Render the team page"""
    page_data = service.get_page_data()
    return render_template(
        'team.html',
        page_title='Our Team',
        department_chart=service.get_department_chart(page_data['departments']),
        **page_data
    )


@team_bp.route('/api/team')
def api_team():
    """Get the shaped team data"""
    return jsonify(service.get_page_data())


def init_team(app):
    """Initialize team component with Flask app"""
    app.register_blueprint(team_bp)
    return team_bp

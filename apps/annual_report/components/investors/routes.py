"""
Investors Routes
"""

from flask import Blueprint, jsonify, render_template
from .service import InvestorsService

# Create blueprint for the investors page
investors_bp = Blueprint(
    'investors',
    __name__,
    template_folder='templates'
)

# Initialize service
service = InvestorsService()


@investors_bp.route('/investors')
def investors_page():
    """Render the investment opportunity page"""
    page_data = service.get_page_data()
    return render_template(
        'investors.html',
        page_title='Investment Opportunity',
        funds_chart=service.get_funds_chart(page_data['use_of_funds'], page_data['capital_raise_display']),
        **page_data
    )


@investors_bp.route('/api/investors')
def api_investors():
    """Get the shaped investor data"""
    return jsonify(service.get_page_data())


def init_investors(app):
    """Initialize investors component with Flask app"""
    app.register_blueprint(investors_bp)
    return investors_bp

"""
Financials Routes
"""

from flask import Blueprint, jsonify, render_template
from .service import FinancialsService

# Create blueprint for financials
financials_bp = Blueprint(
    'financials',
    __name__,
    template_folder='templates'
)

# Initialize service
service = FinancialsService()


@financials_bp.route('/financials')
def financials_page():
    """Render the financial breakdown page"""
    page_data = service.get_page_data()
    return render_template(
        'financials.html',
        page_title='Financial Breakdown',
        charts=service.get_charts(page_data),
        **page_data
    )


@financials_bp.route('/api/financials')
def api_financials():
    """Get the shaped financials data"""
    return jsonify(service.get_page_data())


def init_financials(app):
    """Initialize financials component with Flask app"""
    app.register_blueprint(financials_bp)
    return financials_bp

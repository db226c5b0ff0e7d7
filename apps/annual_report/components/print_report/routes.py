"""
Print Report Routes
"""

from flask import Blueprint, render_template
from .service import PrintReportService

# Create blueprint for the printable report
print_report_bp = Blueprint(
    'print_report',
    __name__,
    template_folder='templates'
)

# Initialize service
service = PrintReportService()


@print_report_bp.route('/print')
def print_page():
    """Render the printer-friendly report"""
    return render_template('print_report.html', page_title='Print Report', **service.get_page_data())


def init_print_report(app):
    """Initialize print report component with Flask app"""
    app.register_blueprint(print_report_bp)
    return print_report_bp

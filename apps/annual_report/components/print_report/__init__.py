"""
Print Report Component
"""

from .routes import print_report_bp, init_print_report
from .service import PrintReportService

__all__ = ['print_report_bp', 'init_print_report', 'PrintReportService']

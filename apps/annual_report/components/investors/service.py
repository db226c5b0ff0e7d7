"""
Investors Service
Capital raise, thesis, use of funds and investment tiers
"""

from ...core import get_report_data
from ...core.charts import svg_donut
from ...core.formatting import format_currency, format_range
from .. import register_component

FUND_COLORS = ['#22c55e', '#3b82f6', '#a855f7', '#f97316', '#6366f1']


@register_component('investors')
class InvestorsService:
    """Service for the Investors page"""

    def static_paths(self):
        return ['/investors']

    def get_thesis(self):
        """Thesis points; an odd last point spans the full row"""
        thesis = get_report_data().investors()['thesis']
        odd = len(thesis) % 2 != 0
        return [
            {'text': point, 'full_width': odd and i == len(thesis) - 1}
            for i, point in enumerate(thesis)
        ]

    def get_use_of_funds(self):
        funds = get_report_data().investors()['useOfFunds']
        return [
            dict(
                item,
                color=FUND_COLORS[i % len(FUND_COLORS)],
                amount_display=format_currency(item['amount']),
            )
            for i, item in enumerate(funds)
        ]

    def get_return_projections(self):
        projections = get_report_data().investors()['returnProjections']
        return {
            'valuation_y1': format_range(projections['valuationY1Low'], projections['valuationY1High']),
            'valuation_y5': format_range(projections['valuationY5Low'], projections['valuationY5High']),
            'revenue_multiple': projections.get('revenueMultiple', ''),
        }

    def get_page_data(self):
        investors = get_report_data().investors()
        return {
            'capital_raise': investors['capitalRaise'],
            'capital_raise_display': format_currency(investors['capitalRaise']),
            'thesis': self.get_thesis(),
            'use_of_funds': self.get_use_of_funds(),
            'tiers': investors['tiers'],
            'returns': self.get_return_projections(),
        }

    def get_funds_chart(self, use_of_funds, capital_raise_display):
        return svg_donut(
            [(item['category'], item['percentage'], item['color']) for item in use_of_funds],
            center_label=capital_raise_display,
        )

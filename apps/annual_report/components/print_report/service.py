"""
Print Report Service
Every dataset on one printer-friendly page
"""

from ...core import get_report_data
from ...core.formatting import format_currency, format_number, format_range, format_value, get_percentage
from .. import register_component
from ..financials.service import FinancialsService
from ..investors.service import InvestorsService

TOP_ENTITIES = 5


@register_component('print_report')
class PrintReportService:
    """Service for the Print Report page"""

    def __init__(self):
        self.financials = FinancialsService()
        self.investors = InvestorsService()

    def static_paths(self):
        return ['/print']

    def get_entity_table(self):
        """Entities by Y1 floor with column totals"""
        entities = sorted(get_report_data().entities(), key=lambda e: e['revenueY1Floor'], reverse=True)
        total_y1 = sum(e['revenueY1Floor'] for e in entities)
        total_y5 = sum(e['revenueY5Floor'] for e in entities)
        total_team = sum(e.get('teamSize', 0) for e in entities)
        return {
            'rows': [
                {
                    'name': e['name'],
                    'category': e.get('category', ''),
                    'status': e.get('status', ''),
                    'y1': format_currency(e['revenueY1Floor']),
                    'y5': format_currency(e['revenueY5Floor']),
                    'team': e.get('teamSize', 0),
                }
                for e in entities
            ],
            'total_y1': format_currency(total_y1, decimals=2),
            'total_y5': format_currency(total_y5, decimals=2),
            'total_team': total_team,
        }

    def get_top_entities(self):
        breakdown = sorted(get_report_data().financials()['entityBreakdown'],
                           key=lambda row: row['revenueY1Floor'], reverse=True)
        return [
            {
                'name': row['name'],
                'floor': format_currency(row['revenueY1Floor']),
                'ceiling': format_currency(row['revenueY1Ceiling']),
                'share': row.get('shareOfY1Floor', 0),
            }
            for row in breakdown[:TOP_ENTITIES]
        ]

    def get_goal_rows(self):
        return [
            {
                'label': goal['label'],
                'current': format_value(goal['current'], goal.get('unit', '')),
                'target': format_value(goal['target'], goal.get('unit', '')),
                'progress': get_percentage(goal['current'], goal['target']),
            }
            for goal in get_report_data().goals()
        ]

    def get_page_data(self):
        store = get_report_data()
        metrics = store.metrics()
        aggregate = store.financials()['aggregate']
        team = store.team()
        flywheel = store.flywheel()
        return {
            'metrics': {
                'capital_raise': format_currency(metrics['capitalRaise']),
                'entities': metrics['entities'],
                'crm_accounts': format_number(metrics['crmAccounts']),
                'staff': format_number(metrics['staff']),
                'partner_cities': metrics['partnerCities'],
                'campus_acres': metrics['campusAcres'],
            },
            'entity_table': self.get_entity_table(),
            'revenue_y1': format_range(aggregate['revenueY1Floor'], aggregate['revenueY1Ceiling']),
            'revenue_y5': format_range(aggregate['revenueY5Floor'], aggregate['revenueY5Ceiling']),
            'valuations': self.financials.get_valuations(),
            'top_entities': self.get_top_entities(),
            'flywheel_recipients': self.financials.get_flywheel_recipients(),
            'team': {
                'staff': format_number(team['staff']),
                'ai_equivalent': format_number(team['aiEquivalent']),
                'departments': sorted(team['departments'], key=lambda d: d['headcount'], reverse=True),
            },
            'investors': self.investors.get_page_data(),
            'goals': self.get_goal_rows(),
            'flywheel_nodes': flywheel['nodes'],
            'flywheel_connections': flywheel['connections'],
        }

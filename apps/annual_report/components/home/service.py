"""
Overview Service
Hero metrics, entity grid, flywheel and comparison teasers for the home page
"""

from ...core import get_report_data
from ...core.formatting import format_currency, format_number
from .. import register_component
from ..compare.service import ComparisonService
from ..entities.service import EntitiesService
from ..financials.service import FLYWHEEL_SOURCE


@register_component('home')
class OverviewService:
    """Service for the home page"""

    def __init__(self):
        self.entities = EntitiesService()
        self.comparisons = ComparisonService()

    def static_paths(self):
        return ['/']

    def get_key_metrics(self):
        """Headline counters from the ecosystem metrics"""
        metrics = get_report_data().metrics()
        return [
            {'end': metrics['revenueY1Floor'] / 1_000_000, 'prefix': '$', 'suffix': 'M', 'decimals': 2,
             'label': 'Revenue Y1', 'sublabel': 'V6 Floor',
             'text': format_currency(metrics['revenueY1Floor'], decimals=2)},
            {'end': metrics['entities'], 'label': 'Entities', 'sublabel': 'Integrated Ecosystem',
             'text': format_number(metrics['entities'])},
            {'end': metrics['crmAccounts'], 'label': 'CRM Accounts', 'sublabel': 'Active Pipeline',
             'text': format_number(metrics['crmAccounts'])},
            {'end': metrics['staff'], 'label': 'Staff',
             'sublabel': f"Output like {format_number(metrics['staffAIEquivalent'])} with AI",
             'text': format_number(metrics['staff'])},
            {'end': metrics['partnerCities'], 'label': 'Partner Cities', 'sublabel': 'SD + WY',
             'text': format_number(metrics['partnerCities'])},
            {'end': metrics['campusAcres'], 'label': 'Campus Acres', 'sublabel': 'Custer, SD',
             'text': format_number(metrics['campusAcres'])},
        ]

    def get_hero(self):
        metrics = get_report_data().metrics()
        return {
            'entities': metrics['entities'],
            'capital_raise': format_currency(metrics['capitalRaise'], decimals=0),
            'revenue_range': (
                f"{format_currency(metrics['revenueY1Floor'], decimals=2)}"
                f"–{format_currency(metrics['revenueY1Ceiling'])}"
            ),
        }

    def get_flywheel_teaser(self):
        """The four flywheel steps, driven by the source entity's revenue"""
        store = get_report_data()
        source = store.entity(FLYWHEEL_SOURCE)
        percentage = store.financials()['aggregate'].get('flywheelPercentage', 0)
        revenue = source['revenueY1Floor'] if source else 0
        flow = revenue * percentage / 100
        source_name = source['name'] if source else 'FlowBot'
        return {
            'source_name': source_name,
            'percentage': percentage,
            'flow_display': format_currency(flow, decimals=2),
            'steps': [
                {'label': f'{source_name} Revenue', 'value': format_currency(revenue, decimals=2), 'color': '#22c55e'},
                {'label': f'{percentage:g}% Equity Flow', 'value': format_currency(flow, decimals=2), 'color': '#059669'},
                {'label': 'Funds Operations', 'value': f'{len(store.entities())} Entities', 'color': '#06b6d4'},
                {'label': 'Content & Growth', 'value': 'Attracts More', 'color': '#3b82f6'},
            ],
        }

    def get_page_data(self):
        return {
            'hero': self.get_hero(),
            'key_metrics': self.get_key_metrics(),
            'entities': self.entities.get_entity_cards(by_revenue=False),
            'flywheel': self.get_flywheel_teaser(),
            'comparison': self.comparisons.get_teaser(),
        }

"""
Financials Service
Aggregate revenue, per-entity breakdown, pricing and flywheel distribution
"""

from ...core import get_report_data
from ...core.charts import svg_bar_chart, svg_donut
from ...core.formatting import display_text, format_currency, format_range, to_display, truncate_label
from .. import register_component

PRICING_TIERS = [
    ('starter', 'Starter', 'Per month'),
    ('solo', 'Solo', 'Per month'),
    ('growth', 'Growth', 'Per location / month'),
    ('enterprise', 'Enterprise', 'Per location / month'),
    ('mso', 'MSO', 'Per location / month'),
]

FLYWHEEL_RECIPIENTS = [
    ('auricLabs', 'Auric Labs',
     'AI-native startup accelerator; funds portfolio companies and innovation programs'),
    ('seedFoundation', 'Seed Foundation',
     '501(c)(3) charitable arm; funds scholarships, grants, and community programs'),
    ('bhc', 'BHC',
     'Regional coordination; funds shared services, capital raise, and ecosystem operations'),
]

# Entity whose revenue feeds the flywheel distribution
FLYWHEEL_SOURCE = 'growwise'


def _counter(value):
    display = to_display(value)
    return dict(display, text=display_text(display))


@register_component('financials')
class FinancialsService:
    """Service for the Financials page"""

    def static_paths(self):
        return ['/financials']

    def get_aggregate_cards(self):
        aggregate = get_report_data().financials()['aggregate']
        return [
            {'label': 'Y1 Revenue (Floor)', 'counter': _counter(aggregate['revenueY1Floor'])},
            {'label': 'Y1 Revenue (Ceiling)', 'counter': _counter(aggregate['revenueY1Ceiling'])},
            {'label': 'Y5 Revenue (Floor)', 'counter': _counter(aggregate['revenueY5Floor'])},
            {'label': 'Y5 Revenue (Ceiling)', 'counter': _counter(aggregate['revenueY5Ceiling'])},
            {'label': 'Capital Raise', 'counter': _counter(aggregate['capitalRaise'])},
        ]

    def get_valuations(self):
        aggregate = get_report_data().financials()['aggregate']
        return {
            'y1': format_range(aggregate['valuationY1Low'], aggregate['valuationY1High']),
            'y5': format_range(aggregate['valuationY5Low'], aggregate['valuationY5High']),
        }

    def get_bar_chart_data(self):
        """Per-entity Y1 floor and ceiling, largest floor first"""
        store = get_report_data()
        breakdown = sorted(store.financials()['entityBreakdown'],
                           key=lambda e: e['revenueY1Floor'], reverse=True)
        return [
            {
                'name': truncate_label(row['name']),
                'fullName': row['name'],
                'floor': row['revenueY1Floor'],
                'ceiling': row['revenueY1Ceiling'],
                'color': store.entity_color(row['slug']),
            }
            for row in breakdown
        ]

    def get_pie_data(self):
        """Share of the Y1 floor by entity, zero shares dropped"""
        store = get_report_data()
        shares = [row for row in store.financials()['entityBreakdown'] if row.get('shareOfY1Floor', 0) > 0]
        shares.sort(key=lambda row: row['shareOfY1Floor'], reverse=True)
        return [
            {'name': row['name'], 'value': row['shareOfY1Floor'], 'color': store.entity_color(row['slug'])}
            for row in shares
        ]

    def get_pricing_tiers(self):
        pricing = get_report_data().financials()['pricing']
        return [
            {'name': name, 'price': pricing.get(key, 0), 'price_display': format_currency(pricing.get(key, 0), compact=False), 'desc': desc}
            for key, name, desc in PRICING_TIERS
        ]

    def get_flywheel_recipients(self):
        """Recipients of the flywheel distribution with their dollar flow"""
        store = get_report_data()
        aggregate = store.financials()['aggregate']
        distribution = aggregate.get('flywheelDistribution', {})
        source = store.entity(FLYWHEEL_SOURCE)
        source_revenue = source['revenueY1Floor'] if source else 0

        recipients = []
        for key, name, desc in FLYWHEEL_RECIPIENTS:
            pct = distribution.get(key, 0)
            amount = source_revenue * pct / 100
            recipients.append({
                'name': name,
                'pct': pct,
                'desc': desc,
                'amount': amount,
                'amount_display': format_currency(amount, decimals=2),
            })
        return recipients

    def get_page_data(self):
        aggregate = get_report_data().financials()['aggregate']
        return {
            'aggregate_cards': self.get_aggregate_cards(),
            'valuations': self.get_valuations(),
            'bar_chart': self.get_bar_chart_data(),
            'pie_chart': self.get_pie_data(),
            'pricing_tiers': self.get_pricing_tiers(),
            'flywheel_percentage': aggregate.get('flywheelPercentage', 0),
            'flywheel_recipients': self.get_flywheel_recipients(),
        }

    def get_charts(self, page_data):
        """Inline SVG for the revenue bar chart and the share donut"""
        pie = page_data['pie_chart']
        return {
            'bar_svg': svg_bar_chart(page_data['bar_chart']),
            'pie_svg': svg_donut([(row['name'], row['value'], row['color']) for row in pie]),
        }

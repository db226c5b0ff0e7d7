"""
Comparison Service
Head-to-head comparison of BHC against a regional peer organisation
"""

from ...config.settings import ReportConfig
from ...core import get_report_data
from ...core.formatting import extract_multipliers, extract_number, short_competitor_name, split_summary
from .. import register_component


@register_component('compare')
class ComparisonService:
    """Service for the comparison pages"""

    def static_paths(self):
        return [config['path'] for config in ReportConfig.COMPARISONS.values()]

    def get_comparison(self, key):
        return get_report_data().comparison(key)

    def get_other_comparisons(self, key):
        """Links to the comparisons other than the current one"""
        links = []
        for other_key in ReportConfig.COMPARISONS:
            if other_key == key:
                continue
            data = self.get_comparison(other_key)
            links.append({
                'href': ReportConfig.COMPARISONS[other_key]['path'],
                'label': f"BHC vs {data['competitorName']}",
            })
        return links

    @staticmethod
    def get_bar_rows(data_points):
        """Data points where both sides are numeric, scaled to the larger side"""
        rows = []
        for point in data_points:
            bhc = extract_number(point.get('bhcValue', ''))
            competitor = extract_number(point.get('competitorValue', ''))
            if bhc is None or competitor is None:
                continue
            peak = max(bhc, competitor)
            rows.append({
                'metric': point['metric'],
                'bhc_value': point['bhcValue'],
                'competitor_value': point['competitorValue'],
                'bhc_percent': bhc / peak * 100 if peak > 0 else 0,
                'competitor_percent': competitor / peak * 100 if peak > 0 else 0,
            })
        return rows

    def get_page_data(self, key):
        """Everything a comparison page renders, or None for an unknown key"""
        data = self.get_comparison(key)
        if data is None:
            return None

        summary_first, summary_rest = split_summary(data.get('summary', ''))
        data_points = data.get('dataPoints', [])
        return {
            'key': key,
            'competitor_name': data['competitorName'],
            'competitor_type': data.get('competitorType', ''),
            'short_name': short_competitor_name(data['competitorName']),
            'data_points': data_points,
            'multipliers': extract_multipliers(data_points),
            'summary_first': summary_first,
            'summary_rest': summary_rest,
            'bar_rows': self.get_bar_rows(data_points),
            'other_comparisons': self.get_other_comparisons(key),
        }

    def get_teaser(self, key=ReportConfig.DEFAULT_COMPARISON, limit=5):
        """Short side-by-side used on the home page"""
        data = self.get_comparison(key)
        if data is None:
            return None
        return {
            'competitor_name': data['competitorName'],
            'rows': [
                {'metric': point['metric'], 'bhc': point['bhcValue'], 'competitor': point['competitorValue']}
                for point in data.get('dataPoints', [])[:limit]
            ],
        }

"""
Team Service
"""

from ...core import get_report_data
from ...core.charts import svg_horizontal_bars
from ...core.formatting import format_number
from .. import register_component

MAX_KEY_ROLES = 3

COST_LABELS = [
    ('technical', 'Technical'),
    ('fieldSales', 'Field Sales'),
    ('executive', 'Executive'),
]


@register_component('team')
class TeamService:
    """Service for the Team page"""

    def static_paths(self):
        return ['/team']

    def get_headline(self):
        team = get_report_data().team()
        return {
            'staff': team['staff'],
            'ai_equivalent': team['aiEquivalent'],
            'ai_multiplier': team.get('aiMultiplier'),
            'departments': len(team['departments']),
            'entities': len(get_report_data().entities()),
        }

    def get_departments(self):
        """Departments by headcount, largest first"""
        return sorted(get_report_data().team()['departments'], key=lambda d: d['headcount'], reverse=True)

    def get_entity_teams(self):
        return [
            {
                'slug': entity['slug'],
                'name': entity['name'],
                'color': entity.get('color'),
                'team_size': entity.get('teamSize', 0),
                'key_roles': (entity.get('keyRoles') or [])[:MAX_KEY_ROLES],
            }
            for entity in get_report_data().entities()
        ]

    def get_costs(self):
        """Fully loaded cost per role family, in thousands of dollars"""
        costs = get_report_data().team()['fullyLoadedCosts']
        return [
            {'label': label, 'thousands': costs.get(key, 0) / 1000,
             'text': f"${format_number(costs.get(key, 0) / 1000)}K"}
            for key, label in COST_LABELS
        ]

    def get_page_data(self):
        return {
            'headline': self.get_headline(),
            'departments': self.get_departments(),
            'entity_teams': self.get_entity_teams(),
            'benefits': get_report_data().team()['benefits'],
            'costs': self.get_costs(),
        }

    def get_department_chart(self, departments):
        return svg_horizontal_bars([
            {'label': d['name'], 'value': d['headcount'], 'color': d.get('color', '#059669')}
            for d in departments
        ])

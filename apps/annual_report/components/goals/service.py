"""
Goals Service
Progress toward the five-year targets
"""

from ...core import get_report_data
from ...core.formatting import completion_ratio, format_value, get_percentage, round_half_up
from .. import register_component

CATEGORIES = ['revenue', 'infrastructure', 'reach']

CATEGORY_COLORS = {
    'revenue': {'bar': '#059669', 'text': '#047857', 'badge_bg': '#d1fae5'},
    'infrastructure': {'bar': '#3b82f6', 'text': '#1d4ed8', 'badge_bg': '#dbeafe'},
    'reach': {'bar': '#f59e0b', 'text': '#b45309', 'badge_bg': '#fef3c7'},
}


def category_colors(category):
    """Palette for a goal category, falling back to the reach palette"""
    return CATEGORY_COLORS.get(category, CATEGORY_COLORS['reach'])


@register_component('goals')
class GoalsService:
    """Service for the Goals page"""

    def static_paths(self):
        return ['/goals']

    def get_goals(self):
        """Each goal with its formatted values and capped progress"""
        goals = get_report_data().goals()
        return [
            dict(
                goal,
                percentage=get_percentage(goal['current'], goal['target']),
                current_display=format_value(goal['current'], goal.get('unit', '')),
                target_display=format_value(goal['target'], goal.get('unit', '')),
                colors=category_colors(goal.get('category')),
            )
            for goal in goals
        ]

    def get_summary(self):
        """Headline counts across all goals"""
        goals = get_report_data().goals()
        with_progress = [goal for goal in goals if goal['current'] > 0]
        if goals:
            ratios = [completion_ratio(goal['current'], goal['target']) for goal in goals]
            average = round_half_up(sum(ratios) / len(goals))
        else:
            average = 0
        return {
            'total_goals': len(goals),
            'with_progress': len(with_progress),
            'average_completion': average,
        }

    def get_category_breakdown(self):
        """Combined completion per category"""
        goals = get_report_data().goals()
        breakdown = []
        for category in CATEGORIES:
            category_goals = [goal for goal in goals if goal.get('category') == category]
            sum_current = sum(goal['current'] for goal in category_goals)
            sum_target = sum(goal['target'] for goal in category_goals)
            combined = round_half_up(sum_current / sum_target * 100) if sum_target > 0 else 0
            breakdown.append({
                'category': category,
                'label': category[:1].upper() + category[1:],
                'count': len(category_goals),
                'combined_percentage': combined,
                'goals': [goal['label'] for goal in category_goals],
                'colors': category_colors(category),
            })
        return breakdown

    def get_page_data(self):
        return {
            'goals': self.get_goals(),
            'summary': self.get_summary(),
            'categories': self.get_category_breakdown(),
        }

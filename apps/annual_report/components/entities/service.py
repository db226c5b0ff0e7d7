"""
Entities Service
Shapes entity records for the ecosystem index and the per-entity pages
"""

from ...core import get_report_data
from ...core.charts import svg_area_chart
from ...core.formatting import display_text, format_currency, format_number, to_display
from ...core.projections import revenue_projection, stream_shares
from .. import register_component

STATUS_BADGES = {
    'operational': {'label': 'Operational', 'color': '#4ade80'},
    'pre-launch': {'label': 'Pre-Launch', 'color': '#facc15'},
    'planning': {'label': 'Planning', 'color': '#9ca3af'},
}

STREAM_STATUS_COLORS = {
    'core': {'bg': '#dcfce7', 'text': '#15803d'},
    'new': {'bg': '#dbeafe', 'text': '#1d4ed8'},
    'planned': {'bg': '#f3f4f6', 'text': '#4b5563'},
}

MAX_RELATED = 3


@register_component('entities')
class EntitiesService:
    """Service for the entity index and detail pages"""

    def static_paths(self):
        slugs = get_report_data().entity_slugs()
        return ['/entities'] + [f'/entity/{slug}' for slug in slugs]

    def get_entity(self, slug):
        """Raw entity record, or None when the slug is unknown"""
        return get_report_data().entity(slug)

    def get_entity_cards(self, by_revenue=True):
        """All entities as cards, highest Y1 floor first unless by_revenue is False"""
        entities = list(get_report_data().entities())
        if by_revenue:
            entities.sort(key=lambda e: e['revenueY1Floor'], reverse=True)
        return [self._card(entity) for entity in entities]

    def _card(self, entity):
        return {
            'slug': entity['slug'],
            'name': entity['name'],
            'tagline': entity.get('tagline', ''),
            'category': entity.get('category', ''),
            'color': entity.get('color'),
            'revenue_y1': format_currency(entity['revenueY1Floor'], decimals=2),
        }

    def get_related_entities(self, entity, limit=MAX_RELATED):
        """Entities in the same category first, then the largest by Y1 floor"""
        others = [e for e in get_report_data().entities() if e['slug'] != entity['slug']]
        others.sort(key=lambda e: (e.get('category') != entity.get('category'), -e['revenueY1Floor']))
        related = []
        for other in others[:limit]:
            y1 = to_display(other['revenueY1Floor'], billions_decimals=1)
            related.append({
                'slug': other['slug'],
                'name': other['name'],
                'tagline': other.get('tagline', ''),
                'color': other.get('color'),
                'revenue_y1': format_currency(other['revenueY1Floor']),
                'revenue_y1_counter': y1,
            })
        return related

    def get_entity_detail(self, slug):
        """Everything the entity page renders, or None when the slug is unknown"""
        entity = self.get_entity(slug)
        if entity is None:
            return None

        y1 = to_display(entity['revenueY1Floor'], billions_decimals=1)
        y5 = to_display(entity['revenueY5Floor'], billions_decimals=1)
        streams = entity.get('revenueStreams') or []
        projection = revenue_projection(entity)

        return {
            'entity': entity,
            'status': STATUS_BADGES.get(entity.get('status'), STATUS_BADGES['planning']),
            'revenue_y1': dict(y1, text=display_text(y1)),
            'revenue_y5': dict(y5, text=display_text(y5)),
            'revenue_streams': [
                dict(
                    stream,
                    estimated_y1_display=format_currency(stream.get('estimatedY1', 0)),
                    estimated_y5_display=format_currency(stream.get('estimatedY5', 0)),
                    status_colors=STREAM_STATUS_COLORS.get(stream.get('status'), STREAM_STATUS_COLORS['planned']),
                )
                for stream in stream_shares(streams, entity['revenueY1Floor'])
            ],
            'metrics': [
                dict(metric, text=f"{metric.get('prefix', '')}{format_number(metric['value'])}{metric.get('suffix', '')}")
                for metric in entity.get('metrics') or []
            ],
            'projection': [
                dict(
                    point,
                    floor_display=format_currency(point['floor']),
                    ceiling_display=format_currency(point['ceiling']),
                )
                for point in projection
            ],
            'related': self.get_related_entities(entity),
        }

    def get_projection_chart(self, detail):
        return svg_area_chart(detail['projection'], color=detail['entity'].get('color', '#059669'))

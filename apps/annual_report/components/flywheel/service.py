"""
Flywheel Service
Lays out the value-flow diagram between entities
"""
import logging

from ...core import get_report_data
from ...core.geometry import VIEWBOX_SIZE, curved_path, node_position, percent_position
from ...core.formatting import format_currency
from .. import register_component

logger = logging.getLogger(__name__)

# connection type -> (curve offset, stroke width, dash pattern)
CONNECTION_STYLES = {
    'equity': (60, 2.5, 'none'),
}
DEFAULT_CONNECTION_STYLE = (40, 1.8, '6 4')


@register_component('flywheel')
class FlywheelService:
    """Service for the Flywheel page"""

    def static_paths(self):
        return ['/flywheel']

    def get_nodes(self):
        """Nodes with their diagram coordinates"""
        nodes = get_report_data().flywheel()['nodes']
        laid_out = []
        for i, node in enumerate(nodes):
            position = node_position(i, len(nodes))
            laid_out.append(dict(node, position=position, percent=percent_position(position)))
        return laid_out

    def get_connections(self, nodes=None):
        """Connections as curved SVG paths; unknown endpoints are skipped"""
        nodes = nodes if nodes is not None else self.get_nodes()
        positions = {node['id']: node['position'] for node in nodes}
        paths = []
        for connection in get_report_data().flywheel()['connections']:
            start = positions.get(connection['from'])
            end = positions.get(connection['to'])
            if start is None or end is None:
                logger.warning('Skipping flywheel connection %s -> %s: unknown node',
                               connection['from'], connection['to'])
                continue
            offset, stroke_width, dash = CONNECTION_STYLES.get(connection.get('type'), DEFAULT_CONNECTION_STYLE)
            paths.append(dict(
                connection,
                path=curved_path(start, end, offset),
                stroke_width=stroke_width,
                dash=dash,
            ))
        return paths

    def get_outgoing(self, nodes=None):
        """Outgoing connections grouped by source node, in node order"""
        nodes = nodes if nodes is not None else self.get_nodes()
        connections = get_report_data().flywheel()['connections']
        labels = {node['id']: node['label'] for node in nodes}
        grouped = []
        for node in nodes:
            outgoing = [
                {'to': labels.get(c['to'], c['to']), 'label': c['label'], 'type': c.get('type')}
                for c in connections if c['from'] == node['id']
            ]
            grouped.append({'node': node, 'outgoing': outgoing})
        return grouped

    def get_entity_roles(self):
        """Each entity's role in the flywheel, largest Y1 floor first"""
        entities = sorted(get_report_data().entities(), key=lambda e: e['revenueY1Floor'], reverse=True)
        return [
            {
                'slug': entity['slug'],
                'name': entity['name'],
                'color': entity.get('color'),
                'role': entity.get('flywheelRole', ''),
                'connection': entity.get('flywheelConnection', ''),
                'revenue_y1': format_currency(entity['revenueY1Floor']),
            }
            for entity in entities
        ]

    def get_page_data(self):
        nodes = self.get_nodes()
        return {
            'viewbox': VIEWBOX_SIZE,
            'nodes': nodes,
            'connections': self.get_connections(nodes),
            'outgoing': self.get_outgoing(nodes),
            'entity_roles': self.get_entity_roles(),
            'flywheel_percentage': get_report_data().financials()['aggregate'].get('flywheelPercentage', 0),
        }

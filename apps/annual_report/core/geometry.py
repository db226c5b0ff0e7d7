"""
Flywheel diagram geometry
Nodes sit on an ellipse inside a 600x600 viewBox and are joined by
quadratic curves bowed away from the straight line between them
"""
import math
from typing import Dict

VIEWBOX_SIZE = 600
CENTER_X = 300
CENTER_Y = 300
RADIUS_X = 230
RADIUS_Y = 220


def node_position(index: int, total: int) -> Dict[str, float]:
    """
    Centre of a node on the flywheel ellipse

    Node 0 is at 12 o'clock; the rest follow clockwise at equal angles.
    """
    angle = -math.pi / 2 + (2 * math.pi * index) / total
    return {
        'x': CENTER_X + RADIUS_X * math.cos(angle),
        'y': CENTER_Y + RADIUS_Y * math.sin(angle),
    }


def curved_path(start: Dict[str, float], end: Dict[str, float], offset: float = 40) -> str:
    """SVG quadratic Bezier path between two points, bowed by offset"""
    mx = (start['x'] + end['x']) / 2
    my = (start['y'] + end['y']) / 2
    dx = end['x'] - start['x']
    dy = end['y'] - start['y']
    length = math.sqrt(dx * dx + dy * dy) or 1
    nx = -dy / length
    ny = dx / length
    cpx = mx + nx * offset
    cpy = my + ny * offset
    return (
        f"M {start['x']:.2f} {start['y']:.2f} "
        f"Q {cpx:.2f} {cpy:.2f} {end['x']:.2f} {end['y']:.2f}"
    )


def percent_position(point: Dict[str, float], size: float = VIEWBOX_SIZE) -> Dict[str, float]:
    """Position as percentages of the viewBox, for HTML node cards"""
    return {
        'left': point['x'] / size * 100,
        'top': point['y'] / size * 100,
    }

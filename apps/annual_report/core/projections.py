"""
Revenue projection helpers
"""
from typing import Any, Dict, List

PROJECTION_YEARS = 5
MIN_STREAM_SHARE = 5


def revenue_projection(entity: Dict[str, Any], years: int = PROJECTION_YEARS) -> List[Dict[str, Any]]:
    """
    Linear Year 1 -> Year N projection for an entity

    Args:
        entity: Entity record with Y1/Y5 floor and ceiling revenue
        years: Number of points to produce

    Returns:
        One dict per year with 'year', 'floor' and 'ceiling'
    """
    y1_floor = entity.get('revenueY1Floor', 0)
    y1_ceiling = entity.get('revenueY1Ceiling', 0)
    y5_floor = entity.get('revenueY5Floor', 0)
    y5_ceiling = entity.get('revenueY5Ceiling', 0)
    steps = max(years - 1, 1)

    points = []
    for i in range(years):
        fraction = i / steps
        points.append({
            'year': f'Year {i + 1}',
            'floor': y1_floor + (y5_floor - y1_floor) * fraction,
            'ceiling': y1_ceiling + (y5_ceiling - y1_ceiling) * fraction,
        })
    return points


def stream_shares(streams: List[Dict[str, Any]], fallback_total: float) -> List[Dict[str, Any]]:
    """Attach a bar width percentage to each revenue stream"""
    total_y1 = sum(stream.get('estimatedY1', 0) for stream in streams) or fallback_total
    shaped = []
    for stream in streams:
        share = (stream.get('estimatedY1', 0) / total_y1 * 100) if total_y1 else 0
        shaped.append(dict(stream, share=max(share, MIN_STREAM_SHARE)))
    return shaped

"""
Inline SVG chart builders
Every builder returns Markup that templates can embed directly.
"""
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

from markupsafe import Markup, escape

from .formatting import format_currency

_GRID_COLOR = '#e5e7eb'
_AXIS_TEXT = '#6b7280'
_FONT = "font-family=\"Inter, -apple-system, 'Segoe UI', sans-serif\""


def _num(value: Any, default: float = 0.0) -> float:
    """Safe numeric coercion for SVG coordinates"""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def _placeholder(width: float, height: float, message: str = 'No data') -> Markup:
    return Markup(
        f'<svg viewBox="0 0 {width:.0f} {height:.0f}" xmlns="http://www.w3.org/2000/svg" role="img">'
        f'<text x="{width / 2:.2f}" y="{height / 2:.2f}" text-anchor="middle" fill="#9ca3af">'
        f'{escape(message)}</text></svg>'
    )


def _nice_max(value: float) -> float:
    """Round an axis maximum up to 1, 2, 2.5 or 5 times a power of ten"""
    if value <= 0:
        return 1.0
    exponent = math.floor(math.log10(value))
    base = 10 ** exponent
    for step in (1, 2, 2.5, 5, 10):
        if value <= step * base:
            return step * base
    return 10 * base


def svg_bar_chart(rows: List[Dict[str, Any]], width: int = 720, height: int = 360) -> Markup:
    """
    Grouped floor/ceiling bar chart, one group per row

    rows: dicts with 'name', 'floor', 'ceiling' and 'color'
    """
    if not rows:
        return _placeholder(width, height)

    left, right, top, bottom = 64.0, 16.0, 16.0, 72.0
    plot_w = width - left - right
    plot_h = height - top - bottom
    peak = _nice_max(max(max(_num(r.get('floor')), _num(r.get('ceiling'))) for r in rows))
    group_w = plot_w / len(rows)
    bar_w = max(group_w * 0.35, 2.0)

    lines = [
        f'<svg viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg" role="img" {_FONT}>'
    ]
    for tick in range(5):
        value = peak * tick / 4
        y = top + plot_h - plot_h * tick / 4
        lines.append(
            f'<line x1="{left:.2f}" y1="{y:.2f}" x2="{width - right:.2f}" y2="{y:.2f}" '
            f'stroke="{_GRID_COLOR}" stroke-dasharray="3 3"/>'
        )
        lines.append(
            f'<text x="{left - 8:.2f}" y="{y + 4:.2f}" text-anchor="end" font-size="10" '
            f'fill="{_AXIS_TEXT}">{escape(format_currency(value))}</text>'
        )

    for i, row in enumerate(rows):
        gx = left + i * group_w + (group_w - 2 * bar_w) / 2
        color = escape(row.get('color', '#6b7280'))
        for j, key in enumerate(('floor', 'ceiling')):
            value = _num(row.get(key))
            bar_h = plot_h * value / peak
            x = gx + j * bar_w
            y = top + plot_h - bar_h
            opacity = '1' if key == 'floor' else '0.45'
            lines.append(
                f'<rect x="{x:.2f}" y="{y:.2f}" width="{bar_w:.2f}" height="{bar_h:.2f}" '
                f'fill="{color}" fill-opacity="{opacity}" rx="2">'
                f'<title>{escape(row.get("fullName", row.get("name", "")))} {key}: '
                f'{escape(format_currency(value))}</title></rect>'
            )
        label_x = left + i * group_w + group_w / 2
        label_y = top + plot_h + 12
        lines.append(
            f'<text x="{label_x:.2f}" y="{label_y:.2f}" font-size="10" fill="{_AXIS_TEXT}" '
            f'text-anchor="end" transform="rotate(-40 {label_x:.2f} {label_y:.2f})">'
            f'{escape(row.get("name", ""))}</text>'
        )

    lines.append('</svg>')
    return Markup('\n'.join(lines))


def svg_donut(
    segments: Sequence[Tuple[str, float, str]],
    size: int = 220,
    inner_radius: float = 55.0,
    outer_radius: float = 95.0,
    center_label: Optional[str] = None,
) -> Markup:
    """
    Donut chart

    segments: (label, value, color) tuples; non-positive values are skipped
    """
    total = sum(_num(v) for _, v, _ in segments if _num(v) > 0)
    if total <= 0:
        return _placeholder(size, size)

    half = outer_radius + 10
    lines = [
        f'<svg width="{size}" height="{size}" viewBox="{-half:.2f} {-half:.2f} {half * 2:.2f} {half * 2:.2f}" '
        f'xmlns="http://www.w3.org/2000/svg" role="img" {_FONT}>'
    ]
    angle = -90.0
    for label, value, color in segments:
        value = _num(value)
        if value <= 0:
            continue
        sweep = min(value / total * 360.0, 359.999)
        start = math.radians(angle)
        end = math.radians(angle + sweep)
        large_arc = 1 if sweep > 180 else 0
        d = (
            f'M {outer_radius * math.cos(start):.2f} {outer_radius * math.sin(start):.2f} '
            f'A {outer_radius:.2f} {outer_radius:.2f} 0 {large_arc} 1 '
            f'{outer_radius * math.cos(end):.2f} {outer_radius * math.sin(end):.2f} '
            f'L {inner_radius * math.cos(end):.2f} {inner_radius * math.sin(end):.2f} '
            f'A {inner_radius:.2f} {inner_radius:.2f} 0 {large_arc} 0 '
            f'{inner_radius * math.cos(start):.2f} {inner_radius * math.sin(start):.2f} Z'
        )
        lines.append(f'<path d="{d}" fill="{escape(color)}"><title>{escape(label)}</title></path>')
        angle += sweep

    if center_label:
        lines.append(
            f'<text x="0" y="0" text-anchor="middle" dominant-baseline="central" '
            f'font-size="18" font-weight="bold" fill="#0f172a">{escape(center_label)}</text>'
        )
    lines.append('</svg>')
    return Markup('\n'.join(lines))


def svg_area_chart(points: List[Dict[str, Any]], color: str = '#059669',
                   width: int = 720, height: int = 300) -> Markup:
    """Floor/ceiling area chart for a revenue projection"""
    if not points:
        return _placeholder(width, height)

    left, right, top, bottom = 64.0, 24.0, 16.0, 36.0
    plot_w = width - left - right
    plot_h = height - top - bottom
    peak = _nice_max(max(max(_num(p.get('floor')), _num(p.get('ceiling'))) for p in points))
    step = plot_w / max(len(points) - 1, 1)

    def coords(key):
        return [
            (left + i * step, top + plot_h - plot_h * _num(p.get(key)) / peak)
            for i, p in enumerate(points)
        ]

    baseline = top + plot_h
    lines = [
        f'<svg viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg" role="img" {_FONT}>'
    ]
    for tick in range(5):
        y = top + plot_h - plot_h * tick / 4
        lines.append(
            f'<line x1="{left:.2f}" y1="{y:.2f}" x2="{width - right:.2f}" y2="{y:.2f}" '
            f'stroke="{_GRID_COLOR}" stroke-dasharray="3 3"/>'
        )
        lines.append(
            f'<text x="{left - 8:.2f}" y="{y + 4:.2f}" text-anchor="end" font-size="10" '
            f'fill="{_AXIS_TEXT}">{escape(format_currency(peak * tick / 4))}</text>'
        )

    for key, opacity in (('ceiling', '0.15'), ('floor', '0.35')):
        pts = coords(key)
        outline = ' '.join(f'{x:.2f},{y:.2f}' for x, y in pts)
        area = f'{pts[0][0]:.2f},{baseline:.2f} {outline} {pts[-1][0]:.2f},{baseline:.2f}'
        lines.append(f'<polygon points="{area}" fill="{escape(color)}" fill-opacity="{opacity}"/>')
        lines.append(f'<polyline points="{outline}" fill="none" stroke="{escape(color)}" stroke-width="2"/>')

    for i, point in enumerate(points):
        x = left + i * step
        lines.append(
            f'<text x="{x:.2f}" y="{baseline + 20:.2f}" text-anchor="middle" font-size="11" '
            f'fill="{_AXIS_TEXT}">{escape(point.get("year", ""))}</text>'
        )
    lines.append('</svg>')
    return Markup('\n'.join(lines))


def svg_horizontal_bars(rows: List[Dict[str, Any]], width: int = 640) -> Markup:
    """
    Horizontal bars, one per row

    rows: dicts with 'label', 'value' and 'color'
    """
    bar_height = 24.0
    bar_gap = 10.0
    label_width = 150.0
    bar_width = width - label_width - 50
    height = 10 + len(rows) * (bar_height + bar_gap)
    if not rows:
        return _placeholder(width, 120)

    peak = max(_num(r.get('value')) for r in rows) or 1.0
    lines = [
        f'<svg viewBox="0 0 {width} {height:.0f}" xmlns="http://www.w3.org/2000/svg" role="img" {_FONT}>'
    ]
    for i, row in enumerate(rows):
        value = _num(row.get('value'))
        y = 10 + i * (bar_height + bar_gap)
        w = bar_width * value / peak
        lines.append(
            f'<text x="{label_width - 8:.2f}" y="{y + bar_height / 2 + 4:.2f}" text-anchor="end" '
            f'font-size="12" fill="#374151">{escape(row.get("label", ""))}</text>'
        )
        lines.append(
            f'<rect x="{label_width:.2f}" y="{y:.2f}" width="{w:.2f}" height="{bar_height:.2f}" '
            f'fill="{escape(row.get("color", "#059669"))}" rx="4"/>'
        )
        lines.append(
            f'<text x="{label_width + w + 6:.2f}" y="{y + bar_height / 2 + 4:.2f}" '
            f'font-size="12" font-weight="bold" fill="#0f172a">{value:g}</text>'
        )
    lines.append('</svg>')
    return Markup('\n'.join(lines))

"""
Formatting helpers shared by every page
Currency, number and percentage formatting plus parsing of loosely
formatted figures such as "$71.59M" or "60+"
"""
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Tuple

_BILLION = 1_000_000_000
_MILLION = 1_000_000
_THOUSAND = 1_000

_NUMBER_PREFIX = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')
_STRIP_CHARS = re.compile(r'[$,~+]')
_MULTIPLIER = re.compile(r'(\d+\.?\d*)x', re.IGNORECASE)


def _fixed(value: float, digits: int) -> str:
    """Fixed-point string rounded half away from zero"""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: float, compact: bool = True, decimals: int = 1) -> str:
    """
    Format a dollar amount

    Args:
        amount: Value in dollars
        compact: Use B/M/K suffixes instead of full digit grouping
        decimals: Fraction digits for the B and M suffixes (K is always whole)

    Returns:
        Formatted string, e.g. "$71.6M", "$270K" or "$1,234,567"
    """
    if compact:
        if amount >= _BILLION:
            return f'${_fixed(amount / _BILLION, decimals)}B'
        if amount >= _MILLION:
            return f'${_fixed(amount / _MILLION, decimals)}M'
        if amount >= _THOUSAND:
            return f'${_fixed(amount / _THOUSAND, 0)}K'
        return f'${_fixed(amount, 0)}'

    whole = Decimal(amount).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    if whole < 0:
        return f'-${-whole:,}'
    return f'${whole:,}'


def format_number(num: float) -> str:
    """Format a number with US digit grouping (up to 3 fraction digits)"""
    if isinstance(num, int):
        return f'{num:,}'
    rounded = Decimal(num).quantize(Decimal('0.001'), rounding=ROUND_HALF_UP)
    text = f'{rounded:,.3f}'.rstrip('0').rstrip('.')
    return '0' if text in ('-0', '') else text


def format_value(value: float, unit: str) -> str:
    """Format a goal value according to its unit"""
    if unit == 'dollars':
        return format_currency(value)
    return format_number(value)


def format_range(low: float, high: float) -> str:
    """Format a low/high dollar range for display"""
    return f'{format_currency(low)} – {format_currency(high)}'


def to_display(value: float, billions_decimals: int = 2, millions_decimals: int = 1) -> Dict[str, Any]:
    """Split a dollar value into the parts a count-up counter needs"""
    if value >= _BILLION:
        return {'end': value / _BILLION, 'prefix': '$', 'suffix': 'B', 'decimals': billions_decimals}
    if value >= _MILLION:
        return {'end': value / _MILLION, 'prefix': '$', 'suffix': 'M', 'decimals': millions_decimals}
    if value >= _THOUSAND:
        return {'end': value / _THOUSAND, 'prefix': '$', 'suffix': 'K', 'decimals': 0}
    return {'end': value, 'prefix': '$', 'suffix': '', 'decimals': 0}


def display_text(display: Dict[str, Any]) -> str:
    """Render counter parts as their final static text"""
    return f"{display['prefix']}{_fixed(display['end'], display['decimals'])}{display['suffix']}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up"""
    return int(math.floor(value + 0.5))


def completion_ratio(current: float, target: float) -> float:
    """Uncapped completion percentage; 0 when there is no target"""
    if target == 0:
        return 0.0
    return current / target * 100


def get_percentage(current: float, target: float) -> int:
    """Progress percentage, rounded and capped at 100"""
    if target == 0:
        return 0
    return min(round_half_up(current / target * 100), 100)


def extract_number(value: str) -> Optional[float]:
    """
    Extract a numeric value from strings like "$71.59M", "51", "60+",
    "~$3.2M" or "18,786"

    Returns:
        The leading number, or None when the text does not start with one
    """
    cleaned = _STRIP_CHARS.sub('', str(value)).strip()
    match = _NUMBER_PREFIX.match(cleaned)
    if not match:
        return None
    return float(match.group(0))


def extract_multipliers(data_points: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Collect "Nx" multipliers mentioned in comparison notes"""
    results = []
    for point in data_points:
        note = point.get('note') or ''
        match = _MULTIPLIER.search(note)
        if not match:
            continue
        raw = match.group(1)
        decimals = len(raw.split('.')[1]) if '.' in raw else 0
        results.append({
            'value': float(raw),
            'decimals': decimals,
            'metric': point.get('metric', ''),
            'note': point.get('note'),
        })
    return results


def short_competitor_name(name: str) -> str:
    """Short competitor label for bar charts"""
    if re.search(r'elevate', name, re.IGNORECASE):
        return 'ERC'
    if re.search(r'badlands|bh&b|bh ?& ?b', name, re.IGNORECASE):
        return 'BH&B'
    return name[:3]


def split_summary(summary: str) -> Tuple[str, str]:
    """Split a summary into its first sentence and the remainder"""
    first_dot = summary.find('. ')
    if first_dot == -1:
        return summary, ''
    return summary[:first_dot + 1], summary[first_dot + 1:].strip()


def truncate_label(name: str, limit: int = 12) -> str:
    """Shorten long names for chart axes"""
    if len(name) > limit:
        return name[:limit - 1] + '…'
    return name


def title_from_slug(slug: str) -> str:
    return ' '.join(word[:1].upper() + word[1:] for word in slug.split('-'))

"""
Helpers Module - Jinja filters for the page template
"""

import math


def css_number(value, precision=2):
    """
    Format a float for an inline style, without trailing zeros.

    Truncates rather than rounds, so a value below a bound never
    renders on the bound itself (299.997 -> '299.99').
    """
    scale = 10 ** precision
    truncated = math.floor(float(value) * scale) / scale
    text = f"{truncated:.{precision}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return '0' if text in ('', '-0') else text


def css_seconds(value):
    """Format a duration in seconds as a CSS time value"""
    return f"{css_number(value, precision=3)}s"


def mailto(address):
    """Build a mailto link"""
    return f"mailto:{address}" if address else ''

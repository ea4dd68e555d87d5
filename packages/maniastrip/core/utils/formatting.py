"""Number formatting for SVG attribute values."""

from __future__ import annotations


def format_number(value: float, decimals: int = 4) -> str:
    """Format a number compactly for markup.

    Integral values print without a decimal point; everything else is
    rounded to ``decimals`` places with trailing zeros stripped.

    Example:
        >>> format_number(100.0)
        '100'
        >>> format_number(0.30000000000000004)
        '0.3'
        >>> format_number(-12.5)
        '-12.5'
    """
    rounded = round(float(value), decimals)
    if rounded == 0:
        return "0"
    if rounded.is_integer():
        return str(int(rounded))
    return f"{rounded:.{decimals}f}".rstrip("0").rstrip(".")

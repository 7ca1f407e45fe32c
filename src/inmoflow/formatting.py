"""
Utilidades de formateo numérico compartidas por valuación y marketing.
"""

import math


def round_half_up(value: float) -> int:
    """Redondeo comercial (0.5 sube), no el redondeo bancario de round()."""
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """120.0 -> '120', 95.5 -> '95.5'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_amount(value: float) -> str:
    """Importe con separador de miles: 750000 -> '750,000'."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"

"""
Human-friendly relatively concise number formatting for annotation fragments.

.. autofunction:: format_float
"""

import math


__all__ = [
    "format_float",
]


def format_float(number: float, significant_figures: int = 3) -> str:
    """
    Format a floating point value in a concise, human-friendly way.

    This formatter will show up to ``significant_figures`` digits after the
    decimal point, with fewer digits being shown for each significant digit in
    the integer part.

    Trailing zeros after the decimal point are dropped, along with the trailing
    decimal point, so whole numbers render without a ".0" suffix.

    Ties are rounded half to even, as by :py:func:`round`, so 1234.5 is shown
    as "1234" and 1235.5 as "1236".

    Scientific notation is never used for large values. Significant digits
    before the decimal point are never dropped.
    """
    fractional, integer = math.modf(number)
    integer_str = f"{integer:.0f}"

    integer_digits = len(integer_str.lstrip("-0"))
    fractional_digits = max(0, significant_figures - integer_digits)
    fractional_str = f"{abs(fractional):.{fractional_digits}f}"[2:].rstrip("0")

    if len(fractional_str) == 0:
        return str(round(number))

    return f"{integer_str}.{fractional_str}"

import re

import math


decimal_pattern = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?",
    re.ASCII,
)


def number(value: str) -> float:
    """
    Parse a plain ASCII decimal number (e.g. 3, 2.5, .5 or 1e3) as a float.
    Throws a :py:exc:`ValueError` if this fails.

    Unlike :py:func:`float`, special values (e.g. 'inf' or 'nan'), digit group
    underscores, surrounding whitespace and non-ASCII digits are rejected, as
    are numbers too large to represent (e.g. 1e400).
    """
    if decimal_pattern.fullmatch(value) is None:
        raise ValueError(f"could not parse {value!r} as a number")

    result = float(value)
    if not math.isfinite(result):
        raise ValueError(f"{value!r} is too large")
    return result

"""
Display and input helpers shared by the pages
"""
import math
import re

_SERIES_SEPARATOR = re.compile(r'[,\s]+')


def rupiah(value):
    # "Rp 12.345", no decimals
    try:
        amount = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return "Rp 0"
    return "Rp " + f"{amount:,}".replace(",", ".")


def parse_series(text):
    """Parse numbers separated by commas and/or whitespace

    Tokens that are not numbers (or are nan/inf) are skipped.
    """
    series = []
    for token in _SERIES_SEPARATOR.split(text or ''):
        if not token:
            continue
        try:
            number = float(token)
        except ValueError:
            continue
        if math.isfinite(number):
            series.append(number)
    return series


def parse_number(value):
    """Parse a single form number, None when blank or invalid"""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None

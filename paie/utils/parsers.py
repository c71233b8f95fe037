"""Utilities for parsing amounts read from roster files.
Accepts French-style inputs such as ``1 234,56 €`` or ``(12,50)``.
"""

import math
import re
from decimal import Decimal

_CURRENCY_MARKS = ("EUR", "CAD", "€", "$")


def parse_amount(value):
    """
    Parseur neutre pour les montants avec virgule et parenthèses.
    Supporte 1 234,56 / 1.234,56 / 1234.56 et (1 234,56) pour négatif.
    Retourne float ou None si non parseable.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        number = float(value)
        # NaN (cellule vide pandas)
        return None if math.isnan(number) else number

    text = str(value).strip()
    if not text:
        return None

    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1].strip()

    for mark in _CURRENCY_MARKS:
        text = text.replace(mark, "")
    text = re.sub(r"[\s\u00a0\u202f]+", "", text)

    if "." in text and "," in text:
        # 1.234,56 -> 1234.56
        text = text.replace(".", "").replace(",", ".")
    elif "," in text:
        text = text.replace(",", ".")

    try:
        result = float(text)
    except ValueError:
        return None
    if not math.isfinite(result):
        return None
    return -result if negative else result

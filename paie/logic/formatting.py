from typing import Optional

from ..config.settings import get_devise


def fmt_money(value, devise: Optional[str] = None) -> str:
    """Formate un montant avec exactement deux décimales suivies de la devise.

    >>> fmt_money(3800, "€")
    '3800.00€'
    """
    suffix = get_devise() if devise is None else devise
    return f"{float(value):.2f}{suffix}"

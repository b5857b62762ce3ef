"""General utility helper functions."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

__all__ = ["clean_params", "to_decimal", "format_amount"]


def clean_params(params: Mapping[str, object]) -> dict[str, str]:
    """Return query parameters ready for the wire.

    ``None`` and empty-string values are dropped, booleans become
    ``"true"``/``"false"`` and everything else is stringified.

    Examples:
      {"page": 2, "search": ""} -> {"page": "2"}
      {"is_active": False} -> {"is_active": "false"}
    """
    out: dict[str, str] = {}
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        else:
            out[key] = str(value)
    return out


def to_decimal(value: object) -> Decimal:
    """Coerce an API amount (number, numeric string or None) to Decimal; junk counts as zero."""
    if value is None or value == "":
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")


def format_amount(amount: Decimal | int | float | None, currency: str = "XOF") -> str:
    """Return a ``1 234 567 XOF`` style label.

    Examples:
      1234567 -> "1 234 567 XOF"
      None -> "0 XOF"
    """
    value = to_decimal(amount).quantize(Decimal("1"))
    return f"{int(value):,}".replace(",", " ") + f" {currency}"

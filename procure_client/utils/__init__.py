"""Utility helpers shared by the resource modules.

Exposed functions:
    clean_params: Drops empty query parameters and stringifies the rest.
    to_decimal: Coerces API amounts to Decimal.
    format_amount: Formats an amount as a currency label.
"""

from .helpers import clean_params, format_amount, to_decimal

__all__ = ["clean_params", "format_amount", "to_decimal"]

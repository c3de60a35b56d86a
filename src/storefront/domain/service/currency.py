"""Currency formatting in the Brazilian Real (pt-BR) convention.

Amounts are rounded to cents with ROUND_HALF_EVEN, then rendered as
``R$`` + non-breaking space + ``1.234,56``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

CURRENCY_SYMBOL = "R$"
_CENT = Decimal("0.01")
_NBSP = "\u00a0"


def _to_decimal(amount: Decimal | int | float | str) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    try:
        return Decimal(str(amount))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Cannot format {amount!r} as currency") from exc


def format_currency(amount: Decimal | int | float | str) -> str:
    value = _to_decimal(amount)
    if not value.is_finite():
        raise ValidationError(f"Cannot format {amount!r} as currency")

    cents = value.quantize(_CENT, rounding=ROUND_HALF_EVEN)
    sign = "-" if cents < 0 else ""
    # "1,234.56" -> "1.234,56"
    digits = f"{abs(cents):,.2f}".translate(str.maketrans({",": ".", ".": ","}))
    return f"{sign}{CURRENCY_SYMBOL}{_NBSP}{digits}"

"""Money and month formatting for Brazilian Portuguese display"""

from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")

MONTHS_PT_SHORT = {
    1: "jan.", 2: "fev.", 3: "mar.", 4: "abr.", 5: "mai.", 6: "jun.",
    7: "jul.", 8: "ago.", 9: "set.", 10: "out.", 11: "nov.", 12: "dez.",
}


def quantize_cents(value: Decimal) -> Decimal:
    """Round to cent precision, half away from zero"""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal | float, private: bool = False, symbol: str = "R$") -> str:
    """Format as BRL: R$ 1.234,56 / -R$ 1.234,56, masked in private mode"""
    if private:
        return f"{symbol} ••••••"
    amount = quantize_cents(Decimal(str(value)))
    text = f"{abs(amount):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    if amount < 0:
        return f"-{symbol} {text}"
    return f"{symbol} {text}"


def format_month_label(year: int, month: int) -> str:
    """Return 'jan. 24' style short label."""
    return f"{MONTHS_PT_SHORT[month]} {year % 100:02d}"

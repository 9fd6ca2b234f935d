"""Currency presentation utilities"""


def round_cents(amount: float) -> float:
    """Round an amount to two decimal places for display"""
    return round(amount, 2)


def format_amount(amount: float, currency: str) -> str:
    """Format amount with thousands separators, e.g. LKR 1,313.96"""
    return f"{currency} {amount:,.2f}"


def format_percent(rate: float) -> str:
    """Format a percentage as given, dropping only trailing zeros (18.0 → 18%, 11.99999 → 11.99999%)"""
    text = repr(float(rate))
    if "." in text and "e" not in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text}%"

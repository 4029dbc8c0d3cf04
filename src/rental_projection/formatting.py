"""Display formatting for amounts and percentages. Not used by the engine."""

from rental_projection.data.defaults import CRORE, CURRENCY_SYMBOL, LAKH


def format_lakh(value: float) -> str:
    """Compact label in lakh: 2,223,408 → '₹22.2L'."""
    return f"{CURRENCY_SYMBOL}{value / LAKH:.1f}L"


def format_compact(value: float) -> str:
    """Axis label: crore above 1 Cr, lakh otherwise (1.5 Cr → '1.5Cr', 50,000 → '0.5L')."""
    if abs(value) >= CRORE:
        return f"{value / CRORE:.1f}Cr"
    return f"{value / LAKH:.1f}L"


def _group_indian(digits: str) -> str:
    # Last three digits, then groups of two: 12345678 → 1,23,45,678
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(value: float) -> str:
    """Full amount with Indian digit grouping, no decimals: -1234567.8 → '-₹12,34,568'."""
    sign = "-" if round(value) < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(str(abs(round(value))))}"


def format_pct(value: float) -> str:
    """Value already in percent: 6.54 → '6.54%'."""
    return f"{value:.2f}%"


def axis_formatter(x: float, _: object) -> str:
    """matplotlib FuncFormatter callback for currency axes."""
    return format_compact(x)

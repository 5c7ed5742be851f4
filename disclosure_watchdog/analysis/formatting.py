"""
Money display helpers.

Stored values are thousands of won. Large amounts are shown in Korean
10^8 (억) and 10^4 (만) groups rather than thousands separators:

    >>> format_money(1234567)
    '12억 3456만원'
"""
from disclosure_watchdog.config.constants import (
    MONEY_UNIT_MULTIPLIER,
    EOK,
    MAN,
    CURRENCY_MARKER,
)


def _split(amount: int) -> tuple[str, int, int]:
    """Return (sign, 억, 만) for an amount in thousands of won"""
    real_amount = amount * MONEY_UNIT_MULTIPLIER
    sign = "-" if real_amount < 0 else ""
    magnitude = abs(real_amount)
    eok = magnitude // EOK
    man = (magnitude % EOK) // MAN
    return sign, eok, man


def format_money(amount: int) -> str:
    """
    Format an amount (thousands of won) for display.

    Examples:
        >>> format_money(0)
        '0원'
        >>> format_money(100000)
        '1억 원'
        >>> format_money(-1500)
        '-150만원'
    """
    if amount == 0:
        return f"0{CURRENCY_MARKER}"

    sign, eok, man = _split(amount)
    if eok > 0:
        man_part = f"{man}만" if man > 0 else ""
        return f"{sign}{eok}억 {man_part}{CURRENCY_MARKER}"
    return f"{sign}{man}만{CURRENCY_MARKER}"


def format_simple(amount: int) -> str:
    """Rough amount for summary cards, e.g. '12억+' or '350만+'"""
    if amount == 0:
        return "-"

    sign, eok, man = _split(amount)
    if eok > 0:
        return f"{sign}{eok}억+"
    return f"{sign}{man}만+"


def format_change(change_amount: int, change_rate_percent: float) -> str:
    """
    Year-over-year change line for ranking cards.

    Examples:
        >>> format_change(100000, 4.5)
        '▲ 4.5% (+1억 원)'
    """
    arrow = "▲" if change_amount >= 0 else "▼"
    plus = "+" if change_amount > 0 else ""
    return f"{arrow} {abs(change_rate_percent):.1f}% ({plus}{format_money(change_amount)})"

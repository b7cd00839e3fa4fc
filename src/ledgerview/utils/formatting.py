"""Display formatting helpers: truncation, amounts, K/M/B suffixes, relative age.

All output is locale independent.
"""

import time
from decimal import ROUND_HALF_UP, Decimal, localcontext

ELLIPSIS = "..."
UNKNOWN = "--"

ONE_SEC_MS = 1000
ONE_MIN_MS = 60 * ONE_SEC_MS
ONE_HOUR_MS = 60 * ONE_MIN_MS
ONE_DAY_MS = 24 * ONE_HOUR_MS

# (full label, short label)
TIME_LABELS: dict[str, tuple[str, str]] = {
    "day": ("day", "d"),
    "hour": ("hour", "h"),
    "min": ("min", "m"),
    "sec": ("sec", "s"),
}

# Largest first
SUFFIXES: tuple[tuple[str, int], ...] = (
    ("T", 10**12),
    ("B", 10**9),
    ("M", 10**6),
    ("K", 10**3),
)


def now_ms() -> int:
    return int(time.time() * 1000)


def truncate(full: str, length: int, separator: str = ELLIPSIS) -> str:
    """Shorten to ``length`` chars by replacing the middle with ``separator``.

    The front keeps the extra char when the budget is odd:
    ``truncate("0x1234567890abcdef", 10) == "0x12...def"``.
    """
    if len(full) <= length:
        return full
    chars_to_show = max(length - len(separator), 0)
    front = -(-chars_to_show // 2)
    back = chars_to_show // 2
    return full[:front] + separator + (full[-back:] if back else "")


def present_amount(amount: int) -> str:
    """Group an integer amount with thousands separators: 123456789 -> '123,456,789'."""
    return f"{int(amount):,}"


def _scaled(n: int, unit: int) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = max(28, len(str(n)) + 2)
        return (Decimal(n) / Decimal(unit)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def number_suffix(num: int) -> str:
    """Human-scale an integer: 1500 -> '1.5K', 2_000_000 -> '2M', 999 -> '999'."""
    sign = "-" if num < 0 else ""
    n = abs(int(num))
    for i, (suffix, unit) in enumerate(SUFFIXES):
        if n < unit:
            continue
        scaled = _scaled(n, unit)
        # 999_950 rounds to 1000.0K; show it as 1M instead
        if scaled >= 1000 and i > 0:
            suffix, unit = SUFFIXES[i - 1]
            scaled = _scaled(n, unit)
        text = format(scaled, "f")
        if text.endswith(".0"):
            text = text[:-2]
        return f"{sign}{text}{suffix}"
    return f"{sign}{n}"


def time_ago(epoch_ms: int | None, now: int | None = None, short: bool = False) -> str:
    """Relative age using the two most significant units, e.g. '2 days 3 hours' or '2d 3h'.

    Returns '' for an absent timestamp.
    """
    if epoch_ms is None:
        return ""
    if now is None:
        now = now_ms()

    remaining = max(now - epoch_ms, 0)
    if remaining >= ONE_DAY_MS:
        units = (("day", ONE_DAY_MS), ("hour", ONE_HOUR_MS))
    elif remaining >= ONE_HOUR_MS:
        units = (("hour", ONE_HOUR_MS), ("min", ONE_MIN_MS))
    else:
        units = (("min", ONE_MIN_MS), ("sec", ONE_SEC_MS))

    parts = []
    for name, size in units:
        whole, remaining = divmod(remaining, size)
        if not whole:
            continue
        full, abbr = TIME_LABELS[name]
        if short:
            parts.append(f"{whole}{abbr}")
        else:
            parts.append(f"{whole} {full}{'s' if whole > 1 else ''}")

    if parts:
        return " ".join(parts)
    return "< 1s" if short else "< 1 sec"

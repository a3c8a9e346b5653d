"""Rendering rules for sizes, prices and counts in console reports."""

from doc_summarizer.core.errors import require_non_negative

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]
BYTES_PER_UNIT_STEP = 1024
CURRENCY_SYMBOL = "$"


def format_bytes(num_bytes: int | float) -> str:
    """Render a byte count with 1024-based units and at most two decimals, e.g. "1.5 KB"."""
    require_non_negative(num_bytes, "num_bytes")
    if num_bytes == 0:
        return "0 Bytes"

    unit_index = 0
    while unit_index < len(SIZE_UNITS) - 1 and num_bytes >= BYTES_PER_UNIT_STEP ** (unit_index + 1):
        unit_index += 1

    scaled = f"{num_bytes / BYTES_PER_UNIT_STEP ** unit_index:.2f}".rstrip("0").rstrip(".")
    return f"{scaled} {SIZE_UNITS[unit_index]}"


def format_price(amount: float) -> str:
    require_non_negative(amount, "amount")
    return f"{CURRENCY_SYMBOL}{amount:.4f}"


def format_number(count: int) -> str:
    return f"{count:,}"


def format_percentage(percent: float) -> str:
    return f"{percent:.2f}%"


def format_ratio(ratio: float | None) -> str:
    if ratio is None:
        return "n/a"
    return f"{ratio:.2f}:1"

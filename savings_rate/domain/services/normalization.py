"""Domain normalization helpers for legacy text amounts."""

import re
from decimal import Decimal, InvalidOperation

from savings_rate.domain.constants import DEFAULT_COMMODITY
from savings_rate.domain.errors import ParseError

_SYMBOL_PREFIX = re.compile(r"^[^\d\s.,+-]+\s*")
_SYMBOL_SUFFIX = re.compile(r"\s*[^\d\s.,+-]+$")


def normalize_commodity_code(code: str | None) -> str | None:
    """Normalize commodity codes such as ``usd `` to ``USD``.

    Args:
        code: Raw commodity code.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


def _strip_amount_text(text: str, commodity: str) -> str:
    cleaned = text.strip()
    if commodity and cleaned.endswith(commodity):
        cleaned = cleaned[: -len(commodity)]
    cleaned = _SYMBOL_SUFFIX.sub("", cleaned.strip())
    cleaned = _SYMBOL_PREFIX.sub("", cleaned)
    return cleaned.replace(",", "").strip()


def parse_amount_decimal(
    text: str,
    commodity: str = DEFAULT_COMMODITY,
) -> Decimal:
    """Parse a display amount like ``"1,234.56 USD"`` into a Decimal.

    Args:
        text: Amount cell from a legacy text report.
        commodity: Commodity code expected as suffix.

    Returns:
        Decimal: Exact numeric value.

    Raises:
        ParseError: If the remainder is not numeric.
    """
    cleaned = _strip_amount_text(text, commodity)
    if not cleaned:
        raise ParseError(f"Amount is not numeric: {text!r}")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ParseError(f"Amount is not numeric: {text!r}") from exc
    if not value.is_finite():
        raise ParseError(f"Amount is not numeric: {text!r}")
    return value


def parse_amount_text(text: str, commodity: str = DEFAULT_COMMODITY) -> float:
    """Parse a display amount like ``"1,234.56 USD"`` into a float.

    Args:
        text: Amount cell from a legacy text report.
        commodity: Commodity code expected as suffix.

    Returns:
        float: Numeric value, e.g. ``1234.56``.

    Raises:
        ParseError: If the remainder is not numeric.
    """
    return float(parse_amount_decimal(text, commodity))


def parse_liabilities_text(
    raw: str,
    commodity: str = DEFAULT_COMMODITY,
) -> float:
    """Parse the output of a ``--format '%(total)'`` balance query.

    Only the last non-empty line carries the grand total.

    Args:
        raw: Raw command output.
        commodity: Commodity code expected as suffix.

    Returns:
        float: Liabilities total.

    Raises:
        ParseError: If the output is empty or the total is not numeric.
    """
    lines = [line for line in raw.splitlines() if line.strip()]
    if not lines:
        raise ParseError("Liabilities output is empty")
    return parse_amount_text(lines[-1], commodity)


__all__ = [
    "normalize_commodity_code",
    "parse_amount_decimal",
    "parse_amount_text",
    "parse_liabilities_text",
]

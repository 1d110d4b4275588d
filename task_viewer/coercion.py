"""Value coercion shared by the format adapters."""

from __future__ import annotations

import logging
import math

from task_viewer.schema import PLACEHOLDER

logger = logging.getLogger(__name__)

_CURRENCY_PREFIX = "$"
_RATE_SUFFIX = "/hr"


def clean_field(text: str | None) -> str:
    """Trim surrounding whitespace and double quotes from a raw field."""

    if not text:
        return ""
    return text.strip(' \t\r\n"')


def to_amount(text: str) -> float | None:
    """Parse a non-negative finite number, or return None."""

    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number) or number < 0:
        return None
    return number


def _coerce(token: str | None, field: str, suffix: str = "") -> float:
    text = clean_field(token)
    if text in ("", PLACEHOLDER):
        return 0.0

    number_text = text.removeprefix(_CURRENCY_PREFIX)
    if suffix:
        number_text = number_text.removesuffix(suffix)

    amount = to_amount(number_text.strip())
    if amount is None:
        logger.warning("Could not parse %s %r, using 0", field, token)
        return 0.0
    return amount


def coerce_currency(token: str | None, field: str = "value") -> float:
    """Convert "$12.50" (or a bare "12.50") to a float, 0.0 when absent or malformed."""

    return _coerce(token, field)


def coerce_rate(token: str | None, field: str = "rate") -> float:
    """Convert "$8.00/hr" to 8.0, 0.0 when absent or malformed."""

    return _coerce(token, field, suffix=_RATE_SUFFIX)

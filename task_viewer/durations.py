"""Compact duration tokens ("1h 30m", "45m", "15s") to minutes."""

from __future__ import annotations

import logging
import math

from task_viewer.coercion import to_amount
from task_viewer.schema import PLACEHOLDER

logger = logging.getLogger(__name__)

# (marker, multiplier, divisor) to minutes, scanned in this order
_UNITS = (("h", 60.0, 1.0), ("m", 1.0, 1.0), ("s", 1.0, 60.0))


def parse_duration(text: str | None) -> float:
    """Convert a duration token into fractional minutes.

    Each unit marker that is present splits the remaining text at its first
    occurrence: the prefix is read as that unit, the rest is scanned for the
    next marker. A prefix that is not a number contributes nothing. Text with
    no unit marker at all (e.g. a bare "30") is treated as malformed.
    """

    remaining = (text or "").strip()
    if remaining in ("", PLACEHOLDER):
        return 0.0

    total = 0.0
    found_unit = False
    for marker, multiplier, divisor in _UNITS:
        prefix, sep, rest = remaining.partition(marker)
        if not sep:
            continue
        found_unit = True
        amount = to_amount(prefix.strip())
        minutes = amount * multiplier / divisor if amount is not None else None
        if minutes is None or not math.isfinite(total + minutes):
            logger.warning("Could not parse %r in duration %r", prefix.strip() + marker, text)
        else:
            total += minutes
        remaining = rest.strip()

    if not found_unit:
        logger.warning("Duration %r has no h/m/s unit, using 0", text)
    return total

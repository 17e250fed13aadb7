"""Current-date provider for Almanac.

Every "today" in the library comes from :func:`today`. The answer can be
pinned for tests or simulations, either programmatically with
:func:`set_current_date` or through the ``ALMANAC_TODAY`` environment
variable (``YYYY-MM-DD``). A programmatic override wins over the
environment; without either, the system clock is read.

Examples:
    >>> set_current_date((10, 11, 2002))
    >>> today()
    (10, 11, 2002)
    >>> set_current_date(None)
"""

from __future__ import annotations

import datetime as _datetime
import logging
import os
import re

from almanac._internal.constants import TODAY_ENV_VAR
from almanac.errors import ClockError

logger = logging.getLogger(__name__)

_ENV_PATTERN = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})\s*$")

# Internal override as (day, month, year)
_current_date_override: tuple[int, int, int] | None = None


def set_current_date(value: tuple[int, int, int] | None) -> None:
    """Pin the current date, or release the pin with None.

    Args:
        value: A (day, month, year) triple, or None to read the real clock.

    Raises:
        ClockError: If value is not a triple of integers.
    """
    global _current_date_override
    if value is None:
        _current_date_override = None
        return
    try:
        day, month, year = value
    except (TypeError, ValueError) as exc:
        raise ClockError(f"expected (day, month, year), got {value!r}") from exc
    if not all(isinstance(part, int) for part in (day, month, year)):
        raise ClockError(f"expected integer (day, month, year), got {value!r}")
    _current_date_override = (day, month, year)


def _from_environment() -> tuple[int, int, int] | None:
    raw = os.getenv(TODAY_ENV_VAR)
    if not raw:
        return None
    match = _ENV_PATTERN.match(raw)
    if not match:
        logger.warning("ignoring %s=%r: expected YYYY-MM-DD", TODAY_ENV_VAR, raw)
        return None
    year, month, day = (int(group) for group in match.groups())
    return (day, month, year)


def today(utc: bool = False) -> tuple[int, int, int]:
    """Return today's date as (day, month, year).

    Args:
        utc: Read the UTC date instead of the local date. Ignored when the
            clock is pinned.

    Returns:
        Tuple of (day, month, year).
    """
    if _current_date_override is not None:
        return _current_date_override

    pinned = _from_environment()
    if pinned is not None:
        return pinned

    if utc:
        now = _datetime.datetime.now(_datetime.timezone.utc).date()
    else:
        now = _datetime.date.today()
    return (now.day, now.month, now.year)


__all__ = [
    "set_current_date",
    "today",
]

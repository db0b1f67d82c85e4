"""Pay-period parsing and canonical payslip naming."""

import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from .models import PayPeriod

MONTH_NUMERALS = MappingProxyType(
    {
        "Jan": "01",
        "Feb": "02",
        "Mar": "03",
        "Apr": "04",
        "May": "05",
        "Jun": "06",
        "Jul": "07",
        "Aug": "08",
        "Sep": "09",
        "Oct": "10",
        "Nov": "11",
        "Dec": "12",
    }
)

DEFAULT_SUFFIX = " - saab au payslip"
DEFAULT_COLLISION_SUFFIX = " (extra)"

PAY_PERIOD_PATTERN = re.compile(
    r"PAY PERIOD (\d{2}) ([A-Za-z]+) (\d{4}) TO (\d{2}) ([A-Za-z]+) (\d{4})"
)


def month_to_numeral(name: str) -> str:
    """Convert a three-letter month abbreviation to its two-digit numeral.

    Unrecognised names yield ``Unknown-<name>`` so a filename can always be
    built from the result.
    """
    return MONTH_NUMERALS.get(name, f"Unknown-{name}")


def parse_pay_period(lines: Iterable[str]) -> PayPeriod | None:
    """Return the pay period of the first matching line, or None."""
    for line in lines:
        match = PAY_PERIOD_PATTERN.search(line)
        if match:
            return PayPeriod(*match.groups())
    return None


def canonical_filename(period: PayPeriod, suffix: str = DEFAULT_SUFFIX) -> str:
    """Build ``YYYY-MM-DD<suffix>.txt`` from the period end date."""
    month = month_to_numeral(period.end_month)
    return f"{period.end_year}-{month}-{period.end_day}{suffix}.txt"


def collision_candidates(
    target: Path, collision_suffix: str = DEFAULT_COLLISION_SUFFIX
) -> Iterator[Path]:
    """Yield alternate paths for a taken target name.

    ``<stem> (extra).txt`` first, then ``<stem> (extra 2).txt`` and so on.
    """
    yield target.with_name(f"{target.stem}{collision_suffix}{target.suffix}")

    # " (extra)" -> " (extra 2)"
    base = collision_suffix.rstrip(")")
    closing = collision_suffix[len(base):]
    counter = 2
    while True:
        yield target.with_name(f"{target.stem}{base} {counter}{closing}{target.suffix}")
        counter += 1

"""Expansion of recurring calendar events."""

import calendar
from datetime import date, datetime, timedelta

from ..exceptions import InvalidRecurrenceRuleError
from ..logging_config import get_logger, log_context
from ..models import RecurrenceRule

logger = get_logger(__name__)

FREQUENCIES = ("daily", "weekly", "monthly", "yearly")
DEFAULT_LIMIT = 366


def _parse_date(value: str, name: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError as e:
        raise InvalidRecurrenceRuleError(f"Invalid {name}: {value!r}") from e


def _add_months(start: date, months: int) -> date:
    """Shift by whole months, clamping to the last day of the target month."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _occurrence(start: date, frequency: str, steps: int) -> date:
    if frequency == "daily":
        return start + timedelta(days=steps)
    if frequency == "weekly":
        return start + timedelta(weeks=steps)
    if frequency == "monthly":
        return _add_months(start, steps)
    return _add_months(start, 12 * steps)


def validate_rule(rule: RecurrenceRule) -> None:
    """Raise InvalidRecurrenceRuleError if the rule cannot be expanded."""
    if rule.frequency not in FREQUENCIES:
        raise InvalidRecurrenceRuleError(f"Unknown frequency: {rule.frequency!r}")
    if rule.interval < 1:
        raise InvalidRecurrenceRuleError("interval must be at least 1")
    if rule.count is not None and rule.count < 1:
        raise InvalidRecurrenceRuleError("count must be at least 1")


def get_recurring_dates(
    start_date: str,
    rule: RecurrenceRule,
    limit: int = DEFAULT_LIMIT,
) -> list[str]:
    """
    List the dates on which a recurring event takes place.

    The series starts at ``start_date`` and advances ``rule.interval`` units
    of ``rule.frequency`` at a time. It ends after ``rule.count`` dates, after
    the last date not later than ``rule.until``, or after ``limit`` dates,
    whichever comes first, and never runs past ``date.max``. Monthly and
    yearly series are anchored on the start day and fall back to the month's
    last day when it is shorter (Jan 31 -> Feb 28 -> Mar 31).

    A rule with neither ``count`` nor ``until`` is unbounded and yields only
    the start date.

    Args:
        start_date: ISO date or datetime of the first occurrence.
        rule: Recurrence rule.
        limit: Upper bound on the number of dates returned.

    Returns:
        ISO dates (YYYY-MM-DD) in ascending order.

    Raises:
        InvalidRecurrenceRuleError: Bad frequency, interval, count or date.
    """
    validate_rule(rule)
    start = _parse_date(start_date, "start date")

    if rule.count is None and not rule.until:
        return [start.isoformat()]

    until = _parse_date(rule.until, "until date") if rule.until else None

    dates: list[str] = []
    for n in range(limit):
        try:
            current = _occurrence(start, rule.frequency, n * rule.interval)
        except (OverflowError, ValueError):
            # Past date.max: the calendar ends here.
            break
        if until is not None and current > until:
            break
        dates.append(current.isoformat())
        if rule.count is not None and len(dates) >= rule.count:
            break

    logger.debug(
        "Expanded recurrence",
        extra=log_context(start=start_date, frequency=rule.frequency, dates=len(dates)),
    )
    return dates

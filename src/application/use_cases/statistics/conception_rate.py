from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from dateutil.relativedelta import relativedelta

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.event import Event, EventStatus, EventType, PregnancyResult
from src.utils.datetime_tz import ensure_utc, start_of_month, utc_now

logger = logging.getLogger(__name__)

TRAILING_MONTHS = 12
_NEGATIVE_KEYWORDS = ("not pregnant", "negative")
_POSITIVE_KEYWORDS = ("confirmed", "positive", "pregnant")


@dataclass(slots=True)
class MonthlyConceptionRate:
    month: str
    month_start: datetime
    total_pregnancy_checks: int
    successful_pregnancy_checks: int
    conception_rate: int


def is_successful(check: Event) -> bool:
    """Decide whether a completed pregnancy check confirmed a pregnancy.

    The explicit result wins. Older records without one fall back to the
    wording of their notes; anything undecidable counts as a failure.
    """
    if check.result == PregnancyResult.POSITIVE.value:
        return True
    if check.result == PregnancyResult.NEGATIVE.value:
        return False
    if check.notes:
        notes = check.notes.lower()
        if any(word in notes for word in _NEGATIVE_KEYWORDS):
            return False
        if any(word in notes for word in _POSITIVE_KEYWORDS):
            return True
    return False


def percentage(part: int, total: int) -> int:
    if total <= 0:
        return 0
    value = Decimal(part * 100) / Decimal(total)
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


async def execute(uow: UnitOfWork, now: datetime | None = None) -> list[MonthlyConceptionRate]:
    current = start_of_month(ensure_utc(now) if now else utc_now())
    month_starts = [current - relativedelta(months=i) for i in range(TRAILING_MONTHS - 1, -1, -1)]

    checks = await uow.events.list(
        event_type=EventType.PREGNANCY_CHECK.value,
        status=EventStatus.COMPLETED.value,
        completed_from=month_starts[0],
        completed_to=current + relativedelta(months=1),
    )

    buckets: dict[tuple[int, int], list[Event]] = {(m.year, m.month): [] for m in month_starts}
    for check in checks:
        completed = ensure_utc(check.completed_date)
        if completed is None:
            continue
        key = (completed.year, completed.month)
        if key in buckets:
            buckets[key].append(check)

    monthly: list[MonthlyConceptionRate] = []
    for start in month_starts:
        month_checks = buckets[(start.year, start.month)]
        total = len(month_checks)
        successful = sum(1 for c in month_checks if is_successful(c))
        monthly.append(
            MonthlyConceptionRate(
                month=start.strftime("%b %Y"),
                month_start=start,
                total_pregnancy_checks=total,
                successful_pregnancy_checks=successful,
                conception_rate=percentage(successful, total),
            )
        )
    logger.debug("Conception rate computed over %d pregnancy checks", len(checks))
    return monthly

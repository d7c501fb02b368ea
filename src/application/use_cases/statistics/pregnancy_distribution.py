from __future__ import annotations

import logging
from dataclasses import dataclass

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.statistics.conception_rate import percentage
from src.domain.value_objects.animal_category import Gender
from src.domain.value_objects.reproductive_status import ReproductiveStatus

logger = logging.getLogger(__name__)

# Display order; ties in count keep this order.
STATUS_ORDER = (
    ReproductiveStatus.OPEN,
    ReproductiveStatus.BRED,
    ReproductiveStatus.CONFIRMED_PREGNANT,
    ReproductiveStatus.DRY,
    ReproductiveStatus.NOT_BRED,
)

STATUS_COLORS = {
    ReproductiveStatus.OPEN: "#8884d8",
    ReproductiveStatus.BRED: "#82ca9d",
    ReproductiveStatus.CONFIRMED_PREGNANT: "#ffc658",
    ReproductiveStatus.DRY: "#ff8042",
    ReproductiveStatus.NOT_BRED: "#0088fe",
}


@dataclass(slots=True)
class StatusBucket:
    status: str
    label: str
    count: int
    percentage: int
    color: str


@dataclass(slots=True)
class PregnancyDistribution:
    total: int
    distribution: list[StatusBucket]


async def execute(uow: UnitOfWork) -> PregnancyDistribution:
    females = await uow.animals.list(gender=Gender.FEMALE.value)

    counts = {status: 0 for status in STATUS_ORDER}
    for animal in females:
        raw = animal.reproductive_status or ReproductiveStatus.NOT_BRED.value
        try:
            counts[ReproductiveStatus(raw)] += 1
        except ValueError:
            logger.debug("Skipping animal %s with unknown status %r", animal.tag, raw)

    total = len(females)
    buckets = [
        StatusBucket(
            status=status.value,
            label=status.label,
            count=counts[status],
            percentage=percentage(counts[status], total),
            color=STATUS_COLORS[status],
        )
        for status in STATUS_ORDER
    ]
    buckets.sort(key=lambda b: b.count, reverse=True)
    return PregnancyDistribution(total=total, distribution=buckets)

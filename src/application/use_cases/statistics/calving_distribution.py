from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.event import EventStatus, EventType
from src.utils.datetime_tz import ensure_utc

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(slots=True)
class MonthCount:
    month: int  # 0 = January
    name: str
    count: int


@dataclass(slots=True)
class HeatmapCell:
    date: str  # YYYY-MM
    year: int
    month: int  # 0 = January
    count: int


@dataclass(slots=True)
class CalvingDistribution:
    total_calvings: int
    distribution_by_month: list[MonthCount]
    heatmap: list[HeatmapCell]


async def execute(uow: UnitOfWork) -> CalvingDistribution:
    calvings = await uow.events.list(
        event_type=EventType.CALVING.value,
        status=EventStatus.COMPLETED.value,
    )

    by_month: Counter[int] = Counter()
    by_year_month: Counter[tuple[int, int]] = Counter()
    for event in calvings:
        completed = ensure_utc(event.completed_date)
        if completed is None:
            continue
        by_month[completed.month - 1] += 1
        by_year_month[(completed.year, completed.month - 1)] += 1

    return CalvingDistribution(
        total_calvings=sum(by_month.values()),
        distribution_by_month=[
            MonthCount(month=index, name=name, count=by_month[index])
            for index, name in enumerate(MONTH_NAMES)
        ],
        heatmap=[
            HeatmapCell(date=f"{year}-{month + 1:02d}", year=year, month=month, count=count)
            for (year, month), count in sorted(by_year_month.items())
        ],
    )

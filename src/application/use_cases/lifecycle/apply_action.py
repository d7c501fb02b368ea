from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.breeding_config_service import BreedingConfigService
from src.domain.models.animal import Animal
from src.domain.models.breeding_config import BreedingConfig
from src.domain.models.event import (
    Event,
    EventPriority,
    EventStatus,
    EventType,
    PregnancyResult,
    ReminderTime,
    SemenDetails,
)
from src.domain.value_objects.action_kind import ActionKind
from src.domain.value_objects.reproductive_status import ReproductiveStatus
from src.utils.datetime_tz import ensure_utc, utc_now

logger = logging.getLogger(__name__)

HEAT_TO_INSEMINATION = timedelta(hours=12)
POST_CALVING_HEALTH_CHECK = timedelta(days=14)


@dataclass(slots=True)
class ApplyActionInput:
    animal_id: UUID
    action: str
    notes: str | None = None
    semen_details: SemenDetails | None = None


@dataclass(slots=True)
class ActionResult:
    action: ActionKind
    animal: Animal
    message: str
    completed_event: Event | None = None
    recorded_event: Event | None = None
    scheduled_events: list[Event] = field(default_factory=list)


@dataclass(slots=True)
class _ActionContext:
    uow: UnitOfWork
    animal: Animal
    config: BreedingConfig
    now: datetime
    notes: str | None
    semen_details: SemenDetails | None


async def _complete_pending(
    ctx: _ActionContext,
    event_type: EventType,
    *,
    result: PregnancyResult | None = None,
    semen_details: SemenDetails | None = None,
) -> Event | None:
    pending = await ctx.uow.events.find_pending(ctx.animal.id, event_type.value)
    if not pending:
        return None
    if len(pending) > 1:
        logger.warning(
            "Animal %s has %d pending %s events; completing the earliest scheduled",
            ctx.animal.tag,
            len(pending),
            event_type.value,
        )
    event = pending[0]
    event.complete(
        ctx.now,
        notes=ctx.notes,
        result=result.value if result else None,
        semen_details=semen_details,
    )
    return await ctx.uow.events.update(event)


async def _update_animal(ctx: _ActionContext, data: dict) -> Animal:
    updated = await ctx.uow.animals.update(ctx.animal.id, {**data, "updated_at": utc_now()})
    if updated is None:
        raise NotFound(f"Animal {ctx.animal.id} not found")
    return updated


async def _record(
    ctx: _ActionContext,
    event_type: EventType,
    description: str,
    *,
    semen_details: SemenDetails | None = None,
    associated: list[UUID] | None = None,
) -> Event:
    event = Event.create(
        animal_id=ctx.animal.id,
        event_type=event_type.value,
        title=f"{event_type.title} for {ctx.animal.tag}",
        description=description,
        scheduled_date=ctx.now,
        status=EventStatus.COMPLETED.value,
        completed_date=ctx.now,
        priority=EventPriority.HIGH.value,
        notes=ctx.notes or "",
        semen_details=semen_details,
        location=ctx.animal.location,
        associated_events=associated,
    )
    return await ctx.uow.events.add(event)


async def _schedule(
    ctx: _ActionContext,
    event_type: EventType,
    scheduled_date: datetime,
    description: str,
    *,
    priority: EventPriority = EventPriority.HIGH,
    reminder: ReminderTime | None = None,
    associated: list[UUID] | None = None,
) -> Event:
    event = Event.create(
        animal_id=ctx.animal.id,
        event_type=event_type.value,
        title=f"{event_type.title} for {ctx.animal.tag}",
        description=description,
        scheduled_date=scheduled_date,
        status=EventStatus.PENDING.value,
        priority=priority.value,
        reminder_time=reminder or ReminderTime(value=1, unit="day"),
        location=ctx.animal.location,
        associated_events=associated,
    )
    return await ctx.uow.events.add(event)


async def _handle_health_check(ctx: _ActionContext) -> ActionResult:
    completed = await _complete_pending(ctx, EventType.HEALTH_CHECK)
    animal = await _update_animal(ctx, {"last_health_check_date": ctx.now})
    next_check = await _schedule(
        ctx,
        EventType.HEALTH_CHECK,
        ctx.now + timedelta(days=ctx.config.health_check_interval_days),
        "Regular health examination",
        priority=EventPriority.MEDIUM,
    )
    return ActionResult(
        action=ActionKind.HEALTH_CHECK,
        animal=animal,
        message="Health check recorded and next check scheduled",
        completed_event=completed,
        scheduled_events=[next_check],
    )


async def _handle_heat_symptoms(ctx: _ActionContext) -> ActionResult:
    if not ctx.animal.is_female:
        raise ValidationError("Heat symptoms can only be recorded for female animals")

    heat_event = await _record(ctx, EventType.HEAT_OBSERVED, "Heat symptoms observed")
    animal = await _update_animal(
        ctx,
        {"last_heat_day": ctx.now, "reproductive_status": ReproductiveStatus.OPEN.value},
    )
    insemination = await _schedule(
        ctx,
        EventType.INSEMINATION,
        ctx.now + HEAT_TO_INSEMINATION,
        "Scheduled insemination following observed heat",
        reminder=ReminderTime(value=2, unit="hour"),
        associated=[heat_event.id],
    )
    return ActionResult(
        action=ActionKind.HEAT_SYMPTOMS,
        animal=animal,
        message="Heat symptoms recorded and insemination scheduled",
        recorded_event=heat_event,
        scheduled_events=[insemination],
    )


async def _handle_insemination(ctx: _ActionContext) -> ActionResult:
    completed = await _complete_pending(
        ctx, EventType.INSEMINATION, semen_details=ctx.semen_details
    )
    recorded = None
    if completed is None:
        # Unscheduled insemination: keep a history record carrying the semen used.
        recorded = await _record(
            ctx,
            EventType.INSEMINATION,
            "Insemination performed",
            semen_details=ctx.semen_details,
        )
    insemination_event = completed or recorded

    animal = await _update_animal(
        ctx,
        {
            "last_insemination_date": ctx.now,
            "reproductive_status": ReproductiveStatus.BRED.value,
        },
    )
    pregnancy_check = await _schedule(
        ctx,
        EventType.PREGNANCY_CHECK,
        ctx.now + timedelta(days=ctx.config.insemination_to_pregnancy_check_days),
        "Verify if insemination was successful",
        associated=[insemination_event.id],
    )
    return ActionResult(
        action=ActionKind.INSEMINATION,
        animal=animal,
        message="Insemination recorded and pregnancy check scheduled",
        completed_event=completed,
        recorded_event=recorded,
        scheduled_events=[pregnancy_check],
    )


async def _handle_pregnancy_confirmed(ctx: _ActionContext) -> ActionResult:
    completed = await _complete_pending(
        ctx, EventType.PREGNANCY_CHECK, result=PregnancyResult.POSITIVE
    )
    inseminated_at = ensure_utc(ctx.animal.last_insemination_date)
    animal = await _update_animal(
        ctx, {"reproductive_status": ReproductiveStatus.CONFIRMED_PREGNANT.value}
    )
    if inseminated_at is None:
        return ActionResult(
            action=ActionKind.PREGNANCY_CONFIRMED,
            animal=animal,
            message="Pregnancy confirmed",
            completed_event=completed,
        )

    associated = [completed.id] if completed else None
    expected_calving_date = inseminated_at + timedelta(days=ctx.config.pregnancy_length_days)
    dry_off_date = expected_calving_date - timedelta(
        days=ctx.config.dry_off_days_before_calving
    )
    expected_calving = await _schedule(
        ctx,
        EventType.EXPECTED_CALVING,
        expected_calving_date,
        "Prepare for calving",
        reminder=ReminderTime(value=7, unit="day"),
        associated=associated,
    )
    dry_off = await _schedule(
        ctx,
        EventType.DRY_OFF,
        dry_off_date,
        "Prepare for calving by stopping milking",
        associated=associated,
    )
    return ActionResult(
        action=ActionKind.PREGNANCY_CONFIRMED,
        animal=animal,
        message="Pregnancy confirmed, dry-off and calving events scheduled",
        completed_event=completed,
        scheduled_events=[expected_calving, dry_off],
    )


async def _handle_not_pregnant(ctx: _ActionContext) -> ActionResult:
    completed = await _complete_pending(
        ctx, EventType.PREGNANCY_CHECK, result=PregnancyResult.NEGATIVE
    )
    animal = await _update_animal(
        ctx, {"reproductive_status": ReproductiveStatus.NOT_BRED.value}
    )
    return ActionResult(
        action=ActionKind.NOT_PREGNANT,
        animal=animal,
        message="Animal marked as not pregnant",
        completed_event=completed,
    )


async def _handle_dry_off_completed(ctx: _ActionContext) -> ActionResult:
    completed = await _complete_pending(ctx, EventType.DRY_OFF)
    animal = await _update_animal(ctx, {"reproductive_status": ReproductiveStatus.DRY.value})
    return ActionResult(
        action=ActionKind.DRY_OFF_COMPLETED,
        animal=animal,
        message="Dry-off recorded",
        completed_event=completed,
    )


async def _handle_calving_completed(ctx: _ActionContext) -> ActionResult:
    completed = await _complete_pending(ctx, EventType.EXPECTED_CALVING)
    calving = await _record(
        ctx,
        EventType.CALVING,
        "Calving recorded",
        associated=[completed.id] if completed else None,
    )
    animal = await _update_animal(
        ctx,
        {
            "reproductive_status": ReproductiveStatus.NOT_BRED.value,
            "last_insemination_date": None,
        },
    )
    health_check = await _schedule(
        ctx,
        EventType.HEALTH_CHECK,
        ctx.now + POST_CALVING_HEALTH_CHECK,
        "Post-calving health examination",
        associated=[calving.id],
    )
    return ActionResult(
        action=ActionKind.CALVING_COMPLETED,
        animal=animal,
        message="Calving recorded and post-calving health check scheduled",
        completed_event=completed,
        recorded_event=calving,
        scheduled_events=[health_check],
    )


Handler = Callable[[_ActionContext], Awaitable[ActionResult]]

HANDLERS: dict[ActionKind, Handler] = {
    ActionKind.HEALTH_CHECK: _handle_health_check,
    ActionKind.HEAT_SYMPTOMS: _handle_heat_symptoms,
    ActionKind.INSEMINATION: _handle_insemination,
    ActionKind.PREGNANCY_CONFIRMED: _handle_pregnancy_confirmed,
    ActionKind.NOT_PREGNANT: _handle_not_pregnant,
    ActionKind.DRY_OFF_COMPLETED: _handle_dry_off_completed,
    ActionKind.CALVING_COMPLETED: _handle_calving_completed,
}

_missing = set(ActionKind) - set(HANDLERS)
if _missing:
    raise RuntimeError(f"No handler for actions: {sorted(k.value for k in _missing)}")


def parse_action(value: str) -> ActionKind:
    try:
        return ActionKind(value)
    except ValueError:
        valid = ", ".join(kind.value for kind in ActionKind)
        raise ValidationError(f"Invalid action. Must be one of: {valid}") from None


async def execute(
    uow: UnitOfWork,
    config_service: BreedingConfigService,
    payload: ApplyActionInput,
    now: datetime | None = None,
) -> ActionResult:
    action = parse_action(payload.action)

    animal = await uow.animals.get(payload.animal_id)
    if not animal:
        raise NotFound(f"Animal {payload.animal_id} not found")

    config = await config_service.get(uow)
    ctx = _ActionContext(
        uow=uow,
        animal=animal,
        config=config,
        now=ensure_utc(now) if now else utc_now(),
        notes=payload.notes,
        semen_details=payload.semen_details,
    )
    result = await HANDLERS[action](ctx)
    await uow.commit()

    logger.info(
        "Applied %s to animal %s (status=%s, scheduled=%d)",
        action.value,
        animal.tag,
        result.animal.reproductive_status,
        len(result.scheduled_events),
    )
    return result

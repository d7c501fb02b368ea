from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.services.breeding_config_service import BreedingConfigService
from src.application.use_cases.animals import get_animal
from src.application.use_cases.events import list_events
from src.application.use_cases.lifecycle import apply_action, apply_custom_event
from src.domain.models.event import SemenDetails
from src.interfaces.http.deps import get_config_service, get_uow
from src.interfaces.http.schemas.animals import AnimalResponse
from src.interfaces.http.schemas.events import (
    ActionRequest,
    ActionResponse,
    CustomEventRequest,
    CustomEventResponse,
    EventResponse,
    EventsListResponse,
)

router = APIRouter(prefix="/animals/{animal_id}", tags=["animal-events"])


@router.get("/events", response_model=EventsListResponse)
async def get_animal_events(animal_id: UUID, uow=Depends(get_uow)) -> EventsListResponse:
    """Timeline of an animal's events, earliest scheduled first."""
    await get_animal.execute(uow, animal_id)
    events = await list_events.execute(uow, animal_id=animal_id)
    return EventsListResponse(
        items=[EventResponse.model_validate(e) for e in events],
        total=len(events),
    )


@router.post("/actions", response_model=ActionResponse)
async def apply_action_endpoint(
    animal_id: UUID,
    payload: ActionRequest,
    uow=Depends(get_uow),
    config_service: BreedingConfigService = Depends(get_config_service),
) -> ActionResponse:
    """Record a lifecycle action and schedule its follow-up events.

    - health-check: next health check after the configured interval
    - heat-symptoms: insemination 12 hours later (females only)
    - insemination: pregnancy check after the configured delay
    - pregnancy-confirmed: expected calving and dry-off
    - not-pregnant / dry-off-completed: status change only
    - calving-completed: post-calving health check 14 days later
    """
    semen = payload.semen_details
    result = await apply_action.execute(
        uow,
        config_service,
        apply_action.ApplyActionInput(
            animal_id=animal_id,
            action=payload.action,
            notes=payload.notes,
            semen_details=SemenDetails(**semen.model_dump()) if semen else None,
        ),
    )
    return ActionResponse(
        action=result.action.value,
        message=result.message,
        animal=AnimalResponse.model_validate(result.animal),
        completed_event=(
            EventResponse.model_validate(result.completed_event)
            if result.completed_event
            else None
        ),
        recorded_event=(
            EventResponse.model_validate(result.recorded_event) if result.recorded_event else None
        ),
        scheduled_events=[EventResponse.model_validate(e) for e in result.scheduled_events],
    )


@router.post(
    "/custom-events",
    response_model=CustomEventResponse,
    status_code=status.HTTP_201_CREATED,
)
async def apply_custom_event_endpoint(
    animal_id: UUID,
    payload: CustomEventRequest,
    uow=Depends(get_uow),
) -> CustomEventResponse:
    result = await apply_custom_event.execute(
        uow,
        apply_custom_event.ApplyCustomEventInput(
            animal_id=animal_id,
            custom_event_type_id=payload.custom_event_type_id,
            notes=payload.notes,
        ),
    )
    return CustomEventResponse(
        message=result.message,
        current_event=EventResponse.model_validate(result.current_event),
        next_event=EventResponse.model_validate(result.next_event),
    )

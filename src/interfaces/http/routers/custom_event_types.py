from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.use_cases.custom_event_types import (
    create_custom_event_type,
    delete_custom_event_type,
    list_custom_event_types,
)
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.custom_event_types import (
    CustomEventTypeCreate,
    CustomEventTypeResponse,
)

router = APIRouter(prefix="/custom-event-types", tags=["custom-event-types"])


@router.get("/", response_model=list[CustomEventTypeResponse])
async def list_custom_event_types_endpoint(
    animal_id: UUID | None = Query(None, description="Only types applicable to this animal"),
    uow=Depends(get_uow),
) -> list[CustomEventTypeResponse]:
    types = await list_custom_event_types.execute(uow, animal_id=animal_id)
    return [CustomEventTypeResponse.model_validate(t) for t in types]


@router.post("/", response_model=CustomEventTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_custom_event_type_endpoint(
    payload: CustomEventTypeCreate,
    uow=Depends(get_uow),
) -> CustomEventTypeResponse:
    created = await create_custom_event_type.execute(
        uow,
        create_custom_event_type.CreateCustomEventTypeInput(
            name=payload.name,
            description=payload.description,
            default_priority=payload.default_priority,
            reminder_value=payload.reminder_time.value,
            reminder_unit=payload.reminder_time.unit,
            animal_categories=payload.animal_categories,
        ),
    )
    return CustomEventTypeResponse.model_validate(created)


@router.delete("/{event_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_custom_event_type_endpoint(
    event_type_id: UUID,
    uow=Depends(get_uow),
) -> Response:
    await delete_custom_event_type.execute(uow, event_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.events import list_events
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.events import EventResponse, EventsListResponse

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/", response_model=EventsListResponse)
async def list_events_endpoint(
    animal_id: UUID | None = Query(None),
    status: str | None = Query(None, description="Pending, Completed, Overdue or Cancelled"),
    event_type: str | None = Query(None),
    uow=Depends(get_uow),
) -> EventsListResponse:
    events = await list_events.execute(
        uow, animal_id=animal_id, status=status, event_type=event_type
    )
    return EventsListResponse(
        items=[EventResponse.model_validate(e) for e in events],
        total=len(events),
    )

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.interfaces.http.schemas.animals import AnimalResponse


class SemenDetailsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    bull_tag: str | None = None
    serial_number: str | None = None
    producer: str | None = None


class ReminderTimeSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    value: int
    unit: str


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_id: UUID
    event_type: str
    title: str
    description: str | None = None
    status: str
    priority: str
    scheduled_date: datetime
    completed_date: datetime | None = None
    result: str | None = None
    notes: str | None = None
    semen_details: SemenDetailsSchema | None = None
    reminder_time: ReminderTimeSchema | None = None
    location: str | None = None
    associated_events: list[UUID] = []
    created_at: datetime
    updated_at: datetime


class EventsListResponse(BaseModel):
    items: list[EventResponse]
    total: int


class ActionRequest(BaseModel):
    """Body of `POST /animals/{animal_id}/actions`.

    `action` is one of: health-check, heat-symptoms, insemination,
    pregnancy-confirmed, not-pregnant, dry-off-completed, calving-completed.
    `semen_details` is only read for insemination.
    """

    action: str
    notes: str | None = None
    semen_details: SemenDetailsSchema | None = None


class ActionResponse(BaseModel):
    action: str
    message: str
    animal: AnimalResponse
    completed_event: EventResponse | None = None
    recorded_event: EventResponse | None = None
    scheduled_events: list[EventResponse]


class CustomEventRequest(BaseModel):
    custom_event_type_id: UUID
    notes: str | None = None


class CustomEventResponse(BaseModel):
    message: str
    current_event: EventResponse
    next_event: EventResponse

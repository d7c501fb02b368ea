from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.services.breeding_config_service import BreedingConfigService
from src.interfaces.http.deps import get_config_service, get_uow
from src.interfaces.http.schemas.breeding_settings import (
    BreedingSettingsResponse,
    BreedingSettingsUpdate,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/", response_model=BreedingSettingsResponse)
async def get_breeding_settings(
    uow=Depends(get_uow),
    config_service: BreedingConfigService = Depends(get_config_service),
):
    config = await config_service.get(uow)
    return BreedingSettingsResponse.model_validate(config)


@router.put("/", response_model=BreedingSettingsResponse)
async def update_breeding_settings(
    payload: BreedingSettingsUpdate,
    uow=Depends(get_uow),
    config_service: BreedingConfigService = Depends(get_config_service),
):
    updates = payload.model_dump(exclude_unset=True, exclude_none=True)
    config = await config_service.update(uow, updates)
    return BreedingSettingsResponse.model_validate(config)

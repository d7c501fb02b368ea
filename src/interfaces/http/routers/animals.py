from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.application.use_cases.animals import (
    create_animal,
    delete_animal,
    get_animal,
    list_animals,
    update_animal,
)
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalUpdate,
)

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/", response_model=AnimalsListResponse)
async def list_animals_endpoint(
    gender: str | None = Query(None, description="female or male"),
    category: str | None = Query(None, description="adult or calf"),
    q: str | None = Query(None, description="Text search across tag and name"),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    animals = await list_animals.execute(uow, gender=gender, category=category, search=q)
    return AnimalsListResponse(
        items=[AnimalResponse.model_validate(a) for a in animals],
        total=len(animals),
    )


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await create_animal.execute(
        uow, create_animal.CreateAnimalInput(**payload.model_dump())
    )
    return AnimalResponse.model_validate(animal)


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(animal_id: UUID, uow=Depends(get_uow)) -> AnimalResponse:
    animal = await get_animal.execute(uow, animal_id)
    return AnimalResponse.model_validate(animal)


@router.patch("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await update_animal.execute(
        uow,
        animal_id,
        update_animal.UpdateAnimalInput(**payload.model_dump(exclude_unset=True)),
    )
    return AnimalResponse.model_validate(animal)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal_endpoint(animal_id: UUID, uow=Depends(get_uow)) -> Response:
    await delete_animal.execute(uow, animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.use_cases.statistics import (
    calving_distribution,
    conception_rate,
    pregnancy_distribution,
)
from src.interfaces.http.deps import get_uow
from src.interfaces.http.schemas.statistics import (
    CalvingDistributionResponse,
    ConceptionRateResponse,
    MonthlyConceptionRateResponse,
    PregnancyDistributionResponse,
)

router = APIRouter(prefix="/statistics", tags=["statistics"])


@router.get("/conception-rate", response_model=ConceptionRateResponse)
async def get_conception_rate(uow=Depends(get_uow)) -> ConceptionRateResponse:
    """Monthly conception rate over the trailing 12 months, oldest first."""
    months = await conception_rate.execute(uow)
    return ConceptionRateResponse(
        months=[MonthlyConceptionRateResponse.model_validate(m) for m in months]
    )


@router.get("/pregnancy-distribution", response_model=PregnancyDistributionResponse)
async def get_pregnancy_distribution(uow=Depends(get_uow)) -> PregnancyDistributionResponse:
    result = await pregnancy_distribution.execute(uow)
    return PregnancyDistributionResponse.model_validate(result)


@router.get("/calving-distribution", response_model=CalvingDistributionResponse)
async def get_calving_distribution(uow=Depends(get_uow)) -> CalvingDistributionResponse:
    result = await calving_distribution.execute(uow)
    return CalvingDistributionResponse.model_validate(result)

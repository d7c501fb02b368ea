from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class MonthlyConceptionRateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: str
    month_start: datetime
    total_pregnancy_checks: int
    successful_pregnancy_checks: int
    conception_rate: int


class ConceptionRateResponse(BaseModel):
    months: list[MonthlyConceptionRateResponse]


class StatusBucketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    status: str
    label: str
    count: int
    percentage: int
    color: str


class PregnancyDistributionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    distribution: list[StatusBucketResponse]


class MonthCountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    month: int
    name: str
    count: int


class HeatmapCellResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: str
    year: int
    month: int
    count: int


class CalvingDistributionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_calvings: int
    distribution_by_month: list[MonthCountResponse]
    heatmap: list[HeatmapCellResponse]

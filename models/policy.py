# Pydantic моделі для калькулятора періодів поліса

from datetime import date
from pydantic import BaseModel, field_validator


class PolicyPeriodRequest(BaseModel):
    start_date: date | None = None
    end_date: date | None = None  # не включно
    total_amount: str | None = None  # "1.000,00"
    is_passenger_car: bool = False

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def empty_date_as_missing(cls, value):
        # Порожнє поле форми = дата не обрана
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PolicyPeriodResult(BaseModel):
    quarter: str  # "2024 Q1"
    days: int
    amount: float
    deductible: float | None = None
    non_deductible: float | None = None


class PolicyPeriodSummary(BaseModel):
    periods: list[PolicyPeriodResult]
    is_passenger_car: bool = False
    total_days: int = 0
    total_amount: float = 0.0
    total_deductible: float | None = None
    total_non_deductible: float | None = None

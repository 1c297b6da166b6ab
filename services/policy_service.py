# services/policy_service.py
from datetime import date, timedelta

from core.number_format import parse_turkish_number
from models.policy import PolicyPeriodRequest, PolicyPeriodResult, PolicyPeriodSummary

DEDUCTIBLE_RATIO = 0.7      # Gider
NON_DEDUCTIBLE_RATIO = 0.3  # KKEG

MISSING_DATES_MESSAGE = "Lütfen başlangıç ve bitiş tarihlerini seçin."
INVERTED_RANGE_MESSAGE = "Bitiş tarihi, başlangıç tarihinden sonra olmalıdır."
INVALID_AMOUNT_MESSAGE = "Lütfen geçerli bir toplam tutar girin."


class PolicyPeriodValidationError(ValueError):
    """Помилка введення, яку показуємо користувачу як є."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def quarter_label(d: date) -> str:
    return f"{d.year} Q{(d.month - 1) // 3 + 1}"


def validate_policy_input(
    start: date | None,
    end: date | None,
    raw_amount: str | None,
) -> float:
    """
    Перевіряє дані форми у фіксованому порядку: дати, діапазон, сума.
    Повертає розпарсену суму.
    """
    if start is None or end is None:
        raise PolicyPeriodValidationError(MISSING_DATES_MESSAGE)

    if start >= end:
        raise PolicyPeriodValidationError(INVERTED_RANGE_MESSAGE)

    amount = parse_turkish_number(raw_amount)
    if amount is None or amount <= 0:
        raise PolicyPeriodValidationError(INVALID_AMOUNT_MESSAGE)

    return amount


def split_into_quarters(
    start: date,
    end: date,
    total_amount: float,
    is_passenger_car: bool = False,
) -> list[PolicyPeriodResult]:
    """
    Розподіляє суму по календарних кварталах пропорційно кількості днів
    у діапазоні [start, end). Кожен день важить однаково.
    """
    total_days = (end - start).days
    if total_days <= 0:
        return []

    daily_amount = total_amount / total_days

    days_by_quarter: dict[str, int] = {}
    current = start
    while current < end:
        label = quarter_label(current)
        days_by_quarter[label] = days_by_quarter.get(label, 0) + 1
        current += timedelta(days=1)

    results = []
    for label in sorted(days_by_quarter):
        days = days_by_quarter[label]
        amount = days * daily_amount
        result = PolicyPeriodResult(quarter=label, days=days, amount=amount)
        if is_passenger_car:
            result.deductible = amount * DEDUCTIBLE_RATIO
            result.non_deductible = amount * NON_DEDUCTIBLE_RATIO
        results.append(result)

    return results


def summarize_periods(
    results: list[PolicyPeriodResult],
    is_passenger_car: bool = False,
) -> PolicyPeriodSummary:
    """Рядок TOPLAM: суми днів, сум і (для легкових авто) Gider/KKEG."""
    summary = PolicyPeriodSummary(
        periods=results,
        is_passenger_car=is_passenger_car,
        total_days=sum(r.days for r in results),
        total_amount=sum(r.amount for r in results),
    )
    if is_passenger_car:
        summary.total_deductible = sum(r.deductible or 0 for r in results)
        summary.total_non_deductible = sum(r.non_deductible or 0 for r in results)
    return summary


def calculate_policy_periods(request: PolicyPeriodRequest) -> PolicyPeriodSummary:
    amount = validate_policy_input(request.start_date, request.end_date, request.total_amount)
    results = split_into_quarters(
        request.start_date,
        request.end_date,
        amount,
        request.is_passenger_car,
    )
    return summarize_periods(results, request.is_passenger_car)

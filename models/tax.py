# Pydantic моделі для ÖTV/KDV калькулятора

from pydantic import BaseModel


class TaxSplitRequest(BaseModel):
    amount: str | None = None  # Сума з податками у форматі "1.234,56"


class TaxSplitResult(BaseModel):
    base_price: float
    sct: float  # ÖTV
    vat: float  # KDV
    verification_total: float


class TaxSplitResponse(BaseModel):
    # None, якщо сума не розпізнана або <= 0
    result: TaxSplitResult | None = None
    formatted: dict[str, str] | None = None

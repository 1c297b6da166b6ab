# Сервісний шар для ÖTV/KDV калькулятора

from core.number_format import parse_turkish_number, format_turkish
from models.tax import TaxSplitResult, TaxSplitResponse

SCT_RATE = 0.10  # ÖTV
VAT_RATE = 0.10  # KDV


def split_tax(total: float) -> TaxSplitResult:
    """
    Розкладає суму з податками на базову ціну, ÖTV та KDV.
    KDV нараховується на (база + ÖTV).
    """
    base_price = total / ((1 + SCT_RATE) * (1 + VAT_RATE))
    sct = base_price * SCT_RATE
    vat = (base_price + sct) * VAT_RATE
    verification_total = base_price + sct + vat

    return TaxSplitResult(
        base_price=base_price,
        sct=sct,
        vat=vat,
        verification_total=verification_total,
    )


def calculate_from_input(raw_amount: str | None) -> TaxSplitResult | None:
    # Некоректна або не додатна сума: просто немає результату, без помилки
    amount = parse_turkish_number(raw_amount)
    if amount is None or amount <= 0:
        return None
    return split_tax(amount)


def format_result(result: TaxSplitResult) -> dict[str, str]:
    return {
        "base_price": format_turkish(result.base_price),
        "sct": format_turkish(result.sct),
        "vat": format_turkish(result.vat),
        "verification_total": format_turkish(result.verification_total),
    }


def build_response(raw_amount: str | None) -> TaxSplitResponse:
    result = calculate_from_input(raw_amount)
    if result is None:
        return TaxSplitResponse()
    return TaxSplitResponse(result=result, formatted=format_result(result))

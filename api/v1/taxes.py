# API роутер для ÖTV/KDV калькулятора

from fastapi import APIRouter
from models.tax import TaxSplitRequest, TaxSplitResponse
from services import tax_service

router = APIRouter()


@router.post("/split", response_model=TaxSplitResponse)
def split_tax_endpoint(request: TaxSplitRequest):
    """
    Розкладає суму з податками на базу, ÖTV та KDV.
    Некоректна сума повертає result=null без помилки.
    """
    return tax_service.build_response(request.amount)

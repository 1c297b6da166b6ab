# API роутер для калькулятора періодів поліса

from fastapi import APIRouter, HTTPException, status
from models.policy import PolicyPeriodRequest, PolicyPeriodSummary
from services import policy_service
from services.policy_service import PolicyPeriodValidationError

router = APIRouter()


@router.post("/calculate", response_model=PolicyPeriodSummary)
def calculate_policy_periods_endpoint(request: PolicyPeriodRequest):
    """
    Розподіляє суму поліса по кварталах пропорційно дням.
    """
    try:
        return policy_service.calculate_policy_periods(request)
    except PolicyPeriodValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )

"""
Meta endpoints: health, reference lists.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from lottery_sales.config import (
    LOTTERY_BRANDS, DAYS_OF_WEEK, SRI_LANKA_DISTRICTS, SALES_METHODS, DEALER_NUMBER_LENGTH,
)
from lottery_sales.data.store import SubmissionRepository
from lottery_sales.api.dependencies import get_store
from lottery_sales.api.response_models import HealthResponse, ConstantsResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: SubmissionRepository = Depends(get_store)):
    return HealthResponse(status="ok", submissions=len(store.fetch()))


@router.get("/constants", response_model=ConstantsResponse)
def constants():
    """Reference lists shared by the form, the validators and the export layout."""
    return ConstantsResponse(
        brands=LOTTERY_BRANDS,
        days=DAYS_OF_WEEK,
        districts=SRI_LANKA_DISTRICTS,
        salesMethods=SALES_METHODS,
        dealerNumberLength=DEALER_NUMBER_LENGTH,
    )

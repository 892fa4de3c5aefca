"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    submissions: int


class ConstantsResponse(BaseModel):
    brands: list[str]
    days: list[str]
    districts: list[str]
    salesMethods: list[str]
    dealerNumberLength: int


class DailySalePayload(BaseModel):
    # Counts are left untyped: bad values are coerced to 0, never rejected
    brandName: str = ""
    monday: Any = 0
    tuesday: Any = 0
    wednesday: Any = 0
    thursday: Any = 0
    friday: Any = 0
    saturday: Any = 0
    sunday: Any = 0


class SubmissionPayload(BaseModel):
    id: Optional[str] = None  # present → update
    district: Optional[str] = None
    city: Optional[str] = None
    dealerName: Optional[str] = None
    dealerNumber: Optional[Union[str, int]] = None
    assistantName: Optional[str] = None
    salesMethod: Optional[str] = None
    salesLocation: Optional[str] = None
    isDraft: bool = True
    dailySales: Optional[list[DailySalePayload]] = None


class MessageResponse(BaseModel):
    message: str


class SubmissionResponse(BaseModel):
    message: str
    submission: dict[str, Any]

"""
Job schemas.
"""
from decimal import Decimal
from typing import Any, Optional

from pydantic import Field, ValidationInfo, field_validator

from jobly.schemas.base import BaseSchema, RequestSchema


def _stripped_not_blank(value: str, field: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{field} cannot be blank")
    return value


class JobCreate(RequestSchema):
    """Job creation schema."""

    title: str = Field(min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(min_length=1, max_length=25)

    @field_validator("title", "company_handle")
    @classmethod
    def not_blank(cls, v: str, info: ValidationInfo) -> str:
        return _stripped_not_blank(v, info.field_name)


class JobUpdate(RequestSchema):
    """
    Job update schema.

    Only fields present in the body are changed; null clears salary/equity.
    A title may be omitted but not cleared. companyHandle cannot be changed.
    """

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title cannot be null")
        return _stripped_not_blank(v, "title")


class CompanyJob(BaseSchema):
    """Job as embedded in a company detail."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None

    @field_validator("equity", mode="before")
    @classmethod
    def equity_as_str(cls, value: Any) -> Any:
        # NUMERIC comes back from the store as Decimal
        if isinstance(value, (Decimal, int, float)):
            return str(value)
        return value


class JobResponse(CompanyJob):
    """Job response schema."""

    company_handle: str

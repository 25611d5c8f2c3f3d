"""
Company schemas.
"""
from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator

from jobly.schemas.base import BaseSchema, RequestSchema
from jobly.schemas.job import CompanyJob


class CompanyCreate(RequestSchema):
    """Company creation schema."""

    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None


class CompanyUpdate(RequestSchema):
    """Company update schema. The handle is immutable."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = None

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, v: Optional[str], info: ValidationInfo) -> str:
        # only numEmployees and logoUrl can be cleared
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class CompanyResponse(BaseSchema):
    """Company response schema."""

    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyDetail(CompanyResponse):
    """Company with its jobs."""

    jobs: List[CompanyJob] = []

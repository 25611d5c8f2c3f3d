"""
Pydantic schemas for API validation and serialization.
"""
from jobly.schemas.base import (
    BaseSchema,
    RequestSchema,
    DeletedResponse,
    ErrorResponse,
)
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyResponse,
    CompanyDetail,
)
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobResponse,
    CompanyJob,
)

__all__ = [
    # Base
    "BaseSchema",
    "RequestSchema",
    "DeletedResponse",
    "ErrorResponse",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyResponse",
    "CompanyDetail",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobResponse",
    "CompanyJob",
]

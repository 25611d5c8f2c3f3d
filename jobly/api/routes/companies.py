"""
Company routes.

Thin controllers - CompanyRepository owns the queries and raises the
named errors; the app-level handler turns those into responses.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from jobly.api.deps import TokenUser, get_admin_user, get_company_repository
from jobly.core.rate_limit import RATE_WRITE, limiter
from jobly.repositories.company_repository import CompanyRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyResponse,
    CompanyUpdate,
)

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("/", response_model=CompanyResponse, status_code=201)
@limiter.limit(RATE_WRITE)
async def create_company(
    request: Request,
    data: CompanyCreate,
    admin: TokenUser = Depends(get_admin_user),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Create a new company. Admin only."""
    return await companies.create(data.model_dump(by_alias=True))


@router.get("/", response_model=List[CompanyResponse])
async def list_companies(
    min_employees: Optional[int] = Query(None, alias="min", ge=0),
    max_employees: Optional[int] = Query(None, alias="max", ge=0),
    name: Optional[str] = Query(None, min_length=1, description="Name prefix, case-insensitive"),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """
    List companies.

    With any of min / max / name given, only matching companies are
    returned, and an empty match is a 404.
    """
    if min_employees is None and max_employees is None and name is None:
        return await companies.get_all()

    return await companies.filtered_search(
        min_employees=min_employees,
        max_employees=max_employees,
        name=name,
    )


@router.get("/by-name/{name}", response_model=CompanyResponse)
async def get_company_by_name(
    name: str,
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Get a company by its exact name, ignoring case."""
    return await companies.get_by_name(name)


@router.get("/{handle}", response_model=CompanyDetail)
async def get_company(
    handle: str,
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Get a company and its jobs."""
    return await companies.get_by_handle(handle)


@router.patch("/{handle}", response_model=CompanyResponse)
@limiter.limit(RATE_WRITE)
async def update_company(
    request: Request,
    handle: str,
    data: CompanyUpdate,
    admin: TokenUser = Depends(get_admin_user),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Patch a company's details. Admin only."""
    return await companies.update_by_handle(
        handle, data.model_dump(exclude_unset=True, by_alias=True)
    )


@router.delete("/{handle}", response_model=DeletedResponse)
@limiter.limit(RATE_WRITE)
async def delete_company(
    request: Request,
    handle: str,
    admin: TokenUser = Depends(get_admin_user),
    companies: CompanyRepository = Depends(get_company_repository),
):
    """Delete a company and its jobs. Admin only."""
    await companies.delete_by_handle(handle)
    return DeletedResponse(deleted=handle)

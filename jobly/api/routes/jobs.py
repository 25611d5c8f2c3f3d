"""
Job routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from jobly.api.deps import TokenUser, get_admin_user, get_job_repository
from jobly.core.rate_limit import RATE_WRITE, limiter
from jobly.repositories.job_repository import JobRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.job import JobCreate, JobResponse, JobUpdate

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/", response_model=JobResponse, status_code=201)
@limiter.limit(RATE_WRITE)
async def create_job(
    request: Request,
    data: JobCreate,
    admin: TokenUser = Depends(get_admin_user),
    jobs: JobRepository = Depends(get_job_repository),
):
    """Post a job for an existing company. Admin only."""
    return await jobs.create(data.model_dump(by_alias=True))


@router.get("/", response_model=List[JobResponse])
async def list_jobs(
    title: Optional[str] = Query(None, min_length=1, description="Title keyword, case-insensitive"),
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    List jobs.

    With any of title / minSalary / hasEquity given, only matching jobs are
    returned, and an empty match is a 404.
    """
    if title is None and min_salary is None and has_equity is None:
        return await jobs.get_all()

    return await jobs.filtered_search(
        title=title,
        min_salary=min_salary,
        has_equity=has_equity,
    )


@router.get("/id/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    jobs: JobRepository = Depends(get_job_repository),
):
    """Get a job by ID."""
    return await jobs.get_by_id(job_id)


@router.get("/{title}", response_model=JobResponse)
async def get_job_by_title(
    title: str,
    jobs: JobRepository = Depends(get_job_repository),
):
    """Get a job by its exact (stored, lower-case) title."""
    return await jobs.get_by_title(title)


@router.patch("/{job_id}", response_model=JobResponse)
@limiter.limit(RATE_WRITE)
async def update_job(
    request: Request,
    job_id: int,
    data: JobUpdate,
    admin: TokenUser = Depends(get_admin_user),
    jobs: JobRepository = Depends(get_job_repository),
):
    """Patch a job's title, salary or equity. Admin only."""
    return await jobs.update_by_id(
        job_id, data.model_dump(exclude_unset=True, by_alias=True)
    )


@router.delete("/{job_id}", response_model=DeletedResponse)
@limiter.limit(RATE_WRITE)
async def delete_job(
    request: Request,
    job_id: int,
    admin: TokenUser = Depends(get_admin_user),
    jobs: JobRepository = Depends(get_job_repository),
):
    """Delete a job. Admin only."""
    await jobs.delete_by_id(job_id)
    return DeletedResponse(deleted=str(job_id))

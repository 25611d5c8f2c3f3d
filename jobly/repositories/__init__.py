"""
Repository layer - data access abstraction.

Repositories own all SQL for their table and the mapping between
external field names and storage columns, keeping query logic out of
the route layer.
"""
from jobly.repositories.base import BaseRepository
from jobly.repositories.company_repository import CompanyRepository
from jobly.repositories.job_repository import JobRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "JobRepository",
]

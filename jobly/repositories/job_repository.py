"""
Job repository - data access for the jobs table.
"""
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from jobly.core.database import Record
from jobly.core.exceptions import (
    CompanyNotFoundException,
    DuplicateJobException,
    JobNotFoundException,
    NoFieldsProvidedException,
    NoFiltersProvidedException,
    NoMatchException,
)
from jobly.core.logging import get_logger
from jobly.core.sql import like_escape, sql_for_partial_update
from jobly.repositories.base import BaseRepository

logger = get_logger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'
TITLE_PER_COMPANY_CONSTRAINT = "uq_jobs_title_company_handle"


class JobRepository(BaseRepository):
    js_to_sql = MappingProxyType({
        "title": "title",
        "salary": "salary",
        "equity": "equity",
    })

    async def create(self, data: Mapping[str, Any]) -> Record:
        """
        Create a job from data { title, salary, equity, companyHandle }.

        title and companyHandle are stored trimmed and lower-cased; the
        duplicate check runs on the normalized pair.

        Raises:
            CompanyNotFoundException: If companyHandle names no company.
            DuplicateJobException: If the company already has this title.
        """
        title = data["title"].strip().lower()
        company_handle = data["companyHandle"].strip().lower()

        company = await self._fetch_one(
            """SELECT handle
               FROM companies
               WHERE handle = $1""",
            [company_handle],
        )
        if not company:
            raise CompanyNotFoundException(company_handle)

        job = await self._fetch_one(
            f"""INSERT INTO jobs
                    (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                ON CONFLICT (title, company_handle) DO NOTHING
                RETURNING {JOB_COLUMNS}""",
            [title, data.get("salary"), data.get("equity"), company_handle],
        )

        if not job:
            raise DuplicateJobException(title, company_handle)

        logger.info("job_created", job_id=job["id"], company_handle=company_handle)
        return job

    async def get_all(self) -> List[Record]:
        """All jobs, ordered by id."""
        return await self._fetch(
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                ORDER BY id"""
        )

    async def get_by_id(self, job_id: int) -> Record:
        """
        Job with the given id.

        Raises:
            JobNotFoundException: If no such job.
        """
        job = await self._fetch_one(
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE id = $1""",
            [job_id],
        )

        if not job:
            raise JobNotFoundException(job_id)

        return job

    async def get_by_title(self, title: str) -> Record:
        """
        First job whose title is exactly ``title``.

        Raises:
            JobNotFoundException: If no job has that title.
        """
        job = await self._fetch_one(
            f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE title = $1
                ORDER BY id""",
            [title],
        )

        if not job:
            raise JobNotFoundException(title)

        return job

    async def update_by_id(self, job_id: int, data: Mapping[str, Any]) -> Record:
        """
        Partial update: only the fields present in ``data`` change, and an
        explicit None clears the field.

        Data can include { title, salary, equity }.

        Raises:
            NoFieldsProvidedException: If data is empty (checked before any query).
            DuplicateJobException: If the new title is already used by the
                job's company.
            JobNotFoundException: If no such job.
        """
        if not data:
            raise NoFieldsProvidedException()

        set_cols, values = sql_for_partial_update(data, self.js_to_sql)
        id_idx = len(values) + 1

        try:
            job = await self._fetch_one(
                f"""UPDATE jobs
                    SET {set_cols}
                    WHERE id = ${id_idx}
                    RETURNING {JOB_COLUMNS}""",
                [*values, job_id],
            )
        except IntegrityError as exc:
            if TITLE_PER_COMPANY_CONSTRAINT not in str(exc.orig):
                raise
            current = await self.get_by_id(job_id)
            raise DuplicateJobException(data["title"], current["companyHandle"]) from exc

        if not job:
            raise JobNotFoundException(job_id)

        logger.info("job_updated", job_id=job_id, fields=list(data.keys()))
        return job

    async def delete_by_id(self, job_id: int) -> None:
        """
        Remove a job.

        Raises:
            JobNotFoundException: If no such job.
        """
        deleted = await self._fetch_one(
            """DELETE
               FROM jobs
               WHERE id = $1
               RETURNING id""",
            [job_id],
        )

        if not deleted:
            raise JobNotFoundException(job_id)

        logger.info("job_deleted", job_id=job_id)

    async def filtered_search(
        self,
        title: Optional[str] = None,
        min_salary: Optional[int] = None,
        has_equity: Optional[bool] = None,
    ) -> List[Record]:
        """
        Jobs matching every supplied filter, ordered by id.

        has_equity=True keeps jobs with equity > 0; has_equity=False applies
        no equity restriction but still counts as a supplied filter.

        Raises:
            NoFiltersProvidedException: If all three filters are None.
            NoMatchException: If nothing matches.
        """
        query, values = self._build_filter_query(title, min_salary, has_equity)

        jobs = await self._fetch(query, values)
        if not jobs:
            raise NoMatchException("job")

        return jobs

    def _build_filter_query(
        self,
        title: Optional[str],
        min_salary: Optional[int],
        has_equity: Optional[bool],
    ) -> Tuple[str, List[Any]]:
        if title is None and min_salary is None and has_equity is None:
            raise NoFiltersProvidedException()

        query = f"""SELECT {JOB_COLUMNS}
                FROM jobs
                WHERE 1=1"""
        values: List[Any] = []

        if title is not None:
            values.append(f"%{like_escape(title)}%")
            query += f" AND title ILIKE ${len(values)}"

        if min_salary is not None:
            values.append(min_salary)
            query += f" AND salary >= ${len(values)}"

        if has_equity:
            query += " AND equity > 0"

        query += " ORDER BY id"

        return query, values

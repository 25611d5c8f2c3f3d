"""
Company repository - data access for the companies table.
"""
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Tuple

from jobly.core.database import Record
from jobly.core.exceptions import (
    CompanyNotFoundException,
    DuplicateHandleException,
    InvalidRangeException,
    NoMatchException,
)
from jobly.core.logging import get_logger
from jobly.core.sql import like_escape, sql_for_partial_update
from jobly.repositories.base import BaseRepository

logger = get_logger(__name__)

COMPANY_COLUMNS = (
    "handle, name, description, "
    'num_employees AS "numEmployees", logo_url AS "logoUrl"'
)


class CompanyRepository(BaseRepository):
    js_to_sql = MappingProxyType({
        "numEmployees": "num_employees",
        "logoUrl": "logo_url",
    })

    async def create(self, data: Mapping[str, Any]) -> Record:
        """
        Create a company from data { handle, name, description, numEmployees, logoUrl }.

        The insert is conditional on the handle being free, so two concurrent
        creates cannot both succeed.

        Raises:
            DuplicateHandleException: If the handle is already taken.
        """
        handle = data["handle"]
        company = await self._fetch_one(
            f"""INSERT INTO companies
                    (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                ON CONFLICT (handle) DO NOTHING
                RETURNING {COMPANY_COLUMNS}""",
            [
                handle,
                data["name"],
                data["description"],
                data.get("numEmployees"),
                data.get("logoUrl"),
            ],
        )

        if not company:
            raise DuplicateHandleException(handle)

        logger.info("company_created", handle=handle)
        return company

    async def get_all(self) -> List[Record]:
        """All companies, ordered by name."""
        return await self._fetch(
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                ORDER BY name"""
        )

    async def get_by_handle(self, handle: str) -> Record:
        """
        Company with its jobs embedded.

        Returns { handle, name, description, numEmployees, logoUrl, jobs }
        where jobs is [{ id, title, salary, equity }, ...] ordered by id.

        Raises:
            CompanyNotFoundException: If no such handle.
        """
        company = await self._fetch_one(
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                WHERE handle = $1""",
            [handle],
        )

        if not company:
            raise CompanyNotFoundException(handle)

        company["jobs"] = await self._fetch(
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = $1
               ORDER BY id""",
            [handle],
        )
        return company

    async def get_by_name(self, name: str) -> Record:
        """
        Company whose name equals ``name``, ignoring case.

        Raises:
            CompanyNotFoundException: If no company has that name.
        """
        company = await self._fetch_one(
            f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                WHERE LOWER(name) = LOWER($1)""",
            [name],
        )

        if not company:
            raise CompanyNotFoundException(name)

        return company

    async def update_by_handle(self, handle: str, data: Mapping[str, Any]) -> Record:
        """
        Partial update: only the fields present in ``data`` change.

        Data can include { name, description, numEmployees, logoUrl }.

        Raises:
            NoFieldsProvidedException: If data is empty.
            CompanyNotFoundException: If no such handle.
        """
        set_cols, values = sql_for_partial_update(data, self.js_to_sql)
        handle_idx = len(values) + 1

        company = await self._fetch_one(
            f"""UPDATE companies
                SET {set_cols}
                WHERE handle = ${handle_idx}
                RETURNING {COMPANY_COLUMNS}""",
            [*values, handle],
        )

        if not company:
            raise CompanyNotFoundException(handle)

        logger.info("company_updated", handle=handle, fields=list(data.keys()))
        return company

    async def delete_by_handle(self, handle: str) -> None:
        """
        Delete a company (its jobs go with it).

        Raises:
            CompanyNotFoundException: If no such handle.
        """
        deleted = await self._fetch_one(
            """DELETE
               FROM companies
               WHERE handle = $1
               RETURNING handle""",
            [handle],
        )

        if not deleted:
            raise CompanyNotFoundException(handle)

        logger.info("company_deleted", handle=handle)

    async def filtered_search(
        self,
        min_employees: Optional[int] = None,
        max_employees: Optional[int] = None,
        name: Optional[str] = None,
    ) -> List[Record]:
        """
        Companies matching every supplied filter.

        An empty result is reported as NoMatchException rather than [].

        Raises:
            InvalidRangeException: If min_employees > max_employees.
            NoMatchException: If nothing matches.
        """
        query, values = self._build_filter_query(min_employees, max_employees, name)

        companies = await self._fetch(query, values)
        if not companies:
            raise NoMatchException("company")

        return companies

    def _build_filter_query(
        self,
        min_employees: Optional[int],
        max_employees: Optional[int],
        name: Optional[str],
    ) -> Tuple[str, List[Any]]:
        if (
            min_employees is not None
            and max_employees is not None
            and min_employees > max_employees
        ):
            raise InvalidRangeException()

        query = f"""SELECT {COMPANY_COLUMNS}
                FROM companies
                WHERE 1=1"""
        values: List[Any] = []

        if min_employees is not None:
            values.append(min_employees)
            query += f" AND num_employees >= ${len(values)}"

        if max_employees is not None:
            values.append(max_employees)
            query += f" AND num_employees <= ${len(values)}"

        if name is not None:
            values.append(f"{like_escape(name)}%")
            query += f" AND name ILIKE ${len(values)}"
            query += " ORDER BY name"
        else:
            query += " ORDER BY num_employees"

        return query, values

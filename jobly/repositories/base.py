"""
Base repository shared by the resource repositories.

Each repository owns one table: the SQL it runs, and the translation
between external (camelCase) field names and storage (snake_case) columns.
"""
from types import MappingProxyType
from typing import Any, ClassVar, List, Mapping, Optional, Sequence

from jobly.core.database import Database, Record


class BaseRepository:
    """
    Holds the injected store handle.

    Usage:
        class CompanyRepository(BaseRepository):
            ...

        repo = CompanyRepository(db)
    """

    # external field name -> column name, for partial updates
    js_to_sql: ClassVar[Mapping[str, str]] = MappingProxyType({})

    def __init__(self, db: Database):
        self.db = db

    async def _fetch(self, sql: str, values: Sequence[Any] = ()) -> List[Record]:
        return await self.db.fetch(sql, values)

    async def _fetch_one(self, sql: str, values: Sequence[Any] = ()) -> Optional[Record]:
        return await self.db.fetch_one(sql, values)

import pytest

from jobly.core.exceptions import (
    CompanyNotFoundException,
    DuplicateHandleException,
    InvalidRangeException,
    NoFieldsProvidedException,
    NoMatchException,
)
from jobly.repositories.company_repository import CompanyRepository

from tests.conftest import C1, C2, J1


@pytest.fixture
def repo(fake_db):
    return CompanyRepository(fake_db)


class TestCreate:
    @pytest.mark.asyncio
    async def test_create(self, repo, fake_db):
        fake_db.queue([C1])

        company = await repo.create(C1)

        assert company == C1
        sql, values = fake_db.calls[0]
        assert "INSERT INTO companies" in sql
        assert "ON CONFLICT (handle) DO NOTHING" in sql
        assert values == ["c1", "C1", "Desc1", 1, "http://c1.img"]

    @pytest.mark.asyncio
    async def test_optional_fields_default_to_null(self, repo, fake_db):
        fake_db.queue([{**C1, "numEmployees": None, "logoUrl": None}])

        await repo.create({"handle": "c1", "name": "C1", "description": "Desc1"})

        assert fake_db.calls[0][1] == ["c1", "C1", "Desc1", None, None]

    @pytest.mark.asyncio
    async def test_duplicate_handle(self, repo, fake_db):
        fake_db.queue([C1], [])

        await repo.create(C1)
        with pytest.raises(DuplicateHandleException):
            await repo.create(C1)

        # one statement per attempt, no follow-up write after the conflict
        assert len(fake_db.calls) == 2


class TestGetAll:
    @pytest.mark.asyncio
    async def test_get_all(self, repo, fake_db):
        fake_db.queue([C1, C2])

        assert await repo.get_all() == [C1, C2]
        assert "ORDER BY name" in fake_db.calls[0][0]

    @pytest.mark.asyncio
    async def test_empty_table_is_empty_list(self, repo, fake_db):
        assert await repo.get_all() == []


class TestGetByHandle:
    @pytest.mark.asyncio
    async def test_embeds_jobs(self, repo, fake_db):
        job = {k: J1[k] for k in ("id", "title", "salary", "equity")}
        fake_db.queue([C1], [job])

        company = await repo.get_by_handle("c1")

        assert company == {**C1, "jobs": [job]}
        jobs_sql, jobs_values = fake_db.calls[1]
        assert "FROM jobs" in jobs_sql
        assert "ORDER BY id" in jobs_sql
        assert jobs_values == ["c1"]

    @pytest.mark.asyncio
    async def test_not_found(self, repo, fake_db):
        with pytest.raises(CompanyNotFoundException):
            await repo.get_by_handle("nope")
        # jobs are not queried for a missing company
        assert len(fake_db.calls) == 1


class TestGetByName:
    @pytest.mark.asyncio
    async def test_case_insensitive(self, repo, fake_db):
        fake_db.queue([C1])

        assert await repo.get_by_name("c1") == C1
        sql, values = fake_db.calls[0]
        assert "LOWER(name) = LOWER($1)" in sql
        assert values == ["c1"]

    @pytest.mark.asyncio
    async def test_not_found(self, repo):
        with pytest.raises(CompanyNotFoundException):
            await repo.get_by_name("nope")


class TestUpdateByHandle:
    @pytest.mark.asyncio
    async def test_maps_external_names(self, repo, fake_db):
        updated = {**C1, "name": "New", "numEmployees": 10}
        fake_db.queue([updated])

        company = await repo.update_by_handle("c1", {"name": "New", "numEmployees": 10})

        assert company == updated
        sql, values = fake_db.calls[0]
        assert '"name"=$1, "num_employees"=$2' in sql
        assert "WHERE handle = $3" in sql
        assert values == ["New", 10, "c1"]

    @pytest.mark.asyncio
    async def test_null_fields(self, repo, fake_db):
        fake_db.queue([{**C1, "numEmployees": None, "logoUrl": None}])

        await repo.update_by_handle("c1", {"numEmployees": None, "logoUrl": None})

        sql, values = fake_db.calls[0]
        assert '"num_employees"=$1, "logo_url"=$2' in sql
        assert values == [None, None, "c1"]

    @pytest.mark.asyncio
    async def test_not_found(self, repo):
        with pytest.raises(CompanyNotFoundException):
            await repo.update_by_handle("nope", {"name": "New"})

    @pytest.mark.asyncio
    async def test_no_data(self, repo, fake_db):
        with pytest.raises(NoFieldsProvidedException):
            await repo.update_by_handle("c1", {})
        assert fake_db.calls == []


class TestDeleteByHandle:
    @pytest.mark.asyncio
    async def test_delete(self, repo, fake_db):
        fake_db.queue([{"handle": "c1"}])

        assert await repo.delete_by_handle("c1") is None
        sql, values = fake_db.calls[0]
        assert sql.split()[0] == "DELETE"
        assert values == ["c1"]

    @pytest.mark.asyncio
    async def test_not_found(self, repo, fake_db):
        with pytest.raises(CompanyNotFoundException):
            await repo.delete_by_handle("nope")
        assert len(fake_db.calls) == 1


class TestFilteredSearch:
    @pytest.mark.asyncio
    async def test_min_and_max(self, repo, fake_db):
        fake_db.queue([C1, C2])

        assert await repo.filtered_search(min_employees=1, max_employees=2) == [C1, C2]
        sql, values = fake_db.calls[0]
        assert "WHERE 1=1 AND num_employees >= $1 AND num_employees <= $2" in sql
        assert sql.endswith("ORDER BY num_employees")
        assert values == [1, 2]

    @pytest.mark.asyncio
    async def test_name_is_prefix_match_sorted_by_name(self, repo, fake_db):
        fake_db.queue([C1])

        await repo.filtered_search(name="c")

        sql, values = fake_db.calls[0]
        assert "AND name ILIKE $1" in sql
        assert sql.endswith("ORDER BY name")
        assert values == ["c%"]

    @pytest.mark.asyncio
    async def test_placeholders_follow_supplied_filters(self, repo, fake_db):
        fake_db.queue([C2])

        await repo.filtered_search(max_employees=5, name="C")

        sql, values = fake_db.calls[0]
        assert "AND num_employees <= $1 AND name ILIKE $2" in sql
        assert values == [5, "C%"]

    @pytest.mark.asyncio
    async def test_min_equal_max_is_allowed(self, repo, fake_db):
        fake_db.queue([C2])
        assert await repo.filtered_search(min_employees=2, max_employees=2) == [C2]

    @pytest.mark.asyncio
    async def test_invalid_range(self, repo, fake_db):
        with pytest.raises(InvalidRangeException):
            await repo.filtered_search(min_employees=10, max_employees=5)
        assert fake_db.calls == []

    @pytest.mark.asyncio
    async def test_no_match(self, repo, fake_db):
        with pytest.raises(NoMatchException):
            await repo.filtered_search(name="zzz")

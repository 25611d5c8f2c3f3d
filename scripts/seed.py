"""
Seed script - populates the database with sample companies and jobs.

Usage:
    alembic upgrade head
    python -m scripts.seed

This script is IDEMPOTENT - running it twice won't create duplicates.
Rows that already exist are reported and skipped.
"""
import asyncio
from decimal import Decimal

from jobly.core.database import Database
from jobly.core.config import settings
from jobly.core.exceptions import DuplicateHandleException, DuplicateJobException
from jobly.repositories.company_repository import CompanyRepository
from jobly.repositories.job_repository import JobRepository


# ─── Companies ─────────────────────────────────────────────────

COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "numEmployees": 245,
        "logoUrl": "/logos/logo3.png",
    },
    {
        "handle": "arnold-berger-townsend",
        "name": "Arnold, Berger and Townsend",
        "description": "Kind crime at perhaps beat. Enjoy deal purpose serve begin or thought.",
        "numEmployees": 795,
        "logoUrl": None,
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "description": "Difficult ready trip question produce produce someone.",
        "numEmployees": 862,
        "logoUrl": None,
    },
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "description": "Year join loss.",
        "numEmployees": 819,
        "logoUrl": "/logos/logo3.png",
    },
]


# ─── Jobs ──────────────────────────────────────────────────────

JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0"), "companyHandle": "watson-davis"},
    {"title": "Information officer", "salary": 200000, "equity": Decimal("0"), "companyHandle": "bauer-gallagher"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0"), "companyHandle": "bauer-gallagher"},
    {"title": "Early years educator", "salary": 55000, "equity": Decimal("0.015"), "companyHandle": "anderson-arias-morrow"},
    {"title": "Intelligence analyst", "salary": 77000, "equity": None, "companyHandle": "anderson-arias-morrow"},
    {"title": "Systems developer", "salary": 137000, "equity": Decimal("0.042"), "companyHandle": "arnold-berger-townsend"},
]


async def seed():
    """Insert sample data through the repositories."""
    db = Database(settings.database_url)
    companies = CompanyRepository(db)
    jobs = JobRepository(db)

    print("Seeding database...")

    try:
        created = 0
        for company in COMPANIES:
            try:
                await companies.create(company)
                created += 1
            except DuplicateHandleException:
                print(f"  Company {company['handle']} already exists, skipping...")
        print(f"  Created {created} companies")

        created = 0
        for job in JOBS:
            try:
                await jobs.create(job)
                created += 1
            except DuplicateJobException:
                print(f"  Job {job['title']!r} already exists, skipping...")
        print(f"  Created {created} jobs")
    finally:
        await db.dispose()

    print()
    print("Seed complete!")


if __name__ == "__main__":
    asyncio.run(seed())

"""Core module exports."""
from jobly.core.config import settings, get_settings
from jobly.core.database import Database, database, get_db, init_db, close_db
from jobly.core.security import (
    create_access_token,
    decode_token,
    verify_token_type,
)
from jobly.core.sql import sql_for_partial_update
from jobly.core.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InvalidTokenException,
    CompanyNotFoundException,
    JobNotFoundException,
    DuplicateHandleException,
    DuplicateJobException,
    NoFieldsProvidedException,
    InvalidRangeException,
    NoFiltersProvidedException,
    NoMatchException,
)

__all__ = [
    # Config
    "settings",
    "get_settings",
    # Database
    "Database",
    "database",
    "get_db",
    "init_db",
    "close_db",
    # Security
    "create_access_token",
    "decode_token",
    "verify_token_type",
    # SQL
    "sql_for_partial_update",
    # Exceptions
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InvalidTokenException",
    "CompanyNotFoundException",
    "JobNotFoundException",
    "DuplicateHandleException",
    "DuplicateJobException",
    "NoFieldsProvidedException",
    "InvalidRangeException",
    "NoFiltersProvidedException",
    "NoMatchException",
]

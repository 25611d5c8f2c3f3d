"""
API dependencies for dependency injection.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from jobly.core.database import Database, get_db
from jobly.core.security import decode_token, verify_token_type
from jobly.core.exceptions import (
    UnauthorizedException,
    InvalidTokenException,
    ForbiddenException,
)
from jobly.repositories.company_repository import CompanyRepository
from jobly.repositories.job_repository import JobRepository


# Security scheme
security = HTTPBearer(auto_error=False)


class TokenUser(BaseModel):
    """Identity carried by a verified bearer token."""

    username: str
    is_admin: bool = False


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenUser:
    """
    Get the user the bearer token was issued to.

    Raises:
        UnauthorizedException: If no token provided
        InvalidTokenException: If token is invalid or expired
    """
    if not credentials:
        raise UnauthorizedException("Authentication required")

    payload = decode_token(credentials.credentials)

    if not payload:
        raise InvalidTokenException()

    if not verify_token_type(payload, "access"):
        raise InvalidTokenException()

    username = payload.get("sub")
    if not username:
        raise InvalidTokenException()

    user = TokenUser(username=username, is_admin=bool(payload.get("is_admin")))
    request.state.current_user = user
    return user


async def get_admin_user(
    current_user: TokenUser = Depends(get_current_user),
) -> TokenUser:
    """
    Get current user, ensuring they are an admin.

    Raises:
        ForbiddenException: If user is not an admin
    """
    if not current_user.is_admin:
        raise ForbiddenException("Admin access required")
    return current_user


def get_company_repository(db: Database = Depends(get_db)) -> CompanyRepository:
    return CompanyRepository(db)


def get_job_repository(db: Database = Depends(get_db)) -> JobRepository:
    return JobRepository(db)

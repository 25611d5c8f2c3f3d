"""
Custom exceptions for the application.
All API exceptions should inherit from APIException for consistent error handling.

Repositories raise these at the point of detection; the exception handler in
jobly.main turns them into JSON error responses.
"""
from typing import Optional, Any


class APIException(Exception):
    """
    Base exception for all API errors.
    Provides consistent error response format.
    """

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details
        super().__init__(self.message)


class BadRequestException(APIException):
    """400 Bad Request"""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST"):
        super().__init__(400, code, message)


class UnauthorizedException(APIException):
    """401 Unauthorized"""

    def __init__(self, message: str = "Unauthorized", code: str = "UNAUTHORIZED"):
        super().__init__(401, code, message)


class ForbiddenException(APIException):
    """403 Forbidden"""

    def __init__(self, message: str = "Forbidden", code: str = "FORBIDDEN"):
        super().__init__(403, code, message)


class NotFoundException(APIException):
    """404 Not Found"""

    def __init__(self, message: str = "Resource not found", code: str = "NOT_FOUND"):
        super().__init__(404, code, message)


class ConflictException(APIException):
    """409 Conflict"""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(409, code, message)


# Authentication specific exceptions
class InvalidTokenException(UnauthorizedException):
    """Token is invalid or expired"""

    def __init__(self):
        super().__init__(
            message="Invalid token",
            code="INVALID_TOKEN",
        )


# Resource specific exceptions
class CompanyNotFoundException(NotFoundException):
    """Company not found"""

    def __init__(self, handle: Optional[str] = None):
        message = f"No company: {handle}" if handle else "Company not found"
        super().__init__(message=message, code="COMPANY_NOT_FOUND")


class JobNotFoundException(NotFoundException):
    """Job not found"""

    def __init__(self, key: Optional[Any] = None):
        message = f"No job: {key}" if key is not None else "Job not found"
        super().__init__(message=message, code="JOB_NOT_FOUND")


class DuplicateHandleException(ConflictException):
    """Company handle already taken"""

    def __init__(self, handle: str):
        super().__init__(
            message=f"Duplicate company: {handle}",
            code="DUPLICATE_HANDLE",
        )


class DuplicateJobException(ConflictException):
    """Same title already posted for the company"""

    def __init__(self, title: str, company_handle: str):
        super().__init__(
            message=f"Duplicate job: {title} from {company_handle}",
            code="DUPLICATE_JOB",
        )


# Query construction exceptions
class NoFieldsProvidedException(BadRequestException):
    """Partial update called with nothing to update"""

    def __init__(self):
        super().__init__(message="No data provided", code="NO_FIELDS_PROVIDED")


class InvalidRangeException(BadRequestException):
    """Lower bound of a range filter exceeds the upper bound"""

    def __init__(self):
        super().__init__(
            message="Minimum cannot be greater than maximum",
            code="INVALID_RANGE",
        )


class NoFiltersProvidedException(BadRequestException):
    """Filtered search called without any criteria"""

    def __init__(self):
        super().__init__(message="No filters provided", code="NO_FILTERS_PROVIDED")


class NoMatchException(NotFoundException):
    """Filtered search matched nothing"""

    def __init__(self, resource: str):
        super().__init__(
            message=f"No {resource} matched the given filters",
            code="NO_MATCH",
        )

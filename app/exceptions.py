# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors should tell HOW to fix, not just WHAT failed.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class SpeciesCatalogException(Exception):
    """
    Base exception for the species catalog.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "SPECIES_CATALOG_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Species Exceptions
# =============================================================================

class SpeciesNotFoundError(SpeciesCatalogException):
    """Raised when a species ID doesn't exist."""

    def __init__(self, species_id: int):
        super().__init__(
            message=f"Species not found: {species_id}",
            code="SPECIES_NOT_FOUND",
            status_code=404,
            suggestion="Check that the species id is correct and hasn't been deleted",
            details={"species_id": species_id}
        )


class NotSpeciesAuthorError(SpeciesCatalogException):
    """Raised when someone other than the author tries to change a species."""

    def __init__(self, species_id: int):
        super().__init__(
            message=f"Only the author can modify species {species_id}",
            code="NOT_SPECIES_AUTHOR",
            status_code=403,
            suggestion="Sign in as the user who created this species",
            details={"species_id": species_id}
        )


class SpeciesDeleteError(SpeciesCatalogException):
    """Raised when the storage backend rejects a delete."""

    def __init__(self, species_id: int, error: str):
        super().__init__(
            message=error,
            code="SPECIES_DELETE_FAILED",
            status_code=502,
            suggestion="Try again later or contact support if the issue persists",
            details={"species_id": species_id}
        )


class SpeciesWriteError(SpeciesCatalogException):
    """Raised when creating or updating a species fails in storage."""

    def __init__(self, error: str):
        super().__init__(
            message=error,
            code="SPECIES_WRITE_FAILED",
            status_code=502,
            suggestion="Try again later or contact support if the issue persists",
        )


class InvalidSpeciesError(SpeciesCatalogException):
    """Raised when submitted species data fails validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        fields = sorted({".".join(str(p) for p in err.get("loc", ())) for err in errors})
        super().__init__(
            message=f"Invalid species data: {', '.join(fields) or 'unknown field'}",
            code="INVALID_SPECIES",
            status_code=400,
            suggestion="A scientific name and a kingdom are required; population must not be negative",
            details={"fields": fields}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def species_catalog_exception_handler(
    request: Request,
    exc: SpeciesCatalogException
) -> JSONResponse:
    """
    Convert SpeciesCatalogException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )

from fastapi import HTTPException, status

from api_rest.schemas.common import HTTPExceptionResponse
from utils import exceptions


def provider_not_found_exception(err: exceptions.UnknownProviderError) -> HTTPException:
    """An `HTTPException` with status `404` for an unknown `AuthProvider`."""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Provider '{err.provider_id}' not found",
    )


provider_exceptions = {
    status.HTTP_404_NOT_FOUND: {
        "model": HTTPExceptionResponse,
        "description": "Provider not found",
    },
}
"""Possible `HTTPException` Responses while getting a single `AuthProvider`."""

from typing import TypedDict

import pydantic


class HTTPExceptionResponse(TypedDict):
    """Model for a raised `fastapi.HTTPException`."""

    detail: str


class Item[T: pydantic.BaseModel](TypedDict):
    """Response body for a single item."""

    data: T


class Items[T: pydantic.BaseModel](TypedDict):
    """Response body for a complete (non-paginated) list of items."""

    count: int
    data: list[T]

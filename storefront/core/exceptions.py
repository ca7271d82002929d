"""
Application exceptions and their JSON rendering.

Every exception below is rendered by a single handler registered in
``storefront.main``; the body is whatever ``to_content`` returns.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class StorefrontException(Exception):
    """Base exception for the storefront API"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_content(self) -> Dict[str, Any]:
        return {"error": str(self)}


class DuplicateItem(StorefrontException):
    """(addedID, userEmail) is already present in the collection"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, added_id: int, message: str = "This product is already added."):
        super().__init__(message)
        self.added_id = added_id
        self.message = message

    def to_content(self) -> Dict[str, Any]:
        return {"message": self.message, "addedID": self.added_id}


class ItemNotFound(StorefrontException):
    """Delete target does not exist"""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, item_id: int):
        super().__init__("Item not found")
        self.item_id = item_id


class DataLayerFailure(StorefrontException):
    """
    Any database error, reported to the client with a generic message only.
    The original error is kept on ``__cause__`` for logging.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)


async def storefront_exception_handler(request: Request, exc: StorefrontException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc.__cause__ or exc
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


@contextmanager
def data_layer_errors(message: str) -> Iterator[None]:
    """Re-raise any database error as a ``DataLayerFailure`` carrying ``message``.

    The handler logs it together with the request method and path.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataLayerFailure(message) from exc

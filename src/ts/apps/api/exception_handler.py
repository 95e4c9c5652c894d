import logging
from typing import Optional

from django.core.exceptions import BadRequest

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from ts.exceptions import (
    AlreadyExistsError,
    IdentifierRequiredError,
    InvalidLevelError,
    InvalidResourceKindError,
    NotFoundError,
    PlaceholderDetailsRequiredError,
    SelfReferenceError,
)

from .constants import APIFields as F
from .messages import APIMessages as M

logger = logging.getLogger(__name__)

SHARING_ERROR_STATUS_MAP = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyExistsError: status.HTTP_409_CONFLICT,
    SelfReferenceError: status.HTTP_400_BAD_REQUEST,
    InvalidLevelError: status.HTTP_400_BAD_REQUEST,
    InvalidResourceKindError: status.HTTP_400_BAD_REQUEST,
    PlaceholderDetailsRequiredError: status.HTTP_400_BAD_REQUEST,
    IdentifierRequiredError: status.HTTP_400_BAD_REQUEST,
}


def exception_handler(exc: Exception, context: dict) -> Optional[Response]:
    """
    Extends DRF's default handler (which already covers Http404 and
    PermissionDenied) with:
    - BadRequest -> 400
    - sharing errors -> 404 / 409 / 400

    Anything else propagates and becomes a generic 500.
    """
    response = drf_exception_handler(exc, context)

    if response is not None:
        return response

    if isinstance(exc, BadRequest):
        return Response(
            { F.ERROR: str(exc) or M.BAD_REQUEST },
            status=status.HTTP_400_BAD_REQUEST
        )

    for error_class, status_code in SHARING_ERROR_STATUS_MAP.items():
        if isinstance( exc, error_class ):
            logger.debug( f'Sharing error mapped to {status_code}: {exc}' )
            return Response(
                { F.ERROR: str(exc) },
                status = status_code,
            )
        continue

    return None

"""
Error taxonomy and the DRF exception handler.

Every domain failure is raised where it is detected and rendered here:

- NotFoundError (404): missing user, item, booking or request
- NotAuthorizedError (404): the actor may not see or act on the resource
- ItemNotBookableError (404): an owner tried to book their own item
- BusinessValidationError (400): a business rule rejected the input
- UnsupportedStateError (400): unknown booking state token
- AlreadyExistsError (409): user email already taken

Authorization failures are deliberately rendered as 404 so that callers
cannot tell "forbidden" from "absent".
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Optional

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore
from django.http import Http404  # type: ignore
from django.utils import timezone  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

logger = logging.getLogger(__name__)


class ShareItError(exceptions.APIException):
    """Base class for domain errors surfaced through the API."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "An unexpected error occurred."
    default_code = "error"
    kind = "INTERNAL"


class NotFoundError(ShareItError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "The requested resource was not found."
    default_code = "not_found"
    kind = "NOT_FOUND"


class NotAuthorizedError(NotFoundError):
    """The actor is neither allowed to see nor to act on the resource."""

    default_code = "not_authorized"


class ItemNotBookableError(NotFoundError):
    """An item cannot be booked by its own owner."""

    default_code = "item_not_bookable"


class BusinessValidationError(ShareItError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation error."
    default_code = "validation_error"
    kind = "VALIDATION"


class UnsupportedStateError(ShareItError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Unknown state."
    default_code = "unsupported_state"
    kind = "UNSUPPORTED_STATE"


class AlreadyExistsError(ShareItError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "The resource already exists."
    default_code = "already_exists"
    kind = "ALREADY_EXISTS"


# =============================================================================
# EXCEPTION HANDLER
# =============================================================================

def error_body(status_code: int, message: str, field_name: Optional[str] = None) -> dict[str, Any]:
    """Build a single error body: timestamp, numeric code, status name, message."""
    body: dict[str, Any] = {
        "timestamp": timezone.now().strftime("%d-%m-%Y %H:%M:%S"),
        "code": status_code,
        "status": HTTPStatus(status_code).name,
    }
    if field_name is not None:
        body["fieldName"] = field_name
    body["error"] = message
    return body


def _field_errors(detail: Any, prefix: str = "") -> list[tuple[str, str]]:
    """Flatten DRF validation detail into (field, message) pairs."""
    pairs: list[tuple[str, str]] = []
    if isinstance(detail, dict):
        for key, value in detail.items():
            name = f"{prefix}.{key}" if prefix else str(key)
            pairs.extend(_field_errors(value, name))
    elif isinstance(detail, list):
        for value in detail:
            pairs.extend(_field_errors(value, prefix))
    else:
        pairs.append((prefix, str(detail)))
    return pairs


def custom_exception_handler(exc, context) -> Optional[Response]:
    """
    Render every failure in one format.

    Domain errors and DRF errors become one error body; serializer field
    errors become a list of bodies that each carry `fieldName`. Anything
    unclassified is logged with its traceback and rendered as 500.
    """
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, DjangoValidationError):
        exc = exceptions.ValidationError(
            exc.message_dict if hasattr(exc, "message_dict") else exc.messages
        )
    elif isinstance(exc, Http404):
        exc = NotFoundError(str(exc) or None)

    response = exception_handler(exc, context)

    if response is None:
        logger.error("Unhandled exception in %s: %s", view_name, exc, exc_info=exc)
        return Response(
            error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError) and isinstance(exc.detail, (dict, list)):
        pairs = _field_errors(exc.detail)
        logger.warning("Request validation failed in %s: %s", view_name, pairs)
        response.data = [
            error_body(response.status_code, message, field or None) for field, message in pairs
        ]
        return response

    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    logger.warning(
        "%s in %s: %s",
        getattr(exc, "kind", type(exc).__name__),
        view_name,
        message,
    )
    response.data = error_body(response.status_code, str(message))
    return response

"""Structured API errors, field validation errors and a first-error holder."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

MAX_FIELD_ERROR_VALUE_LENGTH = 64

NOT_FOUND_CODE = "NOT_FOUND"
NOT_FOUND_MESSAGE = "The resource requested was not found or is no longer available"
NOT_FOUND_STATUS = int(HTTPStatus.NOT_FOUND)

UNHANDLED_CODE = "UNHANDLED"
UNHANDLED_MESSAGE = "An unhandled error occurred"
UNHANDLED_STATUS = int(HTTPStatus.INTERNAL_SERVER_ERROR)

INVALID_FIELD_CODE = "INVALID_FIELD"
INVALID_FIELD_MESSAGE = "The field contains an invalid value"
INVALID_FIELD_STATUS = int(HTTPStatus.BAD_REQUEST)

ENTITY_CAN_NOT_BE_DELETED_CODE = "ENTITY_CAN_NOT_BE_DELETED"
ENTITY_CAN_NOT_BE_DELETED_MESSAGE = "The entity requested for delete can not be deleted"
ENTITY_CAN_NOT_BE_DELETED_STATUS = int(HTTPStatus.BAD_REQUEST)

ENTITY_CAN_NOT_BE_UPDATED_CODE = "ENTITY_CAN_NOT_BE_UPDATED"
ENTITY_CAN_NOT_BE_UPDATED_MESSAGE = "The entity requested for update can not be updated"
ENTITY_CAN_NOT_BE_UPDATED_STATUS = int(HTTPStatus.BAD_REQUEST)

COULD_NOT_VALIDATE_CODE = "COULD_NOT_VALIDATE"
COULD_NOT_VALIDATE_MESSAGE = (
    "The supplied request contains an invalid document or no valid accept "
    "content were available, see cause"
)
COULD_NOT_VALIDATE_STATUS = int(HTTPStatus.BAD_REQUEST)

UNAUTHORIZED_CODE = "UNAUTHORIZED"
UNAUTHORIZED_MESSAGE = (
    "The request could not be completed. The session is not authorized "
    "or the credentials are invalid"
)
UNAUTHORIZED_STATUS = int(HTTPStatus.UNAUTHORIZED)

INVALID_FILTER_CODE = "INVALID_FILTER"
INVALID_FILTER_MESSAGE = "The filter query supplied is invalid"
INVALID_FILTER_STATUS = int(HTTPStatus.BAD_REQUEST)

INVALID_PAGINATION_CODE = "INVALID_PAGINATION"
INVALID_PAGINATION_MESSAGE = "The pagination properties provided are invalid"
INVALID_PAGINATION_STATUS = int(HTTPStatus.BAD_REQUEST)

INVALID_SORT_CODE = "INVALID_SORT_IDENTIFIER"
INVALID_SORT_MESSAGE = "The sort order supplied is invalid"
INVALID_SORT_STATUS = int(HTTPStatus.BAD_REQUEST)


class ApiError(Exception):
    """An error meant to be reported to an API client."""

    def __init__(
        self,
        code: str,
        message: str,
        status: int,
        cause: BaseException | None = None,
        append_cause: bool = False,
    ) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.status = status
        self.cause = cause
        self.append_cause = append_cause

    def __str__(self) -> str:
        text = f"{self.code}: {self.message}"
        if self.cause is not None and self.append_cause:
            text = f"{text}: {self.cause}"
        return text


class FieldError(Exception):
    """A validation failure for a single named field."""

    def __init__(self, reason: str, field_name: str, field_value: Any) -> None:
        super().__init__(reason, field_name, field_value)
        self.reason = reason
        self.field_name = field_name
        self.field_value = field_value

    def __str__(self) -> str:
        value = self.field_value
        if isinstance(value, str) and len(value) > MAX_FIELD_ERROR_VALUE_LENGTH:
            value = value[:MAX_FIELD_ERROR_VALUE_LENGTH] + "..."
        return f"the value '{value}' for '{self.field_name}' is invalid: {self.reason}"


@dataclass
class ErrorHolder:
    """Keeps the first error it is given and ignores later ones."""

    error: BaseException | None = None

    def set_error(self, err: BaseException | None) -> bool:
        """Record err if none is held yet; return whether an error is held."""
        if err is not None and self.error is None:
            self.error = err
        return self.error is not None

    def has_error(self) -> bool:
        return self.error is not None


def new_not_found() -> ApiError:
    return ApiError(NOT_FOUND_CODE, NOT_FOUND_MESSAGE, NOT_FOUND_STATUS)


def new_unhandled(cause: BaseException | None) -> ApiError:
    return ApiError(UNHANDLED_CODE, UNHANDLED_MESSAGE, UNHANDLED_STATUS, cause=cause)


def new_entity_can_not_be_deleted() -> ApiError:
    return ApiError(
        ENTITY_CAN_NOT_BE_DELETED_CODE,
        ENTITY_CAN_NOT_BE_DELETED_MESSAGE,
        ENTITY_CAN_NOT_BE_DELETED_STATUS,
    )


def new_entity_can_not_be_deleted_from(err: BaseException | None) -> ApiError:
    return ApiError(
        ENTITY_CAN_NOT_BE_DELETED_CODE,
        ENTITY_CAN_NOT_BE_DELETED_MESSAGE,
        ENTITY_CAN_NOT_BE_DELETED_STATUS,
        cause=err,
        append_cause=True,
    )


def new_entity_can_not_be_updated_from(err: BaseException | None) -> ApiError:
    return ApiError(
        ENTITY_CAN_NOT_BE_UPDATED_CODE,
        ENTITY_CAN_NOT_BE_UPDATED_MESSAGE,
        ENTITY_CAN_NOT_BE_UPDATED_STATUS,
        cause=err,
        append_cause=True,
    )


def new_field_api_error(field_error: FieldError) -> ApiError:
    return ApiError(
        INVALID_FIELD_CODE,
        INVALID_FIELD_MESSAGE,
        INVALID_FIELD_STATUS,
        cause=field_error,
        append_cause=True,
    )


def new_could_not_validate(err: BaseException | None) -> ApiError:
    return ApiError(
        COULD_NOT_VALIDATE_CODE,
        COULD_NOT_VALIDATE_MESSAGE,
        COULD_NOT_VALIDATE_STATUS,
        cause=err,
    )


def new_unauthorized() -> ApiError:
    return ApiError(UNAUTHORIZED_CODE, UNAUTHORIZED_MESSAGE, UNAUTHORIZED_STATUS)


def new_invalid_filter(cause: BaseException | None) -> ApiError:
    return ApiError(
        INVALID_FILTER_CODE,
        INVALID_FILTER_MESSAGE,
        INVALID_FILTER_STATUS,
        cause=cause,
        append_cause=True,
    )


def new_invalid_pagination(err: BaseException | None) -> ApiError:
    return ApiError(
        INVALID_PAGINATION_CODE,
        INVALID_PAGINATION_MESSAGE,
        INVALID_PAGINATION_STATUS,
        cause=err,
        append_cause=True,
    )


def new_invalid_sort(err: BaseException | None) -> ApiError:
    return ApiError(
        INVALID_SORT_CODE,
        INVALID_SORT_MESSAGE,
        INVALID_SORT_STATUS,
        cause=err,
        append_cause=True,
    )
"""
heroku_sdk.framework.response
──────────────────────────────
Response classification: turn an httpx.Response into either the declared
result type or a raised HerokuApiFailure.

- 2xx: validate the body against the declared type. A body that does not
  fit raises InvalidResponseError, chained to the parse error.
- anything else: parse the body as a HerokuApiError envelope, falling back
  to the empty envelope, and raise the ApiError subclass for the status.
"""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from heroku_sdk.framework.endpoint import Empty
from heroku_sdk.framework.errors import (
    HerokuApiError,
    InvalidResponseError,
    api_error_for,
)
from heroku_sdk.framework.http import is_success

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _is_empty_type(response_type: Any) -> bool:
    return response_type is None or response_type is Empty or response_type == list[Empty]


def parse_error(response: httpx.Response) -> HerokuApiError:
    """Best-effort parse of an error body. Never raises."""
    try:
        return HerokuApiError.model_validate_json(response.content)
    except ValidationError:
        return HerokuApiError()


def parse_body(response: httpx.Response, response_type: Any) -> Any:
    """
    Validate a success body against *response_type*.
    Raises InvalidResponseError if the body does not fit.
    """
    try:
        if _is_empty_type(response_type):
            if response.content.strip():
                json.loads(response.content)
            return Empty()
        return _adapter(response_type).validate_json(response.content)
    except (ValidationError, ValueError) as exc:
        raise InvalidResponseError(
            f"Response body does not match {getattr(response_type, '__name__', response_type)}.",
            status_code=response.status_code,
            detail=str(exc),
        ) from exc


def raise_for_failure(response: httpx.Response) -> None:
    """Raise the ApiError for a non-success response; do nothing on success."""
    if is_success(response.status_code):
        return
    raise api_error_for(response.status_code, parse_error(response), response.headers)


def match_response(response: httpx.Response, response_type: type[T] | Any) -> T:
    """Return the parsed success payload or raise the classified failure."""
    raise_for_failure(response)
    return parse_body(response, response_type)


def match_raw_response(response: httpx.Response) -> httpx.Response:
    """
    Return the response unchanged on success, or raise the classified failure.
    Useful for debugging or when the caller wants to read the body itself.
    """
    raise_for_failure(response)
    return response


__all__ = [
    "match_response",
    "match_raw_response",
    "parse_body",
    "parse_error",
    "raise_for_failure",
]

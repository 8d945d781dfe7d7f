"""
heroku_sdk.framework.endpoint
──────────────────────────────
The contract every Platform API operation implements.

A descriptor is a frozen pydantic model. Its class declares the HTTP method,
the URL template and the response type; its fields hold the path parameters
(declared with PathParam, never serialized) and the request body. Optional
body fields default to None and are left out of the JSON body.

    class AppDetails(HerokuEndpoint):
        method = Method.GET
        path_template = "apps/{app_id}"
        response_type = App

        app_id: str = PathParam(description="app id or name")

    client.request(AppDetails(app_id="example"))
"""
from __future__ import annotations

from string import Formatter
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from heroku_sdk.framework.http import Method


def PathParam(**kwargs: Any) -> Any:
    """Declare a descriptor field that fills the URL template instead of the body."""
    return Field(exclude=True, **kwargs)


class Empty(BaseModel):
    """
    Marker for responses without a meaningful body. Some endpoints answer
    with ``{}``, some with ``[]`` and some with nothing at all; all of them
    validate to ``Empty()``.
    """

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def discard_payload(cls, data: Any) -> dict:
        return {}


class HerokuEndpoint(BaseModel):
    """Base class for one REST operation: method, path, optional body and query."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    method: ClassVar[Method]
    path_template: ClassVar[str]
    response_type: ClassVar[Any] = Empty

    @classmethod
    def path_fields(cls) -> tuple[str, ...]:
        return tuple(
            name for _, name, _, _ in Formatter().parse(cls.path_template) if name
        )

    @classmethod
    def body_fields(cls) -> tuple[str, ...]:
        return tuple(
            name for name, info in cls.model_fields.items() if not info.exclude
        )

    def path(self) -> str:
        """Return the URL path, relative to the API base, with parameters substituted."""
        return self.path_template.format(
            **{name: getattr(self, name) for name in self.path_fields()}
        )

    def body(self) -> Any | None:
        """Return the JSON body, or None when the operation sends no body."""
        if not self.body_fields():
            return None
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def query(self) -> dict[str, Any] | None:
        return None


__all__ = ["HerokuEndpoint", "Empty", "PathParam", "Method"]

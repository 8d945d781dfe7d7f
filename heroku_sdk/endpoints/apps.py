"""
heroku_sdk.endpoints.apps
──────────────────────────
Apps and app config vars.

https://devcenter.heroku.com/articles/platform-api-reference#app
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from heroku_sdk.endpoints.common import RegionRef, StackRef, TeamRef, UserRef
from heroku_sdk.framework.endpoint import HerokuEndpoint, Method, PathParam


class App(BaseModel):
    """An app represents the program that you would like to deploy and run on Heroku."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    acm: bool | None = None
    archived_at: datetime | None = None
    buildpack_provided_description: str | None = None
    build_stack: StackRef | None = None
    git_url: str | None = None
    internal_routing: bool | None = None
    maintenance: bool | None = None
    owner: UserRef | None = None
    region: RegionRef | None = None
    organization: TeamRef | None = None
    team: TeamRef | None = None
    space: dict | None = None
    released_at: datetime | None = None
    repo_size: int | None = None
    slug_size: int | None = None
    stack: StackRef | None = None
    web_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ── Apps ──────────────────────────────────────────────────────────────────────

class AppList(HerokuEndpoint):
    method = Method.GET
    path_template = "apps"
    response_type = list[App]


class UserAppList(HerokuEndpoint):
    """List the apps owned by an account (email or id)."""

    method = Method.GET
    path_template = "users/{account_id}/apps"
    response_type = list[App]

    account_id: str = PathParam()


class AppDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "apps/{app_id}"
    response_type = App

    app_id: str = PathParam(description="app id or name")


class AppCreate(HerokuEndpoint):
    """Create a new app. Every parameter is optional; Heroku picks a name if none is given."""

    method = Method.POST
    path_template = "apps"
    response_type = App

    name: str | None = None
    region: str | None = None
    stack: str | None = None


class AppUpdate(HerokuEndpoint):
    method = Method.PATCH
    path_template = "apps/{app_id}"
    response_type = App

    app_id: str = PathParam()
    build_stack: str | None = None
    maintenance: bool | None = None
    name: str | None = None


class AppDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "apps/{app_id}"
    response_type = App

    app_id: str = PathParam()


# ── Config vars ───────────────────────────────────────────────────────────────

class ConfigVarDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "apps/{app_id}/config-vars"
    response_type = dict[str, str]

    app_id: str = PathParam()


class ConfigVarUpdate(HerokuEndpoint):
    """
    Set or unset config vars. The body is the bare map; a ``None`` value
    is sent as null, which removes the var.
    """

    method = Method.PATCH
    path_template = "apps/{app_id}/config-vars"
    response_type = dict[str, str]

    app_id: str = PathParam()
    vars: dict[str, str | None]

    def body(self) -> Any | None:
        return dict(self.vars)


__sdk_export__ = {
    "resource": "apps",
    "models": ["App"],
    "endpoints": [
        "AppList", "UserAppList", "AppDetails", "AppCreate", "AppUpdate",
        "AppDelete", "ConfigVarDetails", "ConfigVarUpdate",
    ],
}

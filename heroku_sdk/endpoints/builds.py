"""
heroku_sdk.endpoints.builds
────────────────────────────
Builds turn a source tarball into a slug.

https://devcenter.heroku.com/articles/platform-api-reference#build
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from heroku_sdk.endpoints.common import AppRef, Ref, StackRef, UserRef
from heroku_sdk.framework.endpoint import Empty, HerokuEndpoint, Method, PathParam


class BuildSourceBlob(BaseModel):
    model_config = ConfigDict(extra="ignore")

    checksum: str | None = None
    url: str | None = None
    version: str | None = None
    version_description: str | None = None


class Buildpack(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str | None = None
    name: str | None = None


class Build(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    app: AppRef | None = None
    buildpacks: list[Buildpack] | None = None
    output_stream_url: str | None = None
    source_blob: BuildSourceBlob | None = None
    release: Ref | None = None
    slug: Ref | None = None
    stack: str | StackRef | None = None
    status: str | None = None
    user: UserRef | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ── Request bodies ────────────────────────────────────────────────────────────

class SourceBlobParam(BaseModel):
    """Location of the source tarball, with optional integrity checksum and version label."""

    url: str
    checksum: str | None = None
    version: str | None = None


class BuildpackParam(BaseModel):
    url: str
    name: str | None = None


# ── Endpoints ─────────────────────────────────────────────────────────────────

class BuildCreate(HerokuEndpoint):
    """
    Create a new build from a source tarball.

        BuildCreate(
            app_id="APP_ID",
            source_blob=SourceBlobParam(url="https://example.com/source.tgz?token=xyz"),
            buildpacks=[BuildpackParam(url="heroku/python", name="heroku/python")],
        )
    """

    method = Method.POST
    path_template = "apps/{app_id}/builds"
    response_type = Build

    app_id: str = PathParam()
    source_blob: SourceBlobParam
    buildpacks: list[BuildpackParam] | None = Field(default=None)


class BuildList(HerokuEndpoint):
    method = Method.GET
    path_template = "apps/{app_id}/builds"
    response_type = list[Build]

    app_id: str = PathParam()


class BuildDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "apps/{app_id}/builds/{build_id}"
    response_type = Build

    app_id: str = PathParam()
    build_id: str = PathParam()


class BuildDeleteCache(HerokuEndpoint):
    """Destroy the build cache of an app. Heroku answers with an empty object."""

    method = Method.DELETE
    path_template = "apps/{app_id}/build-cache"
    response_type = Empty

    app_id: str = PathParam()


__sdk_export__ = {
    "resource": "builds",
    "models": ["Build", "SourceBlobParam", "BuildpackParam"],
    "endpoints": ["BuildCreate", "BuildList", "BuildDetails", "BuildDeleteCache"],
}

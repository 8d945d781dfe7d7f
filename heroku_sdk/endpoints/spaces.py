"""
heroku_sdk.endpoints.spaces
────────────────────────────
Private spaces, their NAT details, ownership transfer and member access.
Network rulesets and VPN connections live in rulesets.py and vpn.py.

https://devcenter.heroku.com/articles/platform-api-reference#space
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from heroku_sdk.endpoints.common import NamedRef, RegionRef, TeamRef, UserRef
from heroku_sdk.framework.endpoint import HerokuEndpoint, Method, PathParam


class Space(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    cidr: str | None = None
    data_cidr: str | None = None
    organization: TeamRef | None = None
    team: TeamRef | None = None
    region: RegionRef | None = None
    shield: bool | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SpaceNAT(BaseModel):
    """Outbound IPs of a space. Only available once the space is allocated."""

    model_config = ConfigDict(extra="ignore")

    sources: list[str] = Field(default_factory=list)
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SpacePermission(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    description: str | None = None


class SpaceAccess(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    space: NamedRef | None = None
    user: UserRef | None = None
    permissions: list[SpacePermission] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PermissionParam(BaseModel):
    name: str


# ── Spaces ────────────────────────────────────────────────────────────────────

class SpaceList(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces"
    response_type = list[Space]


class SpaceDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}"
    response_type = Space

    space_id: str = PathParam(description="space id or name")


class SpaceCreate(HerokuEndpoint):
    method = Method.POST
    path_template = "spaces"
    response_type = Space

    name: str
    team: str
    region: str | None = None
    shield: bool | None = None
    cidr: str | None = None
    data_cidr: str | None = None
    log_drain_url: str | None = None


class SpaceUpdate(HerokuEndpoint):
    method = Method.PATCH
    path_template = "spaces/{space_id}"
    response_type = Space

    space_id: str = PathParam()
    name: str | None = None


class SpaceDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "spaces/{space_id}"
    response_type = Space

    space_id: str = PathParam()


class SpaceNATDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/nat"
    response_type = SpaceNAT

    space_id: str = PathParam()


class SpaceTransferCreate(HerokuEndpoint):
    """Transfer a space to another team."""

    method = Method.POST
    path_template = "spaces/{space_id}/transfer"
    response_type = Space

    space_id: str = PathParam()
    new_owner: str


# ── Member access ─────────────────────────────────────────────────────────────

class SpaceAccessList(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/members"
    response_type = list[SpaceAccess]

    space_id: str = PathParam()


class SpaceAccessDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/members/{account_id}"
    response_type = SpaceAccess

    space_id: str = PathParam()
    account_id: str = PathParam()


class SpaceAccessUpdate(HerokuEndpoint):
    """Replace a member's permissions on a space."""

    method = Method.PATCH
    path_template = "spaces/{space_id}/members/{account_id}"
    response_type = SpaceAccess

    space_id: str = PathParam()
    account_id: str = PathParam()
    permissions: list[PermissionParam]


__sdk_export__ = {
    "resource": "spaces",
    "models": ["Space", "SpaceNAT", "SpaceAccess", "PermissionParam"],
    "endpoints": [
        "SpaceList", "SpaceDetails", "SpaceCreate", "SpaceUpdate", "SpaceDelete",
        "SpaceNATDetails", "SpaceTransferCreate", "SpaceAccessList",
        "SpaceAccessDetails", "SpaceAccessUpdate",
    ],
}

"""
heroku_sdk.endpoints.vpn
─────────────────────────
Site-to-site VPN connections of a private space.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from heroku_sdk.framework.endpoint import HerokuEndpoint, Method, PathParam


class VPNTunnel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ip: str | None = None
    customer_ip: str | None = None
    pre_shared_key: str | None = None
    status: str | None = None
    status_message: str | None = None
    last_status_change: str | None = None


class VPNConnection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    public_ip: str | None = None
    routable_cidrs: list[str] = Field(default_factory=list)
    space_cidr_block: str | None = None
    tunnels: list[VPNTunnel] = Field(default_factory=list)
    ike_version: int | None = None
    status: str | None = None
    status_message: str | None = None


class VPNCreate(HerokuEndpoint):
    """Create a VPN connection to the gateway at ``public_ip``."""

    method = Method.POST
    path_template = "spaces/{space_id}/vpn-connections"
    response_type = VPNConnection

    space_id: str = PathParam()
    name: str
    public_ip: str
    routable_cidrs: list[str]


class VPNList(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/vpn-connections"
    response_type = list[VPNConnection]

    space_id: str = PathParam()


class VPNDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/vpn-connections/{vpn_id}"
    response_type = VPNConnection

    space_id: str = PathParam()
    vpn_id: str = PathParam(description="vpn connection id or name")


class VPNDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "spaces/{space_id}/vpn-connections/{vpn_id}"
    response_type = VPNConnection

    space_id: str = PathParam()
    vpn_id: str = PathParam()


__sdk_export__ = {
    "resource": "vpn",
    "models": ["VPNConnection"],
    "endpoints": ["VPNCreate", "VPNList", "VPNDetails", "VPNDelete"],
}

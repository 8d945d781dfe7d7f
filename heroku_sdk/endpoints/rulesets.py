"""
heroku_sdk.endpoints.rulesets
──────────────────────────────
Inbound and outbound network rulesets of a private space. Creating a
ruleset replaces the space's current one; older rulesets stay listable.
"""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from heroku_sdk.endpoints.common import NamedRef
from heroku_sdk.framework.endpoint import HerokuEndpoint, Method, PathParam


class InboundRule(BaseModel):
    """Allow or deny traffic from a CIDR block."""

    model_config = ConfigDict(extra="ignore")

    action: Literal["allow", "deny"]
    source: str


class OutboundRule(BaseModel):
    """Allow traffic to a CIDR block on a port range."""

    model_config = ConfigDict(extra="ignore")

    target: str
    from_port: int
    to_port: int
    protocol: str


class InboundRuleset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    space: NamedRef | None = None
    rules: list[InboundRule] = Field(default_factory=list)
    created_by: str | None = None
    created_at: datetime | None = None


class OutboundRuleset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    space: NamedRef | None = None
    rules: list[OutboundRule] = Field(default_factory=list)
    created_by: str | None = None
    created_at: datetime | None = None


# ── Inbound ───────────────────────────────────────────────────────────────────

class InboundRulesetCreate(HerokuEndpoint):
    """
    Replace the inbound ruleset of a space.

        InboundRulesetCreate(
            space_id="SPACE_ID",
            rules=[InboundRule(action="allow", source="1.1.1.1/1")],
        )
    """

    method = Method.PUT
    path_template = "spaces/{space_id}/inbound-ruleset"
    response_type = InboundRuleset

    space_id: str = PathParam()
    rules: list[InboundRule]


class InboundRulesetCurrent(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/inbound-ruleset"
    response_type = InboundRuleset

    space_id: str = PathParam()


class InboundRulesetDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/inbound-rulesets/{ruleset_id}"
    response_type = InboundRuleset

    space_id: str = PathParam()
    ruleset_id: str = PathParam()


class InboundRulesetList(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/inbound-rulesets"
    response_type = list[InboundRuleset]

    space_id: str = PathParam()


# ── Outbound ──────────────────────────────────────────────────────────────────

class OutboundRulesetCreate(HerokuEndpoint):
    """
    Replace the outbound ruleset of a space.

        OutboundRulesetCreate(
            space_id="SPACE_ID",
            rules=[OutboundRule(target="1.1.1.1/1", protocol="tcp", from_port=80, to_port=80)],
        )
    """

    method = Method.PUT
    path_template = "spaces/{space_id}/outbound-ruleset"
    response_type = OutboundRuleset

    space_id: str = PathParam()
    rules: list[OutboundRule]


class OutboundRulesetCurrent(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/outbound-ruleset"
    response_type = OutboundRuleset

    space_id: str = PathParam()


class OutboundRulesetDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/outbound-rulesets/{ruleset_id}"
    response_type = OutboundRuleset

    space_id: str = PathParam()
    ruleset_id: str = PathParam()


class OutboundRulesetList(HerokuEndpoint):
    method = Method.GET
    path_template = "spaces/{space_id}/outbound-rulesets"
    response_type = list[OutboundRuleset]

    space_id: str = PathParam()


__sdk_export__ = {
    "resource": "rulesets",
    "models": ["InboundRule", "OutboundRule", "InboundRuleset", "OutboundRuleset"],
    "endpoints": [
        "InboundRulesetCreate", "InboundRulesetCurrent", "InboundRulesetDetails",
        "InboundRulesetList", "OutboundRulesetCreate", "OutboundRulesetCurrent",
        "OutboundRulesetDetails", "OutboundRulesetList",
    ],
}

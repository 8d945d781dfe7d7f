"""
heroku_sdk.endpoints.addons
────────────────────────────
Add-ons, add-on attachments and add-on webhooks.

https://devcenter.heroku.com/articles/platform-api-reference#add-on
"""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from heroku_sdk.endpoints.common import AppRef, NamedRef, PlanRef
from heroku_sdk.framework.endpoint import HerokuEndpoint, Method, PathParam


# ── Response models ───────────────────────────────────────────────────────────

class Addon(BaseModel):
    """Add-ons represent add-ons that have been provisioned and attached to one or more apps."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    actions: list[dict] = Field(default_factory=list)
    addon_service: NamedRef | None = None
    billing_entity: NamedRef | None = None
    app: AppRef | None = None
    billed_price: dict | None = None
    config_vars: list[str] = Field(default_factory=list)
    plan: PlanRef | None = None
    provider_id: str | None = None
    state: str | None = None
    web_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AddonAttachment(BaseModel):
    """An add-on attachment represents a connection between an app and an add-on."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    addon: NamedRef | None = None
    app: AppRef | None = None
    namespace: str | None = None
    web_url: str | None = None
    log_input_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AddonWebhook(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    addon: NamedRef | None = None
    include: list[str] = Field(default_factory=list)
    level: str | None = None
    url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ── Request bodies ────────────────────────────────────────────────────────────

class AttachmentName(BaseModel):
    name: str | None = None


# ── Add-on ────────────────────────────────────────────────────────────────────

class AddonCreate(HerokuEndpoint):
    """
    Create a new add-on.

        AddonCreate(
            app_id="APP_ID",
            plan="heroku-postgresql:dev",
            attachment=AttachmentName(name="DATABASE"),
            config={"db-version": "1.2.3"},
        )
    """

    method = Method.POST
    path_template = "apps/{app_id}/addons"
    response_type = Addon

    app_id: str = PathParam(description="app id or name")
    plan: str
    attachment: AttachmentName | None = None
    config: dict[str, str] | None = None
    confirm: str | None = None
    name: str | None = Field(default=None, pattern=r"^[a-zA-Z][A-Za-z0-9_-]+$")


class AddonResolutionCreate(HerokuEndpoint):
    """Resolve an add-on from a name, optionally scoped to an app and service."""

    method = Method.POST
    path_template = "actions/addons/resolve"
    response_type = list[Addon]

    addon: str
    addon_service: str | None = None
    app: str | None = None


class AddonActionProvision(HerokuEndpoint):
    """Mark an add-on as provisioned for use."""

    method = Method.POST
    path_template = "addons/{addon_id}/actions/provision"
    response_type = Addon

    addon_id: str = PathParam()


class AddonActionDeprovision(HerokuEndpoint):
    """Mark an add-on as deprovisioned."""

    method = Method.POST
    path_template = "addons/{addon_id}/actions/deprovision"
    response_type = Addon

    addon_id: str = PathParam()


class AddonList(HerokuEndpoint):
    method = Method.GET
    path_template = "addons"
    response_type = list[Addon]


class AppAddonList(HerokuEndpoint):
    method = Method.GET
    path_template = "apps/{app_id}/addons"
    response_type = list[Addon]

    app_id: str = PathParam()


class UserAddonList(HerokuEndpoint):
    method = Method.GET
    path_template = "users/{account_id}/addons"
    response_type = list[Addon]

    account_id: str = PathParam(description="account email or id, or \"~\" for the current user")


class AddonDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "addons/{addon_id}"
    response_type = Addon

    addon_id: str = PathParam()


class AddonUpdate(HerokuEndpoint):
    """Change the plan or name of an existing add-on."""

    method = Method.PATCH
    path_template = "apps/{app_id}/addons/{addon_id}"
    response_type = Addon

    app_id: str = PathParam()
    addon_id: str = PathParam()
    plan: str
    name: str | None = None


class AddonDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "apps/{app_id}/addons/{addon_id}"
    response_type = Addon

    app_id: str = PathParam()
    addon_id: str = PathParam()


# ── Attachments ───────────────────────────────────────────────────────────────

class AttachmentCreate(HerokuEndpoint):
    """Attach an existing add-on to an app."""

    method = Method.POST
    path_template = "addon-attachments"
    response_type = AddonAttachment

    addon: str
    app: str
    confirm: str | None = None
    name: str | None = None
    namespace: str | None = None


class AttachmentResolutionCreate(HerokuEndpoint):
    """Resolve an add-on attachment from a name, optionally scoped to an app and service."""

    method = Method.POST
    path_template = "actions/addon-attachments/resolve"
    response_type = list[AddonAttachment]

    addon_attachment: str
    addon_service: str | None = None
    app: str | None = None


class AttachmentDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "addon-attachments/{attachment_id}"
    response_type = AddonAttachment

    attachment_id: str = PathParam()


# ── Webhooks ──────────────────────────────────────────────────────────────────

class WebhookCreate(HerokuEndpoint):
    """
    Subscribe an add-on to app notifications. With level "notify" Heroku
    makes a single delivery attempt; with "sync" it retries until the
    request succeeds or a limit is reached.
    """

    method = Method.POST
    path_template = "addons/{addon_id}/webhooks"
    response_type = AddonWebhook

    addon_id: str = PathParam()
    include: list[str]
    level: Literal["notify", "sync"]
    url: str
    authorization: str | None = None
    secret: str | None = None


class WebhookList(HerokuEndpoint):
    method = Method.GET
    path_template = "addons/{addon_id}/webhooks"
    response_type = list[AddonWebhook]

    addon_id: str = PathParam()


class WebhookDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "addons/{addon_id}/webhooks/{webhook_id}"
    response_type = AddonWebhook

    addon_id: str = PathParam()
    webhook_id: str = PathParam()


__sdk_export__ = {
    "resource": "addons",
    "models": ["Addon", "AddonAttachment", "AddonWebhook", "AttachmentName"],
    "endpoints": [
        "AddonCreate", "AddonResolutionCreate", "AddonActionProvision",
        "AddonActionDeprovision", "AddonList", "AppAddonList", "UserAddonList", "AddonDetails",
        "AddonUpdate", "AddonDelete", "AttachmentCreate",
        "AttachmentResolutionCreate", "AttachmentDelete", "WebhookCreate",
        "WebhookList", "WebhookDelete",
    ],
}

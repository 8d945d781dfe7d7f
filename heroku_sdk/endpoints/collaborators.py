"""
heroku_sdk.endpoints.collaborators
───────────────────────────────────
Collaborators are users with access to an app.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from heroku_sdk.endpoints.common import AppRef, UserRef
from heroku_sdk.framework.endpoint import HerokuEndpoint, Method, PathParam


class Collaborator(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    app: AppRef | None = None
    permissions: list[dict] | None = None
    role: str | None = None
    user: UserRef | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CollaboratorCreate(HerokuEndpoint):
    """Add a collaborator (email or id) to an app; ``silent`` suppresses the invitation email."""

    method = Method.POST
    path_template = "apps/{app_id}/collaborators"
    response_type = Collaborator

    app_id: str = PathParam()
    user: str
    silent: bool | None = None


class CollaboratorList(HerokuEndpoint):
    method = Method.GET
    path_template = "apps/{app_id}/collaborators"
    response_type = list[Collaborator]

    app_id: str = PathParam()


class CollaboratorDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "apps/{app_id}/collaborators/{collaborator_id}"
    response_type = Collaborator

    app_id: str = PathParam()
    collaborator_id: str = PathParam(description="collaborator id or email")


class CollaboratorDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "apps/{app_id}/collaborators/{collaborator_id}"
    response_type = Collaborator

    app_id: str = PathParam()
    collaborator_id: str = PathParam()


__sdk_export__ = {
    "resource": "collaborators",
    "models": ["Collaborator"],
    "endpoints": [
        "CollaboratorCreate", "CollaboratorList", "CollaboratorDetails",
        "CollaboratorDelete",
    ],
}

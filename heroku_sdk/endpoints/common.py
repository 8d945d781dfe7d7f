"""Reference objects embedded in many Platform API resources."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Ref(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None


class NamedRef(Ref):
    name: str | None = None


class AppRef(NamedRef):
    pass


class PlanRef(NamedRef):
    pass


class RegionRef(NamedRef):
    pass


class StackRef(NamedRef):
    pass


class TeamRef(NamedRef):
    pass


class UserRef(Ref):
    email: str | None = None

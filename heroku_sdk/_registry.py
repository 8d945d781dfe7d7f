"""
heroku_sdk._registry
─────────────────────
Internal endpoint registry: the single source of truth for which resource
modules exist and which descriptors each one publishes.

Adding a new resource module:
  1. Implement the descriptors in ``heroku_sdk/endpoints/<resource>.py``
  2. Add ``__sdk_export__`` to the module with its ``endpoints`` list
  3. Add the module name to ENDPOINT_MODULES below
"""
from __future__ import annotations

import importlib
from typing import Any

from heroku_sdk.framework.endpoint import HerokuEndpoint

ENDPOINT_MODULES: list[str] = [
    "account",
    "addons",
    "apps",
    "builds",
    "collaborators",
    "spaces",
    "rulesets",
    "vpn",
]


def collect_endpoints() -> dict[str, list[type[HerokuEndpoint]]]:
    """
    Discover every descriptor class registered across resource modules.

    Iterates ``ENDPOINT_MODULES``, imports each one, reads its
    ``__sdk_export__["endpoints"]`` list and resolves the classes.

    Returns:
        Mapping of resource name to its descriptor classes, in declaration order.
    """
    catalog: dict[str, list[type[HerokuEndpoint]]] = {}

    for module_name in ENDPOINT_MODULES:
        mod = importlib.import_module(f"heroku_sdk.endpoints.{module_name}")
        export_meta: dict[str, Any] = getattr(mod, "__sdk_export__")
        classes = []
        for name in export_meta["endpoints"]:
            cls = getattr(mod, name)
            if not issubclass(cls, HerokuEndpoint):
                raise TypeError(f"{module_name}.{name} is not a HerokuEndpoint")
            classes.append(cls)
        catalog[export_meta["resource"]] = classes

    return catalog


def iter_endpoints() -> list[type[HerokuEndpoint]]:
    """Flat list of every registered descriptor class."""
    return [cls for classes in collect_endpoints().values() for cls in classes]

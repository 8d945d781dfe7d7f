"""
heroku_sdk
──────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.

Descriptors live in ``heroku_sdk.endpoints.<resource>``.
"""
from heroku_sdk.framework.apiclient import HttpApiClient
from heroku_sdk.framework.auth import Credentials, CredentialsAuth, UserAuthToken, attach_auth
from heroku_sdk.framework.config import SDK_VERSION, HerokuConfig, get_config
from heroku_sdk.framework.endpoint import Empty, HerokuEndpoint, PathParam
from heroku_sdk.framework.errors import (
    ApiError,
    BadRequestError,
    ConfigurationError,
    ConflictError,
    ForbiddenError,
    HerokuApiError,
    HerokuApiFailure,
    InvalidResponseError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from heroku_sdk.framework.http import HTTP, Method
from heroku_sdk.framework.logging import get_logger
from heroku_sdk.framework.response import match_raw_response, match_response

__version__ = SDK_VERSION
__all__ = [
    # client
    "HttpApiClient",
    # auth
    "Credentials", "CredentialsAuth", "UserAuthToken", "attach_auth",
    # config
    "HerokuConfig", "get_config",
    # endpoint contract
    "HerokuEndpoint", "Empty", "PathParam", "Method", "HTTP",
    # response
    "match_response", "match_raw_response",
    # errors
    "HerokuApiError", "HerokuApiFailure", "InvalidResponseError", "TransportError",
    "ApiError", "BadRequestError", "UnauthorizedError", "ForbiddenError",
    "NotFoundError", "ConflictError", "UnprocessableEntityError",
    "RateLimitError", "ServerError", "ConfigurationError",
    # logging
    "get_logger",
]

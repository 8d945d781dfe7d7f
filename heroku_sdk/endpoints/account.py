"""
heroku_sdk.endpoints.account
─────────────────────────────
The authenticated account, other user accounts (by email or id), account
features, the API rate limit, billing (credits, invoices, invoice address),
SSH keys, pending app transfers and the SMS number used for 2FA recovery.

https://devcenter.heroku.com/articles/platform-api-reference#account
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from heroku_sdk.endpoints.common import AppRef, TeamRef, UserRef
from heroku_sdk.framework.endpoint import HerokuEndpoint, Method, PathParam


class Account(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    email: str
    allow_tracking: bool | None = None
    beta: bool | None = None
    default_organization: TeamRef | None = None
    default_team: TeamRef | None = None
    delinquent_at: datetime | None = None
    federated: bool | None = None
    identity_provider: dict | None = None
    last_login: datetime | None = None
    name: str | None = None
    sms_number: str | None = None
    suspended_at: datetime | None = None
    two_factor_authentication: bool | None = None
    verified: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AccountFeature(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: str | None = None
    doc_url: str | None = None
    enabled: bool = False
    state: str | None = None
    display_name: str | None = None
    feedback_email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RateLimit(BaseModel):
    model_config = ConfigDict(extra="ignore")

    remaining: int


class Credit(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    amount: float | None = None
    balance: float | None = None
    expires_at: datetime | None = None
    title: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Invoice(BaseModel):
    """Amounts are in cents. ``state`` is 0 pending, 1 successful, -1 failed."""

    model_config = ConfigDict(extra="ignore")

    id: str
    number: int | None = None
    charges_total: float | None = None
    credits_total: float | None = None
    total: float | None = None
    period_start: str | None = None
    period_end: str | None = None
    state: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class InvoiceAddress(BaseModel):
    model_config = ConfigDict(extra="ignore")

    address_1: str | None = None
    address_2: str | None = None
    city: str | None = None
    country: str | None = None
    heroku_id: str | None = None
    other: str | None = None
    postal_code: str | None = None
    state: str | None = None
    use_invoice_address: bool | None = None


class Key(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    comment: str | None = None
    email: str | None = None
    fingerprint: str | None = None
    public_key: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AppTransfer(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    app: AppRef | None = None
    owner: UserRef | None = None
    recipient: UserRef | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SmsNumber(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sms_number: str | None = None


# ── Current account ───────────────────────────────────────────────────────────

class AccountDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account"
    response_type = Account


class AccountUpdate(HerokuEndpoint):
    method = Method.PATCH
    path_template = "account"
    response_type = Account

    allow_tracking: bool | None = None
    beta: bool | None = None
    name: str | None = None


class AccountDelete(HerokuEndpoint):
    """Delete the current account. Irreversible."""

    method = Method.DELETE
    path_template = "account"
    response_type = Account


# ── Other users ───────────────────────────────────────────────────────────────

class UserAccountDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "users/{account_id}"
    response_type = Account

    account_id: str = PathParam(description="account email or id")


class UserAccountUpdate(HerokuEndpoint):
    method = Method.PATCH
    path_template = "users/{account_id}"
    response_type = Account

    account_id: str = PathParam()
    allow_tracking: bool | None = None
    beta: bool | None = None
    name: str | None = None


class UserAccountDelete(HerokuEndpoint):
    method = Method.DELETE
    path_template = "users/{account_id}"
    response_type = Account

    account_id: str = PathParam()


# ── Features ──────────────────────────────────────────────────────────────────

class AccountFeatureList(HerokuEndpoint):
    method = Method.GET
    path_template = "account/features"
    response_type = list[AccountFeature]


class AccountFeatureDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account/features/{feature_id}"
    response_type = AccountFeature

    feature_id: str = PathParam(description="feature id or name")


class AccountFeatureUpdate(HerokuEndpoint):
    method = Method.PATCH
    path_template = "account/features/{feature_id}"
    response_type = AccountFeature

    feature_id: str = PathParam()
    enabled: bool


# ── Rate limit ────────────────────────────────────────────────────────────────

class RateLimitDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account/rate-limits"
    response_type = RateLimit


# ── Billing ───────────────────────────────────────────────────────────────────

class AccountCreditList(HerokuEndpoint):
    method = Method.GET
    path_template = "account/credits"
    response_type = list[Credit]


class AccountCreditDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account/credits/{credit_id}"
    response_type = Credit

    credit_id: str = PathParam()


class AccountInvoiceList(HerokuEndpoint):
    method = Method.GET
    path_template = "account/invoices"
    response_type = list[Invoice]


class AccountInvoiceDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account/invoices/{invoice_id}"
    response_type = Invoice

    invoice_id: str = PathParam(description="invoice number")


class AccountInvoiceAddressDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account/invoice-address"
    response_type = InvoiceAddress


# ── Keys and transfers ────────────────────────────────────────────────────────

class AccountKeyList(HerokuEndpoint):
    method = Method.GET
    path_template = "account/keys"
    response_type = list[Key]


class AccountKeyDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account/keys/{key_id}"
    response_type = Key

    key_id: str = PathParam(description="key id or fingerprint")


class AccountAppTransferList(HerokuEndpoint):
    method = Method.GET
    path_template = "account/app-transfers"
    response_type = list[AppTransfer]


class AccountAppTransferDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "account/app-transfers/{transfer_id}"
    response_type = AppTransfer

    transfer_id: str = PathParam(description="transfer id or name")


# ── SMS number ────────────────────────────────────────────────────────────────

class UserSmsNumberDetails(HerokuEndpoint):
    method = Method.GET
    path_template = "users/{account_id}/sms-number"
    response_type = SmsNumber

    account_id: str = PathParam()


__sdk_export__ = {
    "resource": "account",
    "models": [
        "Account", "AccountFeature", "RateLimit", "Credit", "Invoice",
        "InvoiceAddress", "Key", "AppTransfer", "SmsNumber",
    ],
    "endpoints": [
        "AccountDetails", "AccountUpdate", "AccountDelete",
        "UserAccountDetails", "UserAccountUpdate", "UserAccountDelete",
        "AccountFeatureList", "AccountFeatureDetails", "AccountFeatureUpdate",
        "RateLimitDetails",
        "AccountCreditList", "AccountCreditDetails",
        "AccountInvoiceList", "AccountInvoiceDetails", "AccountInvoiceAddressDetails",
        "AccountKeyList", "AccountKeyDetails",
        "AccountAppTransferList", "AccountAppTransferDetails",
        "UserSmsNumberDetails",
    ],
}

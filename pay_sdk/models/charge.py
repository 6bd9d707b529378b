from __future__ import annotations

"""
Parameters of a single charge (capture) request.

A ChargeRequest is filled in by application code through chained with_*
calls and then read by whatever executes the API call. Only the reference id
is validated here; every other field is passed through as given.
"""
import logging
import warnings
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, PrivateAttr

from pay_sdk.models.provider_credit import ProviderCredit
from pay_sdk.models.reference import AmazonReference
from pay_sdk.types import AmazonReferenceIdType, CurrencyCode

logger = logging.getLogger("pay_sdk.request")

DESCRIBE_ORDER = (
    "amazon_reference_id",
    "reference_type",
    "charge_reference_id",
    "amount",
    "currency_code",
    "transaction_timeout",
    "capture_now",
    "charge_order_id",
    "store_name",
    "custom_information",
    "platform_id",
    "seller_note",
    "soft_descriptor",
    "auth_token",
    "inherit_shipping_address",
    "provider_credit_details",
)


def parse_legacy_bool(value: Optional[str]) -> bool:
    """Only "true" in any letter case is True; anything else is False."""
    return value is not None and value.lower() == "true"


def _render(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, list):
        return "[" + ", ".join(_render(v) for v in value) + "]"
    return str(value)


class ChargeRequest(BaseModel):
    """Container for the parameters of the Charge operation.

    Example:
        request = (
            ChargeRequest()
            .with_amazon_reference_id("P01-1234567-1234567")
            .with_charge_reference_id("charge-0001")
            .with_amount("10.00")
            .with_currency_code(CurrencyCode.USD)
        )
    """

    model_config = {"extra": "forbid"}

    charge_reference_id: Optional[str] = None
    amount: Optional[str] = None
    currency_code: Optional[CurrencyCode] = None
    transaction_timeout: Optional[str] = None
    capture_now: Optional[bool] = None
    charge_order_id: Optional[str] = None
    store_name: Optional[str] = None
    custom_information: Optional[str] = None
    platform_id: Optional[str] = None
    seller_note: Optional[str] = None
    soft_descriptor: Optional[str] = None
    auth_token: Optional[str] = None
    inherit_shipping_address: Optional[bool] = None
    provider_credit_details: Optional[list[ProviderCredit]] = None

    _reference: Optional[AmazonReference] = PrivateAttr(default=None)

    def __init__(self, amazon_reference_id: Optional[str] = None, **data: Any):
        super().__init__(**data)
        if amazon_reference_id is not None:
            self.set_amazon_reference_id(amazon_reference_id)

    # ── Reference id ────────────────────────────────────────────────────────

    @property
    def reference(self) -> Optional[AmazonReference]:
        return self._reference

    @property
    def amazon_reference_id(self) -> Optional[str]:
        return self._reference.id if self._reference else None

    @property
    def reference_type(self) -> Optional[AmazonReferenceIdType]:
        return self._reference.type if self._reference else None

    def set_amazon_reference_id(self, amazon_reference_id: Optional[str]) -> None:
        """
        Set the order reference id or billing agreement id to charge against.

        The reference type is derived from the first character of the id.
        Validation runs before anything is assigned, so on error the previous
        id and type are left as they were.

        Raises:
            InvalidInputError: If the id is None, empty, or has an unknown prefix.
        """
        reference = AmazonReference.parse(amazon_reference_id)
        self._reference = reference
        logger.debug("Reference id set", extra={"reference_type": reference.type.value})

    def with_amazon_reference_id(self, amazon_reference_id: Optional[str]) -> ChargeRequest:
        self.set_amazon_reference_id(amazon_reference_id)
        return self

    # ── Plain fields ────────────────────────────────────────────────────────

    def with_amount(self, amount: Optional[str]) -> ChargeRequest:
        self.amount = amount
        return self

    def with_currency_code(self, currency_code: Optional[CurrencyCode]) -> ChargeRequest:
        """Three-letter ISO 4217 currency code."""
        self.currency_code = currency_code
        return self

    def with_charge_reference_id(self, charge_reference_id: Optional[str]) -> ChargeRequest:
        """Caller-assigned id, unique across all charge requests."""
        self.charge_reference_id = charge_reference_id
        return self

    def with_charge_note(self, charge_note: Optional[str]) -> ChargeRequest:
        """Seller note for the order reference or billing agreement."""
        self.seller_note = charge_note
        return self

    def with_transaction_timeout(self, transaction_timeout: Optional[str]) -> ChargeRequest:
        self.transaction_timeout = transaction_timeout
        return self

    def with_capture_now(self, capture_now: Optional[bool]) -> ChargeRequest:
        self.capture_now = capture_now
        return self

    def with_charge_order_id(self, charge_order_id: Optional[str]) -> ChargeRequest:
        self.charge_order_id = charge_order_id
        return self

    def with_store_name(self, store_name: Optional[str]) -> ChargeRequest:
        self.store_name = store_name
        return self

    def with_custom_information(self, custom_information: Optional[str]) -> ChargeRequest:
        self.custom_information = custom_information
        return self

    def with_platform_id(self, platform_id: Optional[str]) -> ChargeRequest:
        self.platform_id = platform_id
        return self

    def with_soft_descriptor(self, soft_descriptor: Optional[str]) -> ChargeRequest:
        self.soft_descriptor = soft_descriptor
        return self

    def with_provider_credit_details(
        self, provider_credit_details: Optional[list[ProviderCredit]]
    ) -> ChargeRequest:
        self.provider_credit_details = provider_credit_details
        return self

    def with_auth_token(self, auth_token: Optional[str]) -> ChargeRequest:
        self.auth_token = auth_token
        return self

    # ── Inherit shipping address ────────────────────────────────────────────

    def set_inherit_shipping_address(self, inherit_shipping_address: Optional[bool]) -> None:
        self.inherit_shipping_address = inherit_shipping_address

    def with_inherit_shipping_address(self, inherit_shipping_address: Optional[bool]) -> ChargeRequest:
        self.set_inherit_shipping_address(inherit_shipping_address)
        return self

    def set_inherit_shipping_address_from_string(self, inherit_shipping_address: Optional[str]) -> None:
        """
        Legacy string form of set_inherit_shipping_address.

        Deprecated: pass a bool instead. Kept for callers that still send the
        flag as text. "true" in any letter case means True; every other value,
        including malformed text, silently means False.
        """
        warnings.warn(
            "set_inherit_shipping_address_from_string is deprecated; "
            "use set_inherit_shipping_address with a bool",
            DeprecationWarning,
            stacklevel=2,
        )
        self.set_inherit_shipping_address(parse_legacy_bool(inherit_shipping_address))

    def with_inherit_shipping_address_from_string(
        self, inherit_shipping_address: Optional[str]
    ) -> ChargeRequest:
        """Deprecated chaining form of set_inherit_shipping_address_from_string."""
        warnings.warn(
            "with_inherit_shipping_address_from_string is deprecated; "
            "use with_inherit_shipping_address with a bool",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.with_inherit_shipping_address(parse_legacy_bool(inherit_shipping_address))

    # ── Diagnostics ─────────────────────────────────────────────────────────

    def snapshot(self) -> ChargeRequest:
        """Independent deep copy, for handing off to the request executor."""
        return self.model_copy(deep=True)

    def describe(self) -> str:
        """Render every field in a fixed order. For logs and debugging only."""
        pairs = ", ".join(f"{name}={_render(getattr(self, name))}" for name in DESCRIBE_ORDER)
        return f"ChargeRequest{{{pairs}}}"

    def __str__(self) -> str:
        return self.describe()

from __future__ import annotations

"""
Reference id classification.

The payment API accepts either an order reference id or a billing agreement
id wherever a charge needs a source of funds. The two are told apart by the
first character of the id, so this is the only place that knows the mapping.
"""
import logging
from typing import Optional

from pay_sdk.types import AmazonReferenceIdType

logger = logging.getLogger("pay_sdk.request")

REQUIRED_MESSAGE = (
    "Amazon Reference ID is a required field and should be a "
    "Order Reference ID / Billing Agreement ID"
)
INVALID_MESSAGE = "Invalid Amazon Reference ID"

PREFIX_TYPES: dict[str, AmazonReferenceIdType] = {
    "P": AmazonReferenceIdType.ORDER_REFERENCE_ID,
    "S": AmazonReferenceIdType.ORDER_REFERENCE_ID,
    "B": AmazonReferenceIdType.BILLING_AGREEMENT_ID,
    "C": AmazonReferenceIdType.BILLING_AGREEMENT_ID,
}


class InvalidInputError(Exception):
    """Raised when a request parameter cannot be accepted."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


def classify_reference_id(value: Optional[str]) -> AmazonReferenceIdType:
    """
    Derive the reference type from a reference id.

    Args:
        value: An order reference id or billing agreement id.

    Returns:
        ORDER_REFERENCE_ID for ids starting with P or S,
        BILLING_AGREEMENT_ID for ids starting with B or C.

    Raises:
        InvalidInputError: If the id is None, empty, or has an unknown prefix.

    Example:
        "P01-1234567-1234567" → ORDER_REFERENCE_ID
        "C01-1234567-1234567" → BILLING_AGREEMENT_ID
    """
    if not value:
        logger.warning("Rejected empty reference id")
        raise InvalidInputError(code="REFERENCE_ID_REQUIRED", message=REQUIRED_MESSAGE)

    # Case-sensitive: lowercase prefixes are not issued by the API.
    reference_type = PREFIX_TYPES.get(value[0])
    if reference_type is None:
        logger.warning("Rejected reference id", extra={"prefix": value[0]})
        raise InvalidInputError(
            code="INVALID_REFERENCE_ID",
            message=INVALID_MESSAGE,
            details={"prefix": value[0], "allowed_prefixes": sorted(PREFIX_TYPES)},
        )
    return reference_type

"""
Configuration fallbacks for charge requests.

Values the caller set are never overwritten; only unset fields are filled.
"""
import logging
from typing import Optional

from pay_sdk import config
from pay_sdk.models.charge import ChargeRequest
from pay_sdk.types import CurrencyCode

logger = logging.getLogger("pay_sdk.defaults")


def apply_config_defaults(
    request: ChargeRequest,
    currency_code: Optional[CurrencyCode] = None,
    platform_id: Optional[str] = None,
) -> ChargeRequest:
    """
    Fill currency_code and platform_id from configuration when unset.

    Args:
        request: The request to update in place.
        currency_code: Overrides PAY_CURRENCY_CODE as the fallback currency.
        platform_id: Overrides PAY_PLATFORM_ID as the fallback platform id.

    Returns:
        The same request, for chaining.

    Example:
        PAY_CURRENCY_CODE=EUR, request.currency_code=None → EUR
        PAY_CURRENCY_CODE=EUR, request.currency_code=USD → USD (kept)
    """
    filled = []

    if request.currency_code is None:
        fallback_currency = currency_code or config.get_default_currency()
        if fallback_currency is not None:
            request.with_currency_code(fallback_currency)
            filled.append("currency_code")

    if request.platform_id is None:
        fallback_platform = platform_id or config.get_platform_id()
        if fallback_platform is not None:
            request.with_platform_id(fallback_platform)
            filled.append("platform_id")

    if filled:
        logger.debug("Applied configuration defaults", extra={"fields": filled})
    return request

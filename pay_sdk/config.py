import logging
import os
from typing import Optional

from dotenv import load_dotenv

from pay_sdk.types import CurrencyCode

load_dotenv()

logger = logging.getLogger("pay_sdk.config")

APP_ENV: str = os.getenv("APP_ENV", "development")
PAY_CURRENCY_CODE: str = os.getenv("PAY_CURRENCY_CODE", "USD")
PAY_PLATFORM_ID: str = os.getenv("PAY_PLATFORM_ID", "")
PAY_LOG_LEVEL: str = os.getenv("PAY_LOG_LEVEL", "WARNING")


def is_production() -> bool:
    return APP_ENV == "production"


def get_default_currency() -> Optional[CurrencyCode]:
    code = PAY_CURRENCY_CODE.strip().upper()
    if not code:
        return None
    try:
        return CurrencyCode(code)
    except ValueError:
        logger.warning("Ignoring unsupported PAY_CURRENCY_CODE", extra={"currency_code": code})
        return None


def get_platform_id() -> Optional[str]:
    return PAY_PLATFORM_ID.strip() or None

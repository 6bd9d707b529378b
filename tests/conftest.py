"""Shared fixtures for all test modules."""
import os
import pytest

os.environ.setdefault("APP_ENV", "development")
os.environ.setdefault("PAY_CURRENCY_CODE", "USD")

from pay_sdk.models import ChargeRequest, ProviderCredit
from pay_sdk.types import CurrencyCode


@pytest.fixture
def charge_request() -> ChargeRequest:
    return ChargeRequest()


@pytest.fixture
def provider_credits() -> list[ProviderCredit]:
    return [
        ProviderCredit(provider_id="PROV-1", credit_amount="1.50", currency_code=CurrencyCode.USD),
        ProviderCredit(provider_id="PROV-2", credit_amount="0.25", currency_code=CurrencyCode.USD),
    ]

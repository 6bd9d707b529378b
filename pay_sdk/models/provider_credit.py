from pydantic import BaseModel

from pay_sdk.types import CurrencyCode


class ProviderCredit(BaseModel):
    """A split of the captured amount credited to a solution provider."""

    model_config = {"extra": "forbid", "frozen": True}

    provider_id: str
    credit_amount: str
    currency_code: CurrencyCode

    def __str__(self) -> str:
        return (
            f"ProviderCredit(provider_id={self.provider_id}, "
            f"credit_amount={self.credit_amount}, "
            f"currency_code={self.currency_code.name})"
        )

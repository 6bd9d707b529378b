from .provider_credit import ProviderCredit
from .reference import AmazonReference
from .charge import ChargeRequest

__all__ = ["ProviderCredit", "AmazonReference", "ChargeRequest"]

from .types import AmazonReferenceIdType, CurrencyCode
from .models import AmazonReference, ChargeRequest, ProviderCredit
from .validators import InvalidInputError, classify_reference_id
from .services import apply_config_defaults

__all__ = [
    "AmazonReferenceIdType", "CurrencyCode",
    "AmazonReference", "ChargeRequest", "ProviderCredit",
    "InvalidInputError", "classify_reference_id",
    "apply_config_defaults",
]

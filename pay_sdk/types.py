from enum import Enum


class AmazonReferenceIdType(str, Enum):
    ORDER_REFERENCE_ID = "ORDER_REFERENCE_ID"
    BILLING_AGREEMENT_ID = "BILLING_AGREEMENT_ID"


class CurrencyCode(str, Enum):
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    AUD = "AUD"
    ZAR = "ZAR"
    CHF = "CHF"
    NOK = "NOK"
    DKK = "DKK"
    SEK = "SEK"
    NZD = "NZD"
    HKD = "HKD"

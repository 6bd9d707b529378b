from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from pay_sdk.types import AmazonReferenceIdType
from pay_sdk.validators.reference_id import classify_reference_id


class AmazonReference(BaseModel):
    """An order reference or billing agreement id together with its derived type.

    Use parse() so the type always matches the id.
    """

    model_config = {"extra": "forbid", "frozen": True}

    id: str
    type: AmazonReferenceIdType

    @classmethod
    def parse(cls, value: Optional[str]) -> AmazonReference:
        """
        Classify and wrap a reference id.

        Raises:
            InvalidInputError: If the id is missing or has an unknown prefix.
        """
        reference_type = classify_reference_id(value)
        return cls(id=value, type=reference_type)

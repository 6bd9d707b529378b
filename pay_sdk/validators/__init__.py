from .reference_id import classify_reference_id, InvalidInputError

__all__ = ["classify_reference_id", "InvalidInputError"]

from usercss.validation.validator import (
    ValidationError,
    is_valid,
    validate,
    validate_or_raise,
)

__all__ = ["validate", "validate_or_raise", "is_valid", "ValidationError"]

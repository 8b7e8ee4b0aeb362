class FieldValidationError(ValueError):
    """A single field failed a constraint. Services convert it to InvalidArgumentException."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


def require_text(value: str | None, field: str, label: str, max_length: int) -> str:
    """Value must be present, non-blank and at most `max_length` characters."""
    if value is None or not value.strip():
        raise FieldValidationError(field, f"{label} is required")
    return check_length(value, field, label, max_length)


def check_length(value: str, field: str, label: str, max_length: int) -> str:
    if len(value) > max_length:
        raise FieldValidationError(field, f"{label} cannot exceed {max_length} characters")
    return value


def require_positive_digits(value: int | None, field: str, label: str, max_digits: int = 9) -> int:
    """Value must be a positive integer whose decimal form has at most `max_digits` digits."""
    if value is None:
        raise FieldValidationError(field, f"{label} is required")
    if value <= 0:
        raise FieldValidationError(field, f"{label} must be a positive number")
    check_digits(value, field, label, max_digits)
    return value


def check_digits(value: int, field: str, label: str, max_digits: int = 9) -> int:
    if len(str(abs(value))) > max_digits:
        raise FieldValidationError(field, f"{label} cannot exceed {max_digits} digits")
    return value

import pytest

from app.utils.validation import (
    FieldValidationError, require_text, check_length, require_positive_digits, check_digits,
)


def test_require_text():
    assert require_text("Hacha", "nombre", "Name", 50) == "Hacha"
    with pytest.raises(FieldValidationError) as exc:
        require_text("  ", "nombre", "Name", 50)
    assert exc.value.field == "nombre"
    assert "required" in str(exc.value)
    with pytest.raises(FieldValidationError, match="cannot exceed 50 characters"):
        require_text("x" * 51, "nombre", "Name", 50)


def test_check_length_allows_boundary():
    assert check_length("x" * 6, "patente", "Plate", 6) == "x" * 6
    with pytest.raises(FieldValidationError):
        check_length("x" * 7, "patente", "Plate", 6)


@pytest.mark.parametrize("value", [1, 10, 999999999])
def test_positive_digits_accepts(value):
    assert require_positive_digits(value, "cantidad", "Quantity") == value


@pytest.mark.parametrize("value, message", [
    (None, "required"),
    (0, "positive"),
    (-3, "positive"),
    (1000000000, "9 digits"),
])
def test_positive_digits_rejects(value, message):
    with pytest.raises(FieldValidationError, match=message):
        require_positive_digits(value, "cantidad", "Quantity")


def test_check_digits_ignores_sign():
    assert check_digits(-123456789, "cantidad", "Quantity") == -123456789

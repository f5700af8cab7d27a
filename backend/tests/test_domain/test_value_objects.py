"""
Unit tests for Email and Phone value objects
"""
import dataclasses

import pytest

from order_management.core.exceptions import DomainValidationError, ValidationError, ValidationErrorKind
from order_management.domain.value_objects import Email, Phone


class TestEmail:

    def test_create_normalizes(self):
        email = Email.create("  Maria.Silva@Example.COM ")

        assert email.value == "maria.silva@example.com"
        assert str(email) == "maria.silva@example.com"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_value_is_required_error(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Email.create(raw)

        assert exc_info.value.kind == ValidationErrorKind.REQUIRED

    @pytest.mark.parametrize("raw", ["not-an-email", "a@", "@example.com", "a b@example.com"])
    def test_malformed_value_is_format_error(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Email.create(raw)

        assert exc_info.value.kind == ValidationErrorKind.INVALID_FORMAT
        assert exc_info.value.field == "email"

    def test_equality_by_value(self):
        assert Email.create("a@example.com") == Email.create("A@example.com")

    def test_is_immutable(self):
        email = Email.create("a@example.com")

        with pytest.raises(dataclasses.FrozenInstanceError):
            email.value = "b@example.com"

    def test_validation_error_is_a_domain_error(self):
        with pytest.raises(DomainValidationError):
            Email.create("")


class TestPhone:

    def test_create_accepts_thirteen_digits(self):
        assert Phone.create("5511999999999").value == "5511999999999"

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_missing_value_is_required_error(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Phone.create(raw)

        assert exc_info.value.kind == ValidationErrorKind.REQUIRED

    @pytest.mark.parametrize("raw", [
        "551199999999",         # 12 digits
        "55119999999999",       # 14 digits
        "+551199999999",
        "55 11999999999",
        "5511999999999\n",
        "５５１１９９９９９９９９９",  # full-width digits
    ])
    def test_malformed_value_is_format_error(self, raw):
        with pytest.raises(ValidationError) as exc_info:
            Phone.create(raw)

        assert exc_info.value.kind == ValidationErrorKind.INVALID_FORMAT

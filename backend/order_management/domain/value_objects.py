"""
Contact Value Objects

Email and Phone are immutable and compared by value. The only way to build
one is the validating `create` factory; a "change" is a new instance.

Author: TM3
Date: 2025-10-17
"""
import re
from dataclasses import dataclass
from typing import Optional

from email_validator import EmailNotValidError, validate_email

from order_management.core.exceptions import ValidationError, ValidationErrorKind

PHONE_PATTERN = re.compile(r"\d{13}")


@dataclass(frozen=True)
class Email:
    """Normalized (trimmed, lower-cased) e-mail address"""

    value: str

    @classmethod
    def create(cls, raw: Optional[str]) -> "Email":
        """
        Validate and normalize a raw address

        Raises:
            ValidationError: kind REQUIRED for empty input, INVALID_FORMAT
                when the address does not parse
        """
        if raw is None or not raw.strip():
            raise ValidationError("Email is required.", ValidationErrorKind.REQUIRED, field="email")

        try:
            parsed = validate_email(raw.strip(), check_deliverability=False)
        except EmailNotValidError:
            raise ValidationError(
                "Email format is invalid.", ValidationErrorKind.INVALID_FORMAT, field="email"
            )

        return cls(parsed.normalized.lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Phone:
    """Phone number stored as exactly 13 decimal digits"""

    value: str

    @classmethod
    def create(cls, raw: Optional[str]) -> "Phone":
        if raw is None or not raw.strip():
            raise ValidationError("Phone is required.", ValidationErrorKind.REQUIRED, field="phone")

        # \d also matches non-ASCII digits
        if not raw.isascii() or not PHONE_PATTERN.fullmatch(raw):
            raise ValidationError(
                "Phone format is invalid.", ValidationErrorKind.INVALID_FORMAT, field="phone"
            )

        return cls(raw)

    def __str__(self) -> str:
        return self.value

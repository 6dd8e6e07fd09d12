"""Field-level form validation.

Checks run in a fixed order and a later failing check replaces the message
of an earlier one, so a short malformed email reports its length.
"""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import urlsplit

from pagewidgets.models import FieldResult, FieldSpec, Severity
from pagewidgets.notify import Notifier

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_RE.match(value))


def is_valid_url(value: str) -> bool:
    """Absolute URL check: a scheme plus something after it."""
    if any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        return False
    return bool(parts.netloc or parts.path)


def validate_field(spec: FieldSpec) -> FieldResult:
    """Run every check that applies to one field."""
    value = spec.value.strip()
    result = FieldResult(name=spec.name)

    def fail(message: str) -> None:
        result.valid = False
        result.message = message

    if spec.required and not value:
        fail("This field is required")

    if spec.kind == "email" and value and not is_valid_email(value):
        fail("Please enter a valid email address")

    if spec.min_length is not None and value and len(value) < spec.min_length:
        fail(f"Must be at least {spec.min_length} characters")

    if spec.kind == "url" and value and not is_valid_url(value):
        fail("Please enter a valid URL")

    return result


def validate_form(fields: Iterable[FieldSpec], notify: Notifier) -> list[FieldResult]:
    """Validate every field, then report the submit outcome once."""
    results = [validate_field(spec) for spec in fields]
    if all(r.valid for r in results):
        notify("Form submitted successfully!", Severity.SUCCESS)
    else:
        notify("Please fix the errors before submitting", Severity.ERROR)
    return results

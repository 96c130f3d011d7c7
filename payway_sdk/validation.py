"""Input validation helpers.

Validators collect every problem into a :class:`ValidationResult` instead of
stopping at the first one, so callers can show precise errors per field.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .config import MerchantConfig
from .decimal_utils import to_decimal, to_json_number
from .errors import ConfigurationError, ValidationError
from .types.currency import Currency
from .types.sdk_requests import PaymentLinkRequest, PaymentRequest

MISSING = "missing"
INVALID = "invalid"
NOT_POSITIVE = "not_positive"
NOT_FINITE = "not_finite"
UNSUPPORTED_CURRENCY = "unsupported_currency"
OUT_OF_RANGE = "out_of_range"

PLAIN_AMOUNT = re.compile(r"[0-9]+(\.[0-9]+)?")

AnyRequest = Union[PaymentRequest, PaymentLinkRequest]


@dataclass(slots=True, frozen=True)
class FieldError:
    field: str
    reason: str


@dataclass(slots=True)
class ValidationResult:
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def fields(self) -> List[str]:
        return [error.field for error in self.errors]

    @property
    def missing(self) -> List[str]:
        return [error.field for error in self.errors if error.reason == MISSING]

    @property
    def invalid(self) -> List[str]:
        return [error.field for error in self.errors if error.reason != MISSING]

    def add(self, field_name: str, reason: str) -> None:
        self.errors.append(FieldError(field_name, reason))

    def extend(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationError` listing every offending field."""

        if self.ok:
            return
        raise ValidationError(
            f"Invalid payment request: {', '.join(f'{e.field} ({e.reason})' for e in self.errors)}",
            "VALIDATION_ERROR",
            {"errors": [{"field": e.field, "reason": e.reason} for e in self.errors]},
            fields=self.fields,
        )


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_text(value: Any, *, required: bool = True) -> Optional[str]:
    """Return the failure reason for a string field, or ``None`` when valid."""

    if value is None:
        return MISSING if required else INVALID
    if not isinstance(value, str):
        return INVALID
    if required and not value.strip():
        return MISSING
    return None


def check_amount(amount: Any) -> Optional[str]:
    """Return the failure reason for ``amount``, or ``None`` when it is valid."""

    if _is_blank(amount):
        return MISSING
    try:
        value = to_decimal(amount)
    except ValueError:
        return INVALID
    if not value.is_finite():
        return NOT_FINITE
    if value <= 0:
        return NOT_POSITIVE
    return None


def check_checkout_amount(amount: Any) -> Optional[str]:
    """Like :func:`check_amount`, but only plain decimal strings are accepted.

    The purchase amount is signed and posted exactly as given, so forms such
    as ``" 10"`` or ``"1E+1"`` are refused rather than rewritten.
    """

    if amount is not None and not isinstance(amount, str):
        return INVALID
    reason = check_amount(amount)
    if reason is not None:
        return reason
    if not PLAIN_AMOUNT.fullmatch(amount):
        return INVALID
    return None


def check_link_amount(amount: Any) -> Optional[str]:
    """Like :func:`check_amount`, but the value must fit a JSON number exactly."""

    reason = check_amount(amount)
    if reason is not None:
        return reason
    try:
        to_json_number(amount)
    except ValueError:
        return OUT_OF_RANGE
    return None


def validate_config(config: MerchantConfig, *, require_rsa_key: bool = False) -> ValidationResult:
    result = ValidationResult()
    for name in ("merchant_id", "api_key"):
        reason = check_text(getattr(config, name))
        if reason is not None:
            result.add(name, reason)

    if config.rsa_public_key is not None and not isinstance(config.rsa_public_key, (str, bytes)):
        result.add("rsa_public_key", INVALID)
    elif require_rsa_key and _is_blank(config.rsa_public_key):
        result.add("rsa_public_key", MISSING)
    return result


def ensure_config(config: MerchantConfig, *, require_rsa_key: bool = False) -> None:
    """Raise :class:`ConfigurationError` when credentials are absent or malformed."""

    result = validate_config(config, require_rsa_key=require_rsa_key)
    if result.ok:
        return
    if result.invalid:
        raise ConfigurationError.invalid_fields_error(
            [(error.field, error.reason) for error in result.errors]
        )
    if result.fields == ["rsa_public_key"]:
        raise ConfigurationError.missing_rsa_public_key_error()
    raise ConfigurationError.missing_fields_error(result.fields)


def validate_payment_request(request: PaymentRequest) -> ValidationResult:
    result = ValidationResult()
    reason = check_text(request.transaction_id)
    if reason is not None:
        result.add("transaction_id", reason)

    reason = check_checkout_amount(request.amount)
    if reason is not None:
        result.add("amount", reason)

    for name in ("return_params", "payment_option"):
        reason = check_text(getattr(request, name), required=False)
        if reason is not None:
            result.add(name, reason)

    customer = request.customer
    if customer is None:
        result.add("customer", MISSING)
        return result

    for name in ("first_name", "last_name", "email", "phone"):
        reason = check_text(getattr(customer, name))
        if reason is not None:
            result.add(f"customer.{name}", reason)
    return result


def validate_payment_link_request(request: PaymentLinkRequest) -> ValidationResult:
    result = ValidationResult()
    reason = check_text(request.title)
    if reason is not None:
        result.add("title", reason)

    reason = check_link_amount(request.amount)
    if reason is not None:
        result.add("amount", reason)

    if _is_blank(request.currency):
        result.add("currency", MISSING)
    else:
        try:
            Currency(request.currency)
        except ValueError:
            result.add("currency", UNSUPPORTED_CURRENCY)

    reason = check_text(request.return_url)
    if reason is not None:
        result.add("return_url", reason)

    expiry = request.expiry
    if expiry is not None and (not isinstance(expiry, int) or isinstance(expiry, bool) or expiry <= 0):
        result.add("expiry", INVALID)
    return result


def validate_request(request: AnyRequest) -> ValidationResult:
    if isinstance(request, PaymentLinkRequest):
        return validate_payment_link_request(request)
    if isinstance(request, PaymentRequest):
        return validate_payment_request(request)
    raise TypeError(f"Unsupported request type: {type(request).__name__}")


def validate(config: MerchantConfig, request: AnyRequest) -> ValidationResult:
    """Check ``config`` and ``request`` together and report every problem.

    Payment link requests additionally require ``rsa_public_key``.
    """

    result = validate_config(config, require_rsa_key=isinstance(request, PaymentLinkRequest))
    result.extend(validate_request(request))
    return result

"""Custom exceptions for the PayWay Python SDK."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple


@dataclass(eq=False)
class PayWaySDKError(Exception):
    """Base exception raised by the PayWay SDK."""

    message: str
    code: str
    details: Optional[Mapping[str, Any]] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass(eq=False)
class ConfigurationError(PayWaySDKError):
    """Missing or invalid merchant credentials, options or key material."""

    @classmethod
    def missing_fields_error(cls, fields: Iterable[str]) -> "ConfigurationError":
        names = list(fields)
        return cls(
            f"Missing required PayWay configuration: {', '.join(names)}",
            "MISSING_CONFIGURATION",
            {"fields": names},
        )

    @classmethod
    def invalid_fields_error(cls, errors: Iterable[Tuple[str, str]]) -> "ConfigurationError":
        pairs = list(errors)
        return cls(
            f"Invalid PayWay configuration: {', '.join(f'{name} ({reason})' for name, reason in pairs)}",
            "INVALID_CONFIGURATION",
            {
                "fields": [name for name, _ in pairs],
                "errors": [{"field": name, "reason": reason} for name, reason in pairs],
            },
        )

    @classmethod
    def missing_rsa_public_key_error(cls) -> "ConfigurationError":
        return cls(
            "An RSA public key is required to create payment links.",
            "MISSING_RSA_PUBLIC_KEY",
            {"fields": ["rsa_public_key"]},
        )

    @classmethod
    def unknown_options_error(cls, keys: Iterable[str]) -> "ConfigurationError":
        names = sorted(keys)
        return cls(
            f"Unknown PayWay configuration options: {', '.join(names)}",
            "UNKNOWN_OPTIONS",
            {"keys": names},
        )


@dataclass(eq=False)
class ValidationError(PayWaySDKError):
    """A request is missing fields or carries malformed values.

    ``fields`` lists every offending field name, in the order they were
    checked, so callers can point users at each one.
    """

    fields: List[str] = field(default_factory=list)


@dataclass(eq=False)
class CryptoError(PayWaySDKError):
    """RSA encryption of the merchant-auth envelope failed."""

    @classmethod
    def plaintext_too_large_error(cls, size: int, limit: int, key_size: int) -> "CryptoError":
        return cls(
            f"Merchant auth payload is {size} bytes but a {key_size}-bit key "
            f"can encrypt at most {limit} bytes with PKCS#1 v1.5 padding",
            "PLAINTEXT_TOO_LARGE",
            {"size": size, "limit": limit, "key_size": key_size},
        )


@dataclass(eq=False)
class EncodingError(PayWaySDKError):
    """Key material could not be decoded."""

    @classmethod
    def invalid_public_key_error(cls, reason: str) -> "EncodingError":
        return cls(
            f"Invalid RSA public key: {reason}",
            "INVALID_PUBLIC_KEY",
            {"reason": reason},
        )

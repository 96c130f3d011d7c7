"""Merchant configuration for the PayWay SDK."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional

from .errors import ConfigurationError


class CheckoutProfile(str, Enum):
    """Field-ordering contracts of the purchase endpoint."""

    CHECKOUT_V1 = "checkout-v1"
    CHECKOUT_V2 = "checkout-v2"


ENV_KEYS = {
    "merchant_id": "ABA_MERCHANT_ID",
    "api_key": "ABA_API_KEY",
    "rsa_public_key": "ABA_RSA_PUBLIC_KEY",
    "base_url": "ABA_BASE_URL",
    "sandbox": "ABA_SANDBOX",
    "sandbox_checkout_url": "ABA_SANDBOX_CHECKOUT_URL",
    "production_checkout_url": "ABA_PRODUCTION_CHECKOUT_URL",
    "sandbox_payment_link_url": "ABA_SANDBOX_PAYMENT_LINK_URL",
    "production_payment_link_url": "ABA_PRODUCTION_PAYMENT_LINK_URL",
    "checkout_profile": "ABA_CHECKOUT_PROFILE",
}

_FALSE_VALUES = {"0", "false", "no", "off"}
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class MerchantConfig:
    """Credentials and endpoint options for one merchant integration.

    Instances are immutable and safe to share between threads. Missing
    credentials are not rejected here; the builders validate the config
    before signing so that every problem can be reported at once.
    """

    merchant_id: str = ""
    api_key: str = ""
    rsa_public_key: Optional[str] = None
    base_url: Optional[str] = None
    sandbox: bool = True
    sandbox_checkout_url: Optional[str] = None
    production_checkout_url: Optional[str] = None
    sandbox_payment_link_url: Optional[str] = None
    production_payment_link_url: Optional[str] = None
    checkout_profile: CheckoutProfile = CheckoutProfile.CHECKOUT_V1

    def __post_init__(self) -> None:
        try:
            profile = CheckoutProfile(self.checkout_profile)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown checkout profile: {self.checkout_profile}",
                "INVALID_CHECKOUT_PROFILE",
                {
                    "value": self.checkout_profile,
                    "allowed": [item.value for item in CheckoutProfile],
                },
            ) from exc
        object.__setattr__(self, "checkout_profile", profile)

    def __repr__(self) -> str:
        masked = "***" if self.api_key else ""
        return (
            f"MerchantConfig(merchant_id={self.merchant_id!r}, api_key={masked!r}, "
            f"sandbox={self.sandbox!r}, base_url={self.base_url!r}, "
            f"checkout_profile={self.checkout_profile.value!r})"
        )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "MerchantConfig":
        """Build a config from a plain options mapping.

        Only the dataclass field names are accepted; anything else raises
        :class:`ConfigurationError` instead of being silently ignored.
        """

        known = {item.name for item in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise ConfigurationError.unknown_options_error(unknown)

        values = dict(options)
        if "sandbox" in values:
            values["sandbox"] = _parse_bool("sandbox", values["sandbox"])
        return cls(**values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MerchantConfig":
        """Build a config from ``ABA_*`` environment variables."""

        env = os.environ if environ is None else environ
        values = {}
        for name, key in ENV_KEYS.items():
            raw = env.get(key)
            if raw is None or raw == "":
                continue
            values[name] = raw
        return cls.from_mapping(values)


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value

    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False

    raise ConfigurationError(
        f"Invalid {name}: expected a boolean",
        "INVALID_CONFIGURATION",
        {"field": name, "value": value},
    )

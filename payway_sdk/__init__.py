"""Python client for signing ABA PayWay checkout and payment link requests."""
from .checkout import Checkout, build_checkout_payload
from .config import CheckoutProfile, MerchantConfig
from .errors import (
    ConfigurationError,
    CryptoError,
    EncodingError,
    PayWaySDKError,
    ValidationError,
)
from .payment_links import PaymentLinks, build_payment_link
from .payway import PayWay
from .signers import sign
from .types import (
    Currency,
    Customer,
    PaymentLinkRequest,
    PaymentRequest,
    SignedPayload,
)
from .urls import resolve_checkout_url, resolve_payment_link_url
from .validation import ValidationResult, validate

__all__ = [
    "Checkout",
    "CheckoutProfile",
    "ConfigurationError",
    "CryptoError",
    "Currency",
    "Customer",
    "EncodingError",
    "MerchantConfig",
    "PayWay",
    "PayWaySDKError",
    "PaymentLinkRequest",
    "PaymentLinks",
    "PaymentRequest",
    "SignedPayload",
    "ValidationError",
    "ValidationResult",
    "build_checkout_payload",
    "build_payment_link",
    "resolve_checkout_url",
    "resolve_payment_link_url",
    "sign",
    "validate",
]

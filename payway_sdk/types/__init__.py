"""Typed structures for PayWay requests and signed payloads."""
from .currency import Currency
from .payloads import SignedPayload
from .sdk_requests import (
    DEFAULT_PAYMENT_LINK_EXPIRY,
    Customer,
    PaymentLinkRequest,
    PaymentRequest,
)

__all__ = [
    "Currency",
    "Customer",
    "DEFAULT_PAYMENT_LINK_EXPIRY",
    "PaymentLinkRequest",
    "PaymentRequest",
    "SignedPayload",
]

"""Dataclasses describing the requests the SDK signs."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from .currency import Currency

DEFAULT_PAYMENT_LINK_EXPIRY = 120


@dataclass(slots=True, frozen=True)
class Customer:
    first_name: str
    last_name: str
    email: str
    phone: str


@dataclass(slots=True, frozen=True)
class PaymentRequest:
    """A single checkout attempt for the purchase endpoint.

    ``amount`` is sent to the gateway exactly as given, so pass the string
    the customer should see (for example ``"10.50"``). ``payment_option`` is
    only signed and sent by the ``checkout-v2`` profile.
    """

    transaction_id: str
    amount: str
    customer: Customer
    return_params: str = ""
    payment_option: str = ""


@dataclass(slots=True, frozen=True)
class PaymentLinkRequest:
    """Terms of a payment link, encrypted into the merchant-auth envelope.

    ``expiry`` is the number of seconds from now until the link expires.
    ``None`` sends ``null`` and leaves the expiry to the gateway.
    """

    title: str
    amount: Union[int, Decimal, float, str]
    return_url: str
    currency: Currency | str = Currency.USD
    expiry: Optional[int] = DEFAULT_PAYMENT_LINK_EXPIRY

"""Public entry point for the PayWay Python SDK."""
from __future__ import annotations

from typing import Optional

from .checkout import Checkout
from .config import MerchantConfig
from .payment_links import PaymentLinks
from .timestamps import Clock
from .types.payloads import SignedPayload
from .types.sdk_requests import PaymentLinkRequest, PaymentRequest


class PayWay:
    """Main entry point for signing ABA PayWay requests.

    The instance only holds the immutable merchant config, so one object can
    serve concurrent requests.
    """

    def __init__(self, config: Optional[MerchantConfig] = None, clock: Optional[Clock] = None) -> None:
        self.config = config or MerchantConfig.from_env()

        self.checkout = Checkout(self.config, clock)
        self.payment_links = PaymentLinks(self.config, clock)

    def create_checkout(self, request: PaymentRequest, sandbox: Optional[bool] = None) -> SignedPayload:
        return self.checkout.create(request, sandbox)

    def create_payment_link(
        self, request: PaymentLinkRequest, sandbox: Optional[bool] = None
    ) -> SignedPayload:
        return self.payment_links.create(request, sandbox)

    @property
    def checkout_url(self) -> str:
        return self.checkout.url()

    @property
    def payment_link_url(self) -> str:
        return self.payment_links.url()

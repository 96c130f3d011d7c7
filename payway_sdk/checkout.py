"""Purchase (checkout form) payloads."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .config import CheckoutProfile, MerchantConfig
from .signers import sign
from .timestamps import Clock, request_time
from .types.payloads import SignedPayload
from .types.sdk_requests import PaymentRequest
from .urls import resolve_checkout_url
from .validation import ensure_config, validate_payment_request

logger = logging.getLogger(__name__)


def signature_values(
    profile: CheckoutProfile,
    req_time: str,
    merchant_id: str,
    request: PaymentRequest,
) -> List[str]:
    """Return the values PayWay hashes for ``profile``, in gateway order."""

    customer = request.customer
    values = [
        req_time,
        merchant_id,
        request.transaction_id,
        request.amount,
        customer.first_name,
        customer.last_name,
        customer.email,
        customer.phone,
    ]
    if profile is CheckoutProfile.CHECKOUT_V2:
        values.append(request.payment_option)
    values.append(request.return_params)
    return values


def form_fields(
    profile: CheckoutProfile,
    signature: str,
    req_time: str,
    merchant_id: str,
    request: PaymentRequest,
) -> Dict[str, str]:
    customer = request.customer
    fields = {
        "hash": signature,
        "tran_id": request.transaction_id,
        "amount": request.amount,
        "firstname": customer.first_name,
        "lastname": customer.last_name,
        "phone": customer.phone,
        "email": customer.email,
        "return_params": request.return_params,
        "merchant_id": merchant_id,
        "req_time": req_time,
    }
    if profile is CheckoutProfile.CHECKOUT_V2:
        fields["payment_option"] = request.payment_option
    return fields


def build_checkout_payload(
    config: MerchantConfig,
    request: PaymentRequest,
    *,
    sandbox: Optional[bool] = None,
    clock: Optional[Clock] = None,
) -> SignedPayload:
    """Sign ``request`` for the purchase endpoint.

    Credentials are checked before anything is hashed; request problems are
    reported together in a single :class:`ValidationError`.
    """

    ensure_config(config)
    validate_payment_request(request).raise_for_errors()

    profile = config.checkout_profile
    req_time = request_time(clock)
    signature = sign(
        config.api_key,
        signature_values(profile, req_time, config.merchant_id, request),
    )
    target_url = resolve_checkout_url(config, sandbox)

    logger.debug(
        "Built %s checkout payload for merchant %s, transaction %s -> %s",
        profile.value,
        config.merchant_id,
        request.transaction_id,
        target_url,
    )
    return SignedPayload(
        fields=form_fields(profile, signature, req_time, config.merchant_id, request),
        signature=signature,
        target_url=target_url,
    )


@dataclass(slots=True)
class Checkout:
    """Service creating purchase payloads for one merchant."""

    config: MerchantConfig
    clock: Optional[Clock] = None

    def create(self, request: PaymentRequest, sandbox: Optional[bool] = None) -> SignedPayload:
        return build_checkout_payload(self.config, request, sandbox=sandbox, clock=self.clock)

    def url(self, sandbox: Optional[bool] = None) -> str:
        return resolve_checkout_url(self.config, sandbox)

"""Payment link payloads with an RSA encrypted merchant-auth envelope."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import MerchantConfig
from .crypto import encrypt_pkcs1v15, load_public_key
from .decimal_utils import to_json_number
from .signers import sign
from .timestamps import Clock, expiry_timestamp, request_time
from .types.currency import Currency
from .types.payloads import SignedPayload
from .types.sdk_requests import PaymentLinkRequest
from .urls import resolve_payment_link_url
from .validation import ensure_config, validate_payment_link_request

logger = logging.getLogger(__name__)


def merchant_auth_object(
    merchant_id: str,
    request: PaymentLinkRequest,
    clock: Optional[Clock] = None,
) -> Dict[str, Any]:
    """Return the envelope contents in the key order the gateway decrypts."""

    return {
        "mc_id": merchant_id,
        "title": request.title,
        "amount": to_json_number(request.amount),
        "currency": Currency(request.currency).value,
        "expired_date": expiry_timestamp(request.expiry, clock),
        "return_url": request.return_url,
    }


def serialize_merchant_auth(obj: Dict[str, Any]) -> bytes:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def build_payment_link(
    config: MerchantConfig,
    request: PaymentLinkRequest,
    *,
    sandbox: Optional[bool] = None,
    clock: Optional[Clock] = None,
) -> SignedPayload:
    """Encrypt the link terms and sign the outer envelope.

    Raises :class:`ConfigurationError` without an RSA public key,
    :class:`EncodingError` when the key cannot be parsed and
    :class:`CryptoError` when the terms do not fit the key.
    """

    ensure_config(config, require_rsa_key=True)
    validate_payment_link_request(request).raise_for_errors()

    public_key = load_public_key(config.rsa_public_key)  # type: ignore[arg-type]

    plaintext = serialize_merchant_auth(merchant_auth_object(config.merchant_id, request, clock))
    merchant_auth = encrypt_pkcs1v15(public_key, plaintext)

    req_time = request_time(clock)
    signature = sign(config.api_key, [req_time, config.merchant_id, merchant_auth])
    target_url = resolve_payment_link_url(config, sandbox)

    logger.debug(
        "Built payment link payload for merchant %s (%d byte envelope) -> %s",
        config.merchant_id,
        len(plaintext),
        target_url,
    )
    return SignedPayload(
        fields={
            "request_time": req_time,
            "merchant_id": config.merchant_id,
            "merchant_auth": merchant_auth,
            "hash": signature,
        },
        signature=signature,
        target_url=target_url,
    )


@dataclass(slots=True)
class PaymentLinks:
    """Service creating payment link payloads for one merchant."""

    config: MerchantConfig
    clock: Optional[Clock] = None

    def create(self, request: PaymentLinkRequest, sandbox: Optional[bool] = None) -> SignedPayload:
        return build_payment_link(self.config, request, sandbox=sandbox, clock=self.clock)

    def url(self, sandbox: Optional[bool] = None) -> str:
        return resolve_payment_link_url(self.config, sandbox)

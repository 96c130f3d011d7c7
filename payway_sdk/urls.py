"""Endpoint URL resolution.

Each endpoint is resolved by walking :data:`RESOLUTION_RULES` in order and
returning the first URL a rule produces:

1. the explicit sandbox or production override from the config,
2. a configured base URL that already contains the endpoint's API path,
3. a configured base URL (or bare host) with the standard path appended,
4. the hardcoded sandbox or production default.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
from urllib.parse import urlsplit

from .config import MerchantConfig

logger = logging.getLogger(__name__)

SANDBOX_HOST = "https://checkout-sandbox.payway.com.kh"
PRODUCTION_HOST = "https://checkout.payway.com.kh"


@dataclass(slots=True, frozen=True)
class Endpoint:
    name: str
    api_segment: str
    standard_path: str
    sandbox_override: str
    production_override: str

    @property
    def sandbox_default(self) -> str:
        return f"{SANDBOX_HOST}{self.standard_path}"

    @property
    def production_default(self) -> str:
        return f"{PRODUCTION_HOST}{self.standard_path}"


PURCHASE = Endpoint(
    name="purchase",
    api_segment="/api/payment-gateway/",
    standard_path="/api/payment-gateway/v1/payments/purchase",
    sandbox_override="sandbox_checkout_url",
    production_override="production_checkout_url",
)

PAYMENT_LINK = Endpoint(
    name="payment-link",
    api_segment="/api/merchant-portal/",
    standard_path="/api/merchant-portal/merchant-access/payment-link/create",
    sandbox_override="sandbox_payment_link_url",
    production_override="production_payment_link_url",
)

KNOWN_ENDPOINTS = (PURCHASE, PAYMENT_LINK)

Rule = Callable[[MerchantConfig, Endpoint, bool], Optional[str]]


def normalize_url(url: str) -> str:
    """Trim whitespace, strip one trailing slash and give bare hosts ``https``.

    A URL that already names ``http`` or ``https`` keeps its scheme; nothing
    is ever rewritten from ``https`` to ``http``.
    """

    url = url.strip()
    if url.endswith("/"):
        url = url[:-1]

    lowered = url.lower()
    if lowered.startswith("https://") or lowered.startswith("http://"):
        return url
    if url.startswith("//"):
        return f"https:{url}"
    return f"https://{url}"


def _override_rule(config: MerchantConfig, endpoint: Endpoint, sandbox: bool) -> Optional[str]:
    attribute = endpoint.sandbox_override if sandbox else endpoint.production_override
    value = getattr(config, attribute)
    if value and value.strip():
        return normalize_url(value)
    return None


def _has_segment(url: str, endpoint: Endpoint) -> bool:
    # ``url`` is normalized, so a path ending in the segment has lost its slash.
    return endpoint.api_segment in f"{url}/"


def _base_url_with_path_rule(config: MerchantConfig, endpoint: Endpoint, sandbox: bool) -> Optional[str]:
    if not config.base_url or not config.base_url.strip():
        return None
    url = normalize_url(config.base_url)
    if _has_segment(url, endpoint):
        return url
    return None


def _base_url_host_rule(config: MerchantConfig, endpoint: Endpoint, sandbox: bool) -> Optional[str]:
    if not config.base_url or not config.base_url.strip():
        return None
    url = normalize_url(config.base_url)
    if any(_has_segment(url, known) for known in KNOWN_ENDPOINTS):
        # A base URL pointing at another endpoint only contributes its host.
        parts = urlsplit(url)
        url = f"{parts.scheme}://{parts.netloc}"
    return f"{url}{endpoint.standard_path}"


def _default_rule(config: MerchantConfig, endpoint: Endpoint, sandbox: bool) -> Optional[str]:
    return endpoint.sandbox_default if sandbox else endpoint.production_default


RESOLUTION_RULES: Tuple[Tuple[str, Rule], ...] = (
    ("override", _override_rule),
    ("base_url_with_path", _base_url_with_path_rule),
    ("base_url_host", _base_url_host_rule),
    ("default", _default_rule),
)


def resolve_url(config: MerchantConfig, endpoint: Endpoint, sandbox: Optional[bool] = None) -> str:
    use_sandbox = config.sandbox if sandbox is None else sandbox
    for rule_name, rule in RESOLUTION_RULES:
        url = rule(config, endpoint, use_sandbox)
        if url:
            logger.debug(
                "Resolved %s URL via %s rule (sandbox=%s): %s",
                endpoint.name,
                rule_name,
                use_sandbox,
                url,
            )
            return url

    raise AssertionError("the default rule always resolves")  # pragma: no cover


def resolve_checkout_url(config: MerchantConfig, sandbox: Optional[bool] = None) -> str:
    return resolve_url(config, PURCHASE, sandbox)


def resolve_payment_link_url(config: MerchantConfig, sandbox: Optional[bool] = None) -> str:
    return resolve_url(config, PAYMENT_LINK, sandbox)

import base64

import pytest

from payway_sdk import ConfigurationError, MerchantConfig, PayWay, PaymentLinkRequest


def test_create_checkout_scenario(config, payment_request, clock):
    client = PayWay(config, clock=clock)

    payload = client.create_checkout(payment_request)

    assert payload.signature
    assert len(base64.b64decode(payload.signature)) == 64
    assert len(payload.fields) == 10
    assert payload.fields["merchant_id"] == "ec461403"
    assert payload.target_url == client.checkout_url


def test_urls_follow_sandbox_flag():
    sandbox = PayWay(MerchantConfig(merchant_id="m", api_key="k"))
    production = PayWay(MerchantConfig(merchant_id="m", api_key="k", sandbox=False))

    assert sandbox.checkout_url.startswith("https://checkout-sandbox.payway.com.kh/")
    assert production.checkout_url.startswith("https://checkout.payway.com.kh/")
    assert production.payment_link_url.endswith("/payment-link/create")


def test_create_payment_link_without_key_fails(config, clock):
    client = PayWay(config, clock=clock)
    with pytest.raises(ConfigurationError):
        client.create_payment_link(PaymentLinkRequest(title="T", amount=1, return_url="https://r"))


def test_create_payment_link(config, clock, rsa_2048_public_pem):
    client = PayWay(MerchantConfig(merchant_id="m", api_key="k", rsa_public_key=rsa_2048_public_pem), clock=clock)
    payload = client.create_payment_link(PaymentLinkRequest(title="T", amount=1, return_url="https://r"))
    assert payload.target_url == client.payment_link_url


def test_defaults_to_environment(monkeypatch):
    monkeypatch.setenv("ABA_MERCHANT_ID", "env-merchant")
    monkeypatch.setenv("ABA_API_KEY", "env-key")
    monkeypatch.setenv("ABA_SANDBOX", "false")
    client = PayWay()
    assert client.config.merchant_id == "env-merchant"
    assert client.checkout_url.startswith("https://checkout.payway.com.kh/")

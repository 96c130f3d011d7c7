import base64
import hashlib
import hmac
from dataclasses import replace

import pytest

from payway_sdk import checkout as checkout_module
from payway_sdk.checkout import Checkout, build_checkout_payload
from payway_sdk.config import CheckoutProfile, MerchantConfig
from payway_sdk.errors import ConfigurationError, ValidationError

REQ_TIME = "20240305070809"


def _expected_hash(key, values):
    digest = hmac.new(key.encode(), "".join(values).encode(), hashlib.sha512).digest()
    return base64.b64encode(digest).decode()


def test_checkout_v1_fields_and_signature(config, payment_request, clock):
    payload = build_checkout_payload(config, payment_request, clock=clock)

    assert list(payload.fields) == [
        "hash",
        "tran_id",
        "amount",
        "firstname",
        "lastname",
        "phone",
        "email",
        "return_params",
        "merchant_id",
        "req_time",
    ]
    assert payload.fields["merchant_id"] == "ec461403"
    assert payload.fields["req_time"] == REQ_TIME
    assert payload.fields["return_params"] == ""
    assert payload.fields["hash"] == payload.signature
    assert payload.signature == _expected_hash(
        config.api_key,
        [REQ_TIME, "ec461403", "tran1234", "20", "John", "Doe", "x@y.com", "0123456789", ""],
    )
    assert payload.target_url == (
        "https://checkout-sandbox.payway.com.kh/api/payment-gateway/v1/payments/purchase"
    )


def test_checkout_v2_signs_payment_option_before_return_params(config, payment_request, clock):
    config = replace(config, checkout_profile=CheckoutProfile.CHECKOUT_V2)
    request = replace(payment_request, payment_option="abapay", return_params="order=7")

    payload = build_checkout_payload(config, request, clock=clock)

    assert list(payload.fields)[-1] == "payment_option"
    assert payload.fields["payment_option"] == "abapay"
    assert payload.signature == _expected_hash(
        config.api_key,
        [REQ_TIME, "ec461403", "tran1234", "20", "John", "Doe", "x@y.com", "0123456789", "abapay", "order=7"],
    )


def test_checkout_v1_ignores_payment_option(config, payment_request, clock):
    request = replace(payment_request, payment_option="cards")
    payload = build_checkout_payload(config, request, clock=clock)
    assert "payment_option" not in payload.fields
    assert payload.signature == build_checkout_payload(config, payment_request, clock=clock).signature


def test_signature_changes_with_any_field(config, payment_request, clock):
    base = build_checkout_payload(config, payment_request, clock=clock).signature
    changed = replace(payment_request, amount="20.00")
    assert build_checkout_payload(config, changed, clock=clock).signature != base
    changed = replace(payment_request, customer=replace(payment_request.customer, email="y@y.com"))
    assert build_checkout_payload(config, changed, clock=clock).signature != base


def test_production_flag_selects_production_url(config, payment_request, clock):
    payload = build_checkout_payload(replace(config, sandbox=False), payment_request, clock=clock)
    assert payload.target_url == "https://checkout.payway.com.kh/api/payment-gateway/v1/payments/purchase"


def test_missing_api_key_fails_before_signing(payment_request, clock, monkeypatch, config):
    def _fail(*args, **kwargs):
        raise AssertionError("sign must not be called")

    monkeypatch.setattr(checkout_module, "sign", _fail)

    with pytest.raises(ConfigurationError) as excinfo:
        build_checkout_payload(replace(config, api_key=""), payment_request, clock=clock)
    assert excinfo.value.details == {"fields": ["api_key"]}


def test_invalid_request_lists_fields(config, payment_request, clock):
    request = replace(
        payment_request,
        amount="0.00",
        customer=replace(payment_request.customer, phone=""),
    )
    with pytest.raises(ValidationError) as excinfo:
        build_checkout_payload(config, request, clock=clock)
    assert excinfo.value.fields == ["amount", "customer.phone"]


def test_payload_is_read_only(config, payment_request, clock):
    payload = build_checkout_payload(config, payment_request, clock=clock)
    with pytest.raises(TypeError):
        payload.fields["amount"] = "1"  # type: ignore[index]
    form = payload.as_form()
    form["amount"] = "1"
    assert payload.fields["amount"] == "20"


def test_checkout_service(config, payment_request, clock):
    service = Checkout(config, clock)
    assert service.create(payment_request).fields["req_time"] == REQ_TIME
    assert service.url(sandbox=False).startswith("https://checkout.payway.com.kh/")


def test_non_string_merchant_id_is_a_configuration_error(payment_request, clock):
    config = MerchantConfig.from_mapping({"merchant_id": 12345, "api_key": "k"})
    with pytest.raises(ConfigurationError) as excinfo:
        build_checkout_payload(config, payment_request, clock=clock)
    assert excinfo.value.code == "INVALID_CONFIGURATION"


@pytest.mark.parametrize("amount", [" 1E+1 ", "1E+1"])
def test_amount_is_never_signed_in_a_rewritten_form(config, payment_request, clock, amount):
    with pytest.raises(ValidationError) as excinfo:
        build_checkout_payload(config, replace(payment_request, amount=amount), clock=clock)
    assert excinfo.value.fields == ["amount"]

from datetime import datetime, timezone

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from payway_sdk import Customer, MerchantConfig, PaymentRequest

FIXED_NOW = datetime(2024, 3, 5, 7, 8, 9, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_NOW


def _public_pem(private_key):
    return private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture(scope="session")
def rsa_1024_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture(scope="session")
def rsa_2048_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_1024_public_pem(rsa_1024_private_key):
    return _public_pem(rsa_1024_private_key)


@pytest.fixture(scope="session")
def rsa_2048_public_pem(rsa_2048_private_key):
    return _public_pem(rsa_2048_private_key)


@pytest.fixture
def config():
    return MerchantConfig(merchant_id="ec461403", api_key="7561d0c2a8b3")


@pytest.fixture
def payment_request():
    return PaymentRequest(
        transaction_id="tran1234",
        amount="20",
        customer=Customer(
            first_name="John",
            last_name="Doe",
            email="x@y.com",
            phone="0123456789",
        ),
    )


@pytest.fixture
def clock():
    return fixed_clock

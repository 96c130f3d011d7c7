"""RSA helpers for the merchant-auth envelope."""
from __future__ import annotations

import base64

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .errors import CryptoError, EncodingError

# PKCS#1 v1.5 encryption padding takes at least 11 bytes of the modulus.
PKCS1V15_OVERHEAD = 11


def load_public_key(public_key_pem: str | bytes) -> rsa.RSAPublicKey:
    """Parse a PEM encoded RSA public key.

    Both ``PUBLIC KEY`` (SubjectPublicKeyInfo) and ``RSA PUBLIC KEY``
    (PKCS#1) blocks are accepted. Keys copied from environment variables
    often carry literal ``\\n`` sequences; those are turned back into
    newlines first.
    """

    if isinstance(public_key_pem, str):
        try:
            public_key_pem = public_key_pem.strip().replace("\\n", "\n").encode("ascii")
        except UnicodeEncodeError as exc:
            raise EncodingError.invalid_public_key_error("PEM must be ASCII") from exc

    try:
        key = serialization.load_pem_public_key(public_key_pem)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise EncodingError.invalid_public_key_error(str(exc) or "unparsable PEM") from exc

    if not isinstance(key, rsa.RSAPublicKey):
        raise EncodingError.invalid_public_key_error(
            f"expected an RSA key, got {type(key).__name__}"
        )
    return key


def max_plaintext_size(public_key: rsa.RSAPublicKey) -> int:
    return (public_key.key_size + 7) // 8 - PKCS1V15_OVERHEAD


def encrypt_pkcs1v15(public_key: rsa.RSAPublicKey, plaintext: bytes) -> str:
    """Encrypt ``plaintext`` with PKCS#1 v1.5 padding and Base64 the result.

    The gateway only accepts PKCS#1 v1.5. Plaintext that does not fit the
    modulus raises :class:`CryptoError`; it is never truncated.
    """

    limit = max_plaintext_size(public_key)
    if len(plaintext) > limit:
        raise CryptoError.plaintext_too_large_error(len(plaintext), limit, public_key.key_size)

    try:
        ciphertext = public_key.encrypt(plaintext, padding.PKCS1v15())
    except ValueError as exc:
        raise CryptoError(
            f"RSA encryption failed: {exc}",
            "ENCRYPTION_FAILED",
            {"key_size": public_key.key_size},
        ) from exc

    return base64.b64encode(ciphertext).decode("ascii")

"""HMAC signing used by every PayWay request."""
from __future__ import annotations

import base64
import hashlib
import hmac
from typing import Optional, Sequence

from .errors import ValidationError


def sign(secret_key: str, ordered_values: Sequence[Optional[str]]) -> str:
    """Return the Base64 HMAC-SHA512 of ``ordered_values`` keyed by ``secret_key``.

    Values are concatenated in the given order with no delimiter, which is
    how the gateway rebuilds the message it verifies. Because there is no
    delimiter, ``["ab", "c"]`` and ``["a", "bc"]`` produce the same
    signature; callers must keep the gateway's field order and field set
    fixed. Empty strings are legitimate values; ``None`` is refused rather
    than guessed to mean ``""``.
    """

    missing = [str(index) for index, value in enumerate(ordered_values) if value is None]
    if missing:
        raise ValidationError(
            "Signature values must be strings; got None",
            "NULL_SIGNATURE_VALUE",
            {"positions": missing},
            fields=missing,
        )

    message = "".join(ordered_values).encode("utf-8")  # type: ignore[arg-type]
    digest = hmac.new(secret_key.encode("utf-8"), message, hashlib.sha512).digest()
    return base64.b64encode(digest).decode("ascii")

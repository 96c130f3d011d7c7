"""Print the multipart fields for a PayWay payment link request.

Requires ``ABA_MERCHANT_ID``, ``ABA_API_KEY`` and ``ABA_RSA_PUBLIC_KEY``.
"""
import json
from decimal import Decimal

from payway_sdk import Currency, PayWay, PaymentLinkRequest


def main() -> None:
    client = PayWay()
    payload = client.create_payment_link(
        PaymentLinkRequest(
            title="Order 42",
            amount=Decimal("12.50"),
            currency=Currency.USD,
            return_url="https://shop.example/return",
        )
    )

    print("POST", payload.target_url)
    print(json.dumps(payload.as_form(), indent=2))


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()

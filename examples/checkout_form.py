"""Render an auto-submitting PayWay checkout form from environment credentials.

Set ``ABA_MERCHANT_ID`` and ``ABA_API_KEY`` (and optionally ``ABA_BASE_URL``
or ``ABA_SANDBOX=false``) before running.
"""
import html
import logging
import time

from payway_sdk import Customer, PayWay, PaymentRequest, SignedPayload


def render_form(payload: SignedPayload) -> str:
    inputs = "\n".join(
        f'      <input type="hidden" name="{html.escape(name)}" value="{html.escape(value)}" />'
        for name, value in payload.fields.items()
    )
    return f"""<!DOCTYPE html>
<html>
  <head><title>Redirecting to ABA PayWay...</title></head>
  <body>
    <form id="aba_merchant_request" method="POST" action="{html.escape(payload.target_url)}">
{inputs}
    </form>
    <script>document.getElementById('aba_merchant_request').submit();</script>
  </body>
</html>
"""


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    client = PayWay()
    payload = client.create_checkout(
        PaymentRequest(
            transaction_id=str(int(time.time() * 1000)),
            amount="10.00",
            customer=Customer(
                first_name="Panhaboth",
                last_name="K",
                email="customer@example.com",
                phone="0123456789",
            ),
        )
    )
    print(render_form(payload))


if __name__ == "__main__":  # pragma: no cover - manual usage
    main()

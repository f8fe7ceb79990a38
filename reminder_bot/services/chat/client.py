"""Google Chat webhook client - data layer."""

import requests

from reminder_bot.core.exceptions import WebhookDeliveryError
from reminder_bot.core.logging import get_logger

logger = get_logger("chat.data")

HEADERS = {"Content-Type": "application/json; charset=UTF-8"}


def post_webhook_message(webhook_url: str, text: str) -> None:
    """Post a plain text message to a Google Chat space webhook."""
    try:
        response = requests.post(webhook_url, headers=HEADERS, json={"text": text})
    except requests.RequestException as e:
        raise WebhookDeliveryError(f"request failed: {e}") from e

    if not response.ok:
        details = response.text or "No error details"
        raise WebhookDeliveryError(
            f"HTTP error! status: {response.status_code}, details: {details}",
            response_status=response.status_code,
            response_body=details,
        )

    logger.debug(f"Webhook responded with {response.status_code}")

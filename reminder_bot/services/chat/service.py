"""Chat delivery service - business logic layer."""

from typing import Optional

from reminder_bot.core.exceptions import WebhookDeliveryError
from reminder_bot.core.logging import get_logger
from reminder_bot.services.chat.client import post_webhook_message

logger = get_logger("chat.service")


def send_message(webhook_url: Optional[str], text: str) -> bool:
    """Deliver a message to the chat space once. Returns whether it was accepted."""
    if not webhook_url:
        logger.warning("Webhook URL is not set. Cannot send message.")
        return False

    try:
        post_webhook_message(webhook_url, text)
    except WebhookDeliveryError as e:
        logger.error(f"Error sending message to webhook: {e.message}")
        return False

    logger.info("Message sent successfully")
    return True

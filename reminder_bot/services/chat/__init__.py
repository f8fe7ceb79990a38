"""Google Chat delivery service."""

from reminder_bot.services.chat.service import send_message

__all__ = ["send_message"]

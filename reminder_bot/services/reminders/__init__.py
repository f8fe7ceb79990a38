"""Reminder jobs and message builders."""

from reminder_bot.services.reminders.pr_message import build_pr_reminder_message
from reminder_bot.services.reminders.service import send_daily_standup, send_pr_reminder
from reminder_bot.services.reminders.standup import build_standup_message

__all__ = [
    "build_pr_reminder_message",
    "build_standup_message",
    "send_daily_standup",
    "send_pr_reminder",
]

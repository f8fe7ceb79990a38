"""Reminder jobs - orchestration layer."""

from datetime import datetime
from typing import Optional

from reminder_bot.config import Settings
from reminder_bot.core.logging import get_logger
from reminder_bot.services.chat.service import send_message
from reminder_bot.services.github.service import fetch_prs_waiting_for_review
from reminder_bot.services.reminders.pr_message import build_pr_reminder_message
from reminder_bot.services.reminders.schemas import ReminderResult
from reminder_bot.services.reminders.standup import build_standup_message, local_now

logger = get_logger("reminders.service")

STANDUP_JOB = "daily-standup"
PR_REMINDER_JOB = "pr-reminder"


def deliver(job: str, message: str, settings: Settings) -> ReminderResult:
    """Send a composed message, or only log it in dry-run mode."""
    if settings.is_dry_run:
        logger.info("Running in development mode - no messages will be sent to webhook")
        logger.info(f"Message that would be sent:\n{message}")
        return ReminderResult(job=job, status="dry_run", message=message)

    logger.info(f"Sending {job} reminder...")
    sent = send_message(settings.google_space_webhook_url, message)
    return ReminderResult(job=job, status="sent" if sent else "failed", message=message)


def send_daily_standup(settings: Settings, now: Optional[datetime] = None) -> ReminderResult:
    """Post the standup (weekdays) or weekly report (Saturday) reminder."""
    today = now or local_now(settings.timezone_offset_hours)
    message = build_standup_message(today, settings.standup_time_label)

    if message is None:
        logger.info("It's Sunday - no message will be sent")
        return ReminderResult(job=STANDUP_JOB, status="skipped")

    return deliver(STANDUP_JOB, message, settings)


def send_pr_reminder(settings: Settings, now: Optional[datetime] = None) -> ReminderResult:
    """Fetch open PRs from GitHub and post the review reminder."""
    result = fetch_prs_waiting_for_review(
        settings.github_token,
        settings.github_repos,
        limit=settings.pr_fetch_limit,
    )
    message = build_pr_reminder_message(
        result.prs,
        max_age_days=settings.max_pr_age_days,
        draft_counts=result.draft_counts,
        now=now or local_now(settings.timezone_offset_hours),
        report_hidden_only=settings.report_hidden_only,
    )

    if not message:
        logger.info("No PRs waiting for review")
        return ReminderResult(job=PR_REMINDER_JOB, status="skipped")

    return deliver(PR_REMINDER_JOB, message, settings)

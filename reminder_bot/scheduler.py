"""Cron scheduling for reminder jobs."""

from datetime import datetime, timezone
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from reminder_bot.config import Settings
from reminder_bot.core.logging import get_logger
from reminder_bot.services.reminders.service import (
    PR_REMINDER_JOB,
    STANDUP_JOB,
    send_daily_standup,
    send_pr_reminder,
)

logger = get_logger("scheduler")

_scheduler: Optional[BackgroundScheduler] = None


def run_job(name: str, job: Callable, settings: Settings) -> None:
    """Scheduler entry point for one job; failures are logged, never raised."""
    logger.info(f"{name} cron job triggered at: {datetime.now(timezone.utc).isoformat()}")
    try:
        result = job(settings)
        logger.info(f"{name} finished with status {result.status}")
    except Exception as e:
        logger.exception(f"{name} cron job failed: {e}")


def start_scheduler(settings: Settings) -> Optional[BackgroundScheduler]:
    """
    Start the background scheduler once.

    - Respects ENABLE_SCHEDULER
    - A second call while running is a no-op
    """
    global _scheduler

    if not settings.enable_scheduler:
        logger.info("Scheduler disabled via settings (ENABLE_SCHEDULER=False)")
        return None

    if _scheduler is not None:
        logger.info("Scheduler already running, skipping initialization")
        return _scheduler

    scheduler = BackgroundScheduler(timezone="UTC")

    for name, cron, job in (
        (STANDUP_JOB, settings.standup_cron, send_daily_standup),
        (PR_REMINDER_JOB, settings.pr_reminder_cron, send_pr_reminder),
    ):
        scheduler.add_job(
            run_job,
            trigger=CronTrigger.from_crontab(cron, timezone="UTC"),
            args=[name, job, settings],
            id=name,
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        logger.info(f"Scheduled {name} at '{cron}' (UTC)")

    scheduler.start()
    _scheduler = scheduler
    return scheduler


def stop_scheduler() -> None:
    global _scheduler

    if _scheduler is None:
        return
    _scheduler.shutdown(wait=False)
    _scheduler = None
    logger.info("Scheduler stopped")

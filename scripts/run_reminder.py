#!/usr/bin/env python3
"""Run a reminder job locally, or serve the scheduled app.

Usage:
    python scripts/run_reminder.py test      # standup reminder once
    python scripts/run_reminder.py pr-test   # PR reminder once
    python scripts/run_reminder.py           # start the scheduler
"""
import sys

from dotenv import load_dotenv

load_dotenv()

from reminder_bot.config import settings
from reminder_bot.core.logging import get_logger
from reminder_bot.services.reminders.service import send_daily_standup, send_pr_reminder

logger = get_logger("scripts.run_reminder")


def main(argv: list[str]) -> int:
    command = argv[1] if len(argv) > 1 else "serve"

    if command == "test":
        logger.info("Running test message...")
        result = send_daily_standup(settings)
    elif command == "pr-test":
        logger.info("Running PR reminder test...")
        result = send_pr_reminder(settings)
    elif command == "serve":
        import uvicorn

        logger.info("Starting daily standup scheduler...")
        uvicorn.run("reminder_bot.main:app", host=settings.host, port=settings.port)
        return 0
    else:
        logger.error(f"Unknown command: {command}")
        return 2

    print(f"Reminder result: {result.status}")
    return 1 if result.status == "failed" else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))

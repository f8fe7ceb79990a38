"""Manual reminder trigger routes."""

from fastapi import APIRouter

from reminder_bot.config import settings
from reminder_bot.core.exceptions import ExternalServiceError
from reminder_bot.core.logging import get_logger
from reminder_bot.core.schemas.responses import ApiResponse
from reminder_bot.services.reminders.schemas import ReminderResult
from reminder_bot.services.reminders.service import send_daily_standup, send_pr_reminder

logger = get_logger("reminders.routes")

router = APIRouter(prefix="/reminders")


def _respond(result: ReminderResult) -> ApiResponse[ReminderResult]:
    if result.status == "failed":
        raise ExternalServiceError("Google Chat", f"{result.job} reminder was not delivered")
    return ApiResponse(data=result, message=f"{result.job}: {result.status}")


@router.post("/standup", response_model=ApiResponse[ReminderResult])
def trigger_standup():
    """Run the standup reminder now."""
    logger.info("Standup reminder triggered manually")
    return _respond(send_daily_standup(settings))


@router.post("/pull-requests", response_model=ApiResponse[ReminderResult])
def trigger_pr_reminder():
    """Run the PR reminder now."""
    logger.info("PR reminder triggered manually")
    return _respond(send_pr_reminder(settings))

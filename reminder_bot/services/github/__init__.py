"""GitHub service."""

from reminder_bot.services.github.review_state import resolve_reviewer_statuses
from reminder_bot.services.github.service import fetch_prs_waiting_for_review

__all__ = [
    "fetch_prs_waiting_for_review",
    "resolve_reviewer_statuses",
]

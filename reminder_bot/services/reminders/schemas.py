"""Pydantic schemas for reminder jobs."""

from typing import Literal

from pydantic import BaseModel

ReminderStatus = Literal["sent", "failed", "skipped", "dry_run"]


class ReminderResult(BaseModel):
    """Outcome of one reminder job run."""

    job: str
    status: ReminderStatus
    message: str | None = None

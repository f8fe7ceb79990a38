"""Pydantic schemas for GitHub service."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class ReviewStatus(str, Enum):
    """Resolved review status of one reviewer on one PR."""

    PENDING = "pending"
    APPROVED = "approved"
    CHANGES_REQUESTED = "changes_requested"
    COMMENTED = "commented"


class ReviewEvent(BaseModel):
    """A single submitted review, as returned by GitHub (oldest first)."""

    author: str | None = None
    state: str


class ReviewerState(BaseModel):
    """Reviewer login with its resolved status."""

    login: str
    status: ReviewStatus


class PullRequestInfo(BaseModel):
    """An open, non-draft pull request that has at least one reviewer."""

    title: str
    number: int
    author: str
    url: str
    reviewers: list[ReviewerState]
    created_at: datetime
    repository: str


class FetchResult(BaseModel):
    """Pull requests across all repositories plus per-repository draft counts."""

    prs: list[PullRequestInfo] = Field(default_factory=list)
    draft_counts: dict[str, int] = Field(default_factory=dict)

"""Render the pull request reminder message."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Mapping, Optional

from reminder_bot.services.github.schemas import PullRequestInfo, ReviewerState, ReviewStatus

STATUS_EMOJI = {
    ReviewStatus.APPROVED: "✅",
    ReviewStatus.CHANGES_REQUESTED: "🔄",
    ReviewStatus.COMMENTED: "💬",
    ReviewStatus.PENDING: "⏳",
}
DEFAULT_EMOJI = "⏳"

# Any of these means the PR still needs someone to act on it.
NEEDS_ATTENTION = {
    ReviewStatus.PENDING,
    ReviewStatus.COMMENTED,
    ReviewStatus.CHANGES_REQUESTED,
}

TITLE = "🔄 *Pull Requests Reminder* 🔄\n\n"
PREAMBLE = "The following PRs need your attention:\n\n"
NOTHING_TO_REVIEW = "No pull requests need your attention right now.\n\n"
CLOSING = "Please review these pull requests at your earliest convenience. Thank you!"


@dataclass
class HiddenCounts:
    """PRs of one repository left out of the visible list."""

    fully_reviewed: int = 0
    too_old: int = 0
    draft: int = 0

    @property
    def any(self) -> bool:
        return self.fully_reviewed > 0 or self.too_old > 0 or self.draft > 0


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def needs_attention(pr: PullRequestInfo) -> bool:
    """A PR needs attention while any reviewer has not approved it."""
    return any(reviewer.status in NEEDS_ATTENTION for reviewer in pr.reviewers)


def is_fully_reviewed(pr: PullRequestInfo) -> bool:
    return bool(pr.reviewers) and all(r.status == ReviewStatus.APPROVED for r in pr.reviewers)


def format_relative_age(created_at: datetime, now: datetime) -> str:
    """Describe how long ago a PR was opened, in whole days or hours."""
    hours = int((now - _as_utc(created_at)).total_seconds() // 3600)
    days = hours // 24
    if days > 0:
        return f"{_plural(days, 'day')} ago"
    if hours > 0:
        return f"{_plural(hours, 'hour')} ago"
    return "just now"


def format_short_date(created_at: datetime, now: datetime) -> str:
    """Month abbreviation and day, e.g. "Oct 3", in the timezone of ``now``."""
    local = _as_utc(created_at).astimezone(now.tzinfo)
    return f"{local:%b} {local.day}"


def format_reviewers(reviewers: Iterable[ReviewerState]) -> str:
    return ", ".join(f"{r.login} {STATUS_EMOJI.get(r.status, DEFAULT_EMOJI)}" for r in reviewers)


def format_pull_request(pr: PullRequestInfo, now: datetime) -> str:
    """Render one PR block, terminated by a blank line."""
    return (
        f"#{pr.number} - <{pr.url}|{pr.title}>\n"
        f"Author: {pr.author}\n"
        f"Reviewers: {format_reviewers(pr.reviewers)}\n"
        f"Created: {format_short_date(pr.created_at, now)} "
        f"({format_relative_age(pr.created_at, now)})\n\n"
    )


def format_hidden_summary(hidden: Mapping[str, HiddenCounts], max_age_days: int) -> str:
    """Render the "Hidden PRs" section, or an empty string if nothing was hidden."""
    if not any(counts.any for counts in hidden.values()):
        return ""

    summary = "---\nHidden PRs:\n\n"
    for repository, counts in hidden.items():
        if not counts.any:
            continue
        summary += f"{repository}:\n"
        if counts.fully_reviewed > 0:
            summary += f"  - {_plural(counts.fully_reviewed, 'PR')} fully reviewed\n"
        if counts.too_old > 0:
            summary += f"  - {_plural(counts.too_old, 'PR')} older than {max_age_days} days\n"
        if counts.draft > 0:
            summary += f"  - {counts.draft} draft PR{'s' if counts.draft != 1 else ''}\n"
    return summary + "\n"


def build_pr_reminder_message(
    prs: list[PullRequestInfo],
    max_age_days: int = 120,
    draft_counts: Optional[Mapping[str, int]] = None,
    now: Optional[datetime] = None,
    report_hidden_only: bool = False,
) -> str:
    """
    Build the PR reminder text posted to the chat space.

    PRs older than ``max_age_days`` and PRs every reviewer has approved are
    left out of the list and only counted in the trailing summary, together
    with the draft counts.

    Args:
        prs: Fetched PRs, in the order they should be listed
        max_age_days: Age limit for listed PRs, inclusive
        draft_counts: Open draft PRs per repository
        now: Reference time; defaults to the current UTC time
        report_hidden_only: When no PR is listed, still render the summary
            instead of returning an empty string

    Returns:
        The message, or an empty string when there is nothing to send
    """
    if not prs:
        return ""

    draft_counts = draft_counts or {}
    now = _as_utc(now) if now else datetime.now(timezone.utc)
    max_age = timedelta(days=max_age_days)

    prs_by_repo: dict[str, list[PullRequestInfo]] = {}
    for pr in prs:
        prs_by_repo.setdefault(pr.repository, []).append(pr)

    hidden: dict[str, HiddenCounts] = {}
    sections = ""

    for repository, repo_prs in prs_by_repo.items():
        counts = hidden[repository] = HiddenCounts(draft=draft_counts.get(repository, 0))

        recent = []
        for pr in repo_prs:
            if now - _as_utc(pr.created_at) <= max_age:
                recent.append(pr)
            else:
                counts.too_old += 1

        visible = [pr for pr in recent if needs_attention(pr)]
        counts.fully_reviewed = sum(1 for pr in recent if is_fully_reviewed(pr))

        if visible:
            sections += f"*{repository}*\n\n"
            sections += "".join(format_pull_request(pr, now) for pr in visible)

    for repository, drafts in draft_counts.items():
        if repository not in hidden and drafts > 0:
            hidden[repository] = HiddenCounts(draft=drafts)

    summary = format_hidden_summary(hidden, max_age_days)

    if not sections:
        if report_hidden_only and summary:
            return TITLE + NOTHING_TO_REVIEW + summary.rstrip("\n")
        return ""

    return TITLE + PREAMBLE + sections + summary + CLOSING

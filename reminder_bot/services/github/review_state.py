"""Reduce a PR's review history to one status per reviewer."""

from typing import Iterable

from reminder_bot.services.github.schemas import ReviewEvent, ReviewStatus

BOT_MARKER = "[bot]"

# GitHub review states that overwrite whatever the reviewer had before.
_DECISIVE_STATES = {
    "APPROVED": ReviewStatus.APPROVED,
    "CHANGES_REQUESTED": ReviewStatus.CHANGES_REQUESTED,
}


def is_bot(login: str) -> bool:
    """Check whether a login belongs to an automated account."""
    return BOT_MARKER in login


def apply_review_event(
    statuses: dict[str, ReviewStatus],
    event: ReviewEvent,
    pr_author: str | None,
) -> dict[str, ReviewStatus]:
    """Fold one review event into the reviewer status mapping.

    Approvals and change requests always win. A plain comment only moves a
    reviewer from "no status" or pending to commented; it never downgrades an
    approval or a change request.
    """
    reviewer = event.author
    if not reviewer or reviewer == pr_author or is_bot(reviewer):
        return statuses

    decisive = _DECISIVE_STATES.get(event.state)
    if decisive is not None:
        statuses[reviewer] = decisive
    elif event.state == "COMMENTED":
        if statuses.get(reviewer, ReviewStatus.PENDING) == ReviewStatus.PENDING:
            statuses[reviewer] = ReviewStatus.COMMENTED
    return statuses


def resolve_reviewer_statuses(
    pr_author: str | None,
    requested_reviewers: Iterable[str],
    review_events: Iterable[ReviewEvent],
) -> dict[str, ReviewStatus]:
    """
    Resolve the current status of every reviewer on a pull request.

    Requested reviewers start as pending, then review events are applied in
    the order given. Reviewers who were never requested but left a review are
    included too.

    Args:
        pr_author: Login of the PR author; their own reviews are ignored
        requested_reviewers: Logins currently requested for review
        review_events: Submitted reviews, oldest first

    Returns:
        Mapping of login to status, requested reviewers first
    """
    statuses: dict[str, ReviewStatus] = {}
    for login in requested_reviewers:
        if login:
            statuses[login] = ReviewStatus.PENDING

    for event in review_events:
        statuses = apply_review_event(statuses, event, pr_author)

    return statuses

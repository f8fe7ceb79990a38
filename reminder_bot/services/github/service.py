"""GitHub service - business logic layer."""

from github import Github, GithubException
from github.PullRequest import PullRequest
from requests import RequestException

from reminder_bot.core.exceptions import InvalidRepositoryError, RepositoryFetchError
from reminder_bot.core.logging import get_logger
from reminder_bot.core.repo_parser import parse_repo_reference, split_repo_list
from reminder_bot.services.github.client import (
    fetch_open_pull_requests,
    fetch_requested_reviewers,
    fetch_review_events,
    get_github_client,
)
from reminder_bot.services.github.review_state import resolve_reviewer_statuses
from reminder_bot.services.github.schemas import (
    FetchResult,
    PullRequestInfo,
    ReviewerState,
)

logger = get_logger("github.service")


def build_pull_request_info(pr: PullRequest, repo_name: str) -> PullRequestInfo | None:
    """Resolve reviewers for one PR; None when it has no reviewers at all."""
    author = pr.user.login if pr.user else None
    statuses = resolve_reviewer_statuses(
        author,
        fetch_requested_reviewers(pr),
        fetch_review_events(pr),
    )
    if not statuses:
        return None

    return PullRequestInfo(
        title=pr.title,
        number=pr.number,
        author=author or "unknown",
        url=pr.html_url,
        reviewers=[ReviewerState(login=login, status=status) for login, status in statuses.items()],
        created_at=pr.created_at,
        repository=repo_name,
    )


def fetch_repository_prs(
    client: Github,
    repo_name: str,
    limit: int = 100,
) -> tuple[list[PullRequestInfo], int]:
    """Fetch reviewable PRs and the draft count for a single repository."""
    try:
        pulls = fetch_open_pull_requests(client, repo_name, limit)
        drafts = sum(1 for pr in pulls if pr.draft)

        prs = []
        for pr in pulls:
            if pr.draft:
                continue
            info = build_pull_request_info(pr, repo_name)
            if info is not None:
                prs.append(info)
    except (GithubException, RequestException) as e:
        raise RepositoryFetchError(repo_name, str(e)) from e
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise RepositoryFetchError(repo_name, f"unexpected payload: {e}") from e

    return prs, drafts


def fetch_prs_waiting_for_review(
    token: str | None,
    repos: str | None,
    limit: int = 100,
) -> FetchResult:
    """
    Fetch open, non-draft PRs with reviewers from every configured repository.

    Repositories are processed one at a time in the given order. A repository
    that fails to load is logged and skipped.

    Args:
        token: GitHub token; nothing is fetched without one
        repos: Comma-separated owner/name list
        limit: Maximum open PRs to read per repository

    Returns:
        FetchResult with the PRs and the draft count of each repository
    """
    result = FetchResult()

    if not token:
        logger.warning("GitHub token is not set. Skipping PR reminder.")
        return result

    repo_names = split_repo_list(repos)
    if not repo_names:
        logger.warning("GitHub repositories are not configured. Skipping PR reminder.")
        return result

    client = get_github_client(token)

    for repo_name in repo_names:
        try:
            reference = parse_repo_reference(repo_name)
        except InvalidRepositoryError as e:
            logger.warning(e.message)
            continue

        try:
            prs, drafts = fetch_repository_prs(client, reference.full_name, limit)
        except RepositoryFetchError as e:
            logger.error(f"Error fetching PRs from {repo_name}: {e.message}")
            continue

        result.draft_counts[reference.full_name] = drafts
        result.prs.extend(prs)
        logger.info(f"Found {len(prs)} PRs awaiting review in {reference.full_name} ({drafts} drafts)")

    return result

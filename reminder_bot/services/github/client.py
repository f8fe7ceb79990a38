"""GitHub API client - data layer."""

from github import Auth, Github
from github.PullRequest import PullRequest

from reminder_bot.services.github.schemas import ReviewEvent


def get_github_client(token: str) -> Github:
    """Create a GitHub client authenticated with a bearer token.

    Retries are off: a failed request is final for the run.
    """
    return Github(auth=Auth.Token(token), retry=None)


def fetch_open_pull_requests(client: Github, repo_name: str, limit: int = 100) -> list[PullRequest]:
    """Fetch open pull requests, newest created first."""
    repository = client.get_repo(repo_name)
    pulls = repository.get_pulls(state="open", sort="created", direction="desc")
    return list(pulls[:limit])


def fetch_requested_reviewers(pr: PullRequest) -> list[str]:
    """Fetch logins of users currently requested to review a PR.

    Team review requests have no login and are skipped.
    """
    users, _teams = pr.get_review_requests()
    return [user.login for user in users if user.login]


def fetch_review_events(pr: PullRequest) -> list[ReviewEvent]:
    """Fetch submitted reviews of a PR in chronological order."""
    events = []
    for review in pr.get_reviews():
        author = review.user.login if review.user else None
        events.append(ReviewEvent(author=author, state=review.state))
    return events

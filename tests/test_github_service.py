"""Tests for fetching pull requests from GitHub."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import pytest
from github import GithubException

from reminder_bot.services.github.client import (
    fetch_open_pull_requests,
    fetch_requested_reviewers,
    fetch_review_events,
    get_github_client,
)
from reminder_bot.services.github.schemas import ReviewEvent, ReviewStatus
from reminder_bot.services.github.service import fetch_prs_waiting_for_review

CREATED = datetime(2026, 10, 1, 9, 0, tzinfo=timezone.utc)


def _user(login):
    user = MagicMock()
    user.login = login
    return user


def _review(login, state):
    review = MagicMock()
    review.user = _user(login)
    review.state = state
    return review


def _pr(number, author="alice", draft=False, requested=(), reviews=()):
    pr = MagicMock()
    pr.number = number
    pr.title = f"PR {number}"
    pr.html_url = f"https://github.com/a/b/pull/{number}"
    pr.created_at = CREATED
    pr.draft = draft
    pr.user = _user(author)
    pr.get_review_requests.return_value = ([_user(login) for login in requested], [])
    pr.get_reviews.return_value = [_review(login, state) for login, state in reviews]
    return pr


@pytest.fixture
def github_client():
    with patch("reminder_bot.services.github.service.get_github_client") as factory:
        yield factory


@pytest.fixture
def open_pulls():
    with patch("reminder_bot.services.github.service.fetch_open_pull_requests") as fetch:
        yield fetch


class TestFetchPrsWaitingForReview:
    """Tests for fetch_prs_waiting_for_review function."""

    @pytest.mark.parametrize("token", [None, ""])
    def test_no_token_skips_network(self, token, github_client):
        """Without a token nothing is fetched."""
        result = fetch_prs_waiting_for_review(token, "a/b")

        assert result.prs == []
        assert result.draft_counts == {}
        github_client.assert_not_called()

    def test_no_repositories(self, github_client):
        """Blank repository list gives an empty result."""
        result = fetch_prs_waiting_for_review("token", " , ")

        assert result.prs == []
        github_client.assert_not_called()

    def test_resolves_reviewers_and_counts_drafts(self, github_client, open_pulls):
        """Non-draft PRs get resolved reviewers, drafts are only counted."""
        open_pulls.return_value = [
            _pr(3, requested=["carol"], reviews=[("bob", "APPROVED")]),
            _pr(2, draft=True, requested=["carol"]),
            _pr(1, requested=["dave"]),
        ]

        result = fetch_prs_waiting_for_review("token", "a/b")

        assert [pr.number for pr in result.prs] == [3, 1]
        assert result.draft_counts == {"a/b": 1}
        first = result.prs[0]
        assert first.repository == "a/b"
        assert first.author == "alice"
        assert first.url == "https://github.com/a/b/pull/3"
        assert [(r.login, r.status) for r in first.reviewers] == [
            ("carol", ReviewStatus.PENDING),
            ("bob", ReviewStatus.APPROVED),
        ]
        open_pulls.assert_called_once_with(github_client.return_value, "a/b", 100)

    def test_prs_without_reviewers_dropped(self, github_client, open_pulls):
        """A PR with no requested reviewers and no reviews is excluded."""
        open_pulls.return_value = [_pr(1), _pr(2, reviews=[("alice", "COMMENTED")])]

        result = fetch_prs_waiting_for_review("token", "a/b")

        assert result.prs == []
        assert result.draft_counts == {"a/b": 0}

    def test_invalid_repository_skipped(self, github_client, open_pulls):
        """Malformed entries are skipped without stopping the others."""
        open_pulls.return_value = [_pr(1, requested=["carol"])]

        result = fetch_prs_waiting_for_review("token", "broken, a/b")

        assert [pr.repository for pr in result.prs] == ["a/b"]
        open_pulls.assert_called_once()

    def test_failing_repository_skipped(self, github_client, open_pulls):
        """A repository that errors contributes nothing; others still load."""

        def fetch(client, repo_name, limit):
            if repo_name == "x/broken":
                raise GithubException(404, {"message": "Not Found"}, None)
            return [_pr(7, requested=["carol"])]

        open_pulls.side_effect = fetch

        result = fetch_prs_waiting_for_review("token", "x/broken,a/b")

        assert [pr.number for pr in result.prs] == [7]
        assert result.draft_counts == {"a/b": 0}

    def test_malformed_payload_skipped(self, github_client, open_pulls):
        """Unexpected payload shapes are contained to their repository."""
        bad = _pr(1, requested=["carol"])
        bad.get_review_requests.return_value = None
        open_pulls.side_effect = [[bad], [_pr(2, requested=["dave"])]]

        result = fetch_prs_waiting_for_review("token", "x/y,a/b")

        assert [pr.number for pr in result.prs] == [2]
        assert "x/y" not in result.draft_counts

    def test_repository_order_preserved(self, github_client, open_pulls):
        """Repositories keep their configured order."""
        open_pulls.side_effect = [
            [_pr(5, requested=["carol"])],
            [_pr(9, requested=["carol"])],
        ]

        result = fetch_prs_waiting_for_review("token", "c/d,a/b", limit=20)

        assert [(pr.repository, pr.number) for pr in result.prs] == [("c/d", 5), ("a/b", 9)]
        assert open_pulls.call_args_list[0].args == (github_client.return_value, "c/d", 20)


class TestClient:
    """Tests for the GitHub data layer helpers."""

    def test_fetch_open_pull_requests(self):
        """Open PRs are requested newest first and capped."""
        client = MagicMock()
        pulls = client.get_repo.return_value.get_pulls.return_value
        pulls.__getitem__.return_value = ["pr"]

        result = fetch_open_pull_requests(client, "a/b", limit=100)

        client.get_repo.assert_called_once_with("a/b")
        client.get_repo.return_value.get_pulls.assert_called_once_with(
            state="open", sort="created", direction="desc"
        )
        pulls.__getitem__.assert_called_once_with(slice(None, 100, None))
        assert result == ["pr"]

    def test_fetch_requested_reviewers_ignores_teams(self):
        """Only user review requests are returned."""
        pr = MagicMock()
        pr.get_review_requests.return_value = ([_user("bob"), _user("")], [MagicMock()])

        assert fetch_requested_reviewers(pr) == ["bob"]

    def test_fetch_review_events(self):
        """Reviews keep their order and tolerate deleted users."""
        pr = MagicMock()
        ghost = MagicMock()
        ghost.user = None
        ghost.state = "APPROVED"
        pr.get_reviews.return_value = [_review("bob", "COMMENTED"), ghost]

        assert fetch_review_events(pr) == [
            ReviewEvent(author="bob", state="COMMENTED"),
            ReviewEvent(author=None, state="APPROVED"),
        ]

    @patch("reminder_bot.services.github.client.Github")
    def test_get_github_client_disables_retries(self, mock_github):
        """A failed request is not retried by the client."""
        client = get_github_client("token")

        assert client is mock_github.return_value
        assert mock_github.call_args.kwargs["retry"] is None
        assert mock_github.call_args.kwargs["auth"].token == "token"

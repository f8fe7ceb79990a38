"""Tests for the HTTP endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from reminder_bot.main import app
from reminder_bot.services.reminders.schemas import ReminderResult


@pytest.fixture
def client():
    # Lifespan is not entered, so the scheduler never starts.
    return TestClient(app)


class TestServiceEndpoints:
    """Tests for root and health endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "team-reminder-bot"}

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"


class TestReminderRoutes:
    """Tests for manual reminder triggers."""

    @patch("reminder_bot.services.reminders.routes.send_daily_standup")
    def test_trigger_standup(self, mock_job, client):
        """Standup trigger returns the job result."""
        mock_job.return_value = ReminderResult(job="daily-standup", status="dry_run", message="hi")

        response = client.post("/api/reminders/standup")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "dry_run"
        assert body["message"] == "daily-standup: dry_run"

    @patch("reminder_bot.services.reminders.routes.send_pr_reminder")
    def test_trigger_pr_reminder_skipped(self, mock_job, client):
        """A skipped run is still a success."""
        mock_job.return_value = ReminderResult(job="pr-reminder", status="skipped")

        response = client.post("/api/reminders/pull-requests")

        assert response.status_code == 200
        assert response.json()["data"] == {"job": "pr-reminder", "status": "skipped", "message": None}

    @patch("reminder_bot.services.reminders.routes.send_pr_reminder")
    def test_failed_delivery_is_bad_gateway(self, mock_job, client):
        """Delivery failures map to a 502 error response."""
        mock_job.return_value = ReminderResult(job="pr-reminder", status="failed", message="x")

        response = client.post("/api/reminders/pull-requests")

        assert response.status_code == 502
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Google Chat error: pr-reminder reminder was not delivered"

"""Tests for the feedback-hub CLI commands."""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from feedback_hub.cli import main
from feedback_hub.client.api import ClientResult


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fake_api(sample_feedback):
    """Patch FeedbackAPI in the CLI with an async-context-manager mock."""
    api = AsyncMock()
    api.__aenter__.return_value = api
    api.__aexit__.return_value = None
    api.submit_feedback.return_value = ClientResult(
        success=True, data=sample_feedback, message="Feedback submitted successfully."
    )
    api.get_all_feedback.return_value = ClientResult(success=True, data=[sample_feedback])
    with patch("feedback_hub.cli.FeedbackAPI", return_value=api) as factory:
        api.factory = factory
        yield api


SUBMIT_ARGS = [
    "submit",
    "--name", "Anna",
    "--email", "anna@example.com",
    "--message", "Great service",
    "--rating", "5",
]


class TestSubmit:
    def test_success(self, runner, fake_api):
        result = runner.invoke(main, SUBMIT_ARGS)

        assert result.exit_code == 0, result.output
        assert "Thank you! Feedback submitted successfully." in result.output
        assert "feedback_abc123def456" in result.output
        fake_api.submit_feedback.assert_awaited_once()

    def test_validation_errors_exit_2(self, runner, fake_api):
        args = list(SUBMIT_ARGS)
        args[args.index("anna@example.com")] = "not-an-email"

        result = runner.invoke(main, args)

        assert result.exit_code == 2
        assert "Please enter a valid email" in result.output
        fake_api.submit_feedback.assert_not_called()

    def test_server_failure_exit_1(self, runner, fake_api):
        fake_api.submit_feedback.return_value = ClientResult(
            success=False, message="Server error"
        )

        result = runner.invoke(main, SUBMIT_ARGS)

        assert result.exit_code == 1
        assert "Server error" in result.output

    def test_api_url_passed_through(self, runner, fake_api):
        runner.invoke(main, SUBMIT_ARGS + ["--api-url", "http://other:9000"])
        fake_api.factory.assert_called_once_with("http://other:9000")


class TestList:
    def test_lists_rows(self, runner, fake_api):
        result = runner.invoke(main, ["list"])

        assert result.exit_code == 0, result.output
        assert "All Feedbacks (1/1)" in result.output
        assert "Anna | anna@example.com | ★★★★☆ 4" in result.output

    def test_search_without_match(self, runner, fake_api):
        result = runner.invoke(main, ["list", "--search", "zed"])

        assert "All Feedbacks (0/1)" in result.output
        assert "No matching results" in result.output

    def test_export(self, runner, fake_api, tmp_path):
        target = tmp_path / "feedbacks.csv"

        result = runner.invoke(main, ["list", "--export", str(target)])

        assert result.exit_code == 0, result.output
        assert f"Exported 1 rows to {target}" in result.output
        content = target.read_text(encoding="utf-8")
        assert content.startswith("Name,Email,Rating,Message,Created At")
        assert "Loved it. Will come back." in content

    def test_export_empty(self, runner, fake_api, tmp_path):
        target = tmp_path / "feedbacks.csv"

        result = runner.invoke(main, ["list", "--search", "zed", "--export", str(target)])

        assert "No feedbacks to export" in result.output
        assert not target.exists()


class TestAnalytics:
    def test_prints_cards(self, runner, fake_api):
        result = runner.invoke(main, ["analytics"])

        assert result.exit_code == 0, result.output
        assert "Total Feedbacks" in result.output
        assert "4.0 ★" in result.output
        assert "1 positive / 0 negative" in result.output


class TestHealth:
    def test_unreachable_database_exits_1(self, runner):
        db = AsyncMock()
        db.__aenter__.side_effect = OSError("connection refused")
        with patch("feedback_hub.storage.database.Database", return_value=db):
            result = runner.invoke(main, ["health"])

        assert result.exit_code == 1
        assert "postgres: False" in result.output

    def test_healthy_database_exits_0(self, runner):
        db = AsyncMock()
        db.__aenter__.return_value = db
        db.health_check.return_value = True
        with patch("feedback_hub.storage.database.Database", return_value=db):
            result = runner.invoke(main, ["health"])

        assert result.exit_code == 0
        assert "postgres: True" in result.output


class TestInitDb:
    def test_creates_tables(self, runner):
        db = AsyncMock()
        db.__aenter__.return_value = db
        db.fetchval.return_value = 3
        with patch("feedback_hub.storage.database.Database", return_value=db):
            result = runner.invoke(main, ["init-db"])

        assert result.exit_code == 0, result.output
        assert "Database initialized successfully" in result.output
        assert "CREATE TABLE IF NOT EXISTS feedback" in db.execute.call_args[0][0]
        assert "feedback records: 3" in result.output


class TestServe:
    def test_runs_uvicorn_factory(self, runner):
        with patch("uvicorn.run") as run:
            result = runner.invoke(main, ["serve", "--port", "5050"])

        assert result.exit_code == 0, result.output
        args, kwargs = run.call_args
        assert args[0] == "feedback_hub.api.app:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 5050

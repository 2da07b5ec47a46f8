"""
Command-line interface for feedback-hub.

Runs the API server, prepares the database, and gives a terminal view
of the feedback page backed by a running server.

Usage:
    feedback-hub serve       # Run the API server
    feedback-hub init-db     # Create the feedback table
    feedback-hub health      # Check database connectivity
    feedback-hub submit ...  # Submit feedback through the form
    feedback-hub list        # Show (and optionally export) feedback
    feedback-hub analytics   # Show the analytics cards
"""

import asyncio
import os
import sys

import click

from feedback_hub.client.api import FeedbackAPI
from feedback_hub.config.settings import get_settings
from feedback_hub.observability.logging import get_logger, setup_logging
from feedback_hub.ui.analytics import AnalyticsCards
from feedback_hub.ui.form import FeedbackForm
from feedback_hub.ui.table import EMPTY_EXPORT_MESSAGE, FeedbackTable


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Feedback Hub - collect feedback and report ratings."""
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        get_settings.cache_clear()

    setup_logging()


@main.command()
@click.option("--host", default=None, help="API server host")
@click.option("--port", default=None, type=int, help="API server port")
@click.option("--reload", is_flag=True, help="Enable auto-reload (dev only)")
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the feedback API server."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    click.echo(f"Starting API server on {host}:{port}")
    click.echo(f"API docs available on http://localhost:{port}/docs")

    uvicorn.run(
        "feedback_hub.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


@main.command("init-db")
def init_db() -> None:
    """Initialize the database schema."""
    from feedback_hub.feedback.repository import FeedbackRepository
    from feedback_hub.storage.database import Database

    async def run():
        async with Database() as db:
            repo = FeedbackRepository(db)
            await repo.create_tables()
            existing = await repo.count()
        click.echo("Database initialized successfully")
        click.echo(f"  feedback records: {existing}")

    asyncio.run(run())


@main.command()
def health() -> None:
    """Check database connectivity."""
    from feedback_hub.storage.database import Database

    logger = get_logger(__name__)

    async def check() -> bool:
        try:
            async with Database() as db:
                return await db.health_check()
        except Exception as e:
            logger.error("Postgres health check failed", error=str(e))
            return False

    healthy = asyncio.run(check())
    icon = "✓" if healthy else "✗"
    color = "green" if healthy else "red"
    click.echo(click.style(f"  {icon} postgres: {healthy}", fg=color))
    sys.exit(0 if healthy else 1)


@main.command()
@click.option("--name", required=True, help="Your name")
@click.option("--email", required=True, help="Your email address")
@click.option("--message", required=True, help="Feedback text")
@click.option("--rating", required=True, type=int, help="Star rating, 1-5")
@click.option("--api-url", default=None, help="Feedback API root URL")
def submit(name: str, email: str, message: str, rating: int, api_url: str | None) -> None:
    """Submit feedback through the form."""

    async def run() -> int:
        async with FeedbackAPI(api_url) as api:
            form = FeedbackForm(api)
            form.set_field("name", name)
            form.set_field("email", email)
            form.set_field("message", message)
            form.set_rating(rating)

            result = await form.submit()
            if result is None:
                for field, error in form.errors.items():
                    click.echo(click.style(f"  {field}: {error}", fg="red"), err=True)
                return 2
            if not result.success:
                click.echo(click.style(f"Oops... {result.message}", fg="red"), err=True)
                return 1

            click.echo(click.style(f"Thank you! {result.message}", fg="green"))
            click.echo(f"  id: {result.data.feedback_id}")
            return 0

    sys.exit(asyncio.run(run()))


@main.command("list")
@click.option("--search", default="", help="Filter by name (case-insensitive)")
@click.option("--export", "export_path", default=None, type=click.Path(dir_okay=False), help="Write the filtered rows to a CSV file")
@click.option("--api-url", default=None, help="Feedback API root URL")
def list_feedback(search: str, export_path: str | None, api_url: str | None) -> None:
    """Show all feedback, newest first."""

    async def run() -> None:
        async with FeedbackAPI(api_url) as api:
            table = FeedbackTable(api)
            await table.refresh()
            table.search_term = search

            click.echo(f"All Feedbacks ({len(table.filtered)}/{len(table.feedbacks)})")
            click.echo("-" * 40)
            for row in table.render_rows():
                click.echo(f"  {row}")

            if export_path is not None:
                written = table.export_csv(export_path)
                if written is None:
                    click.echo(click.style(EMPTY_EXPORT_MESSAGE, fg="yellow"))
                else:
                    click.echo(f"Exported {len(table.filtered)} rows to {written}")

    asyncio.run(run())


@main.command()
@click.option("--api-url", default=None, help="Feedback API root URL")
def analytics(api_url: str | None) -> None:
    """Show total, average rating, and positive vs negative counts."""

    async def run() -> None:
        async with FeedbackAPI(api_url) as api:
            cards = AnalyticsCards(api)
            await cards.refresh()
            for title, value in cards.render():
                click.echo(f"{title:<22} {value}")

    asyncio.run(run())


if __name__ == "__main__":
    main()

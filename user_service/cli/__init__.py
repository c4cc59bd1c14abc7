"""Command line interface for the user service."""

import typer
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from user_service.app.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="User service management commands",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command("init-db")
def init_db_command(
    drop: bool = typer.Option(False, "--drop", help="Drop existing tables first"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
) -> None:
    """Create the user tables in the configured database."""
    from user_service.app.runtime.init_db import init_db

    if drop and not yes and not Confirm.ask(
        "[yellow]Drop all user tables? Every stored account will be lost.[/yellow]"
    ):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=1)

    try:
        init_db(drop_existing=drop)
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]✅ Database initialized[/green]")


@app.command("check-db")
def check_db_command() -> None:
    """Check that the configured database answers queries."""
    from user_service.app.core.services import DbSessionService

    config = get_config()
    database_service = DbSessionService()
    try:
        healthy = database_service.health_check()
        dialect = database_service.engine.dialect.name
    finally:
        database_service.dispose()

    table = Table(title="Database")
    table.add_column("Environment", style="cyan")
    table.add_column("Dialect", style="blue")
    table.add_column("Status", style="green" if healthy else "red")
    table.add_row(config.app.environment, dialect, "healthy" if healthy else "unhealthy")
    console.print(table)

    if not healthy:
        raise typer.Exit(code=1)


@app.command("serve")
def serve_command(
    host: str | None = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port (default from config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "user_service.app.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

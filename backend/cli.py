"""
CRUD API CLI.

Command-line interface for common operations.
"""

import sys

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="crud-api",
    help="CRUD REST API management CLI",
    add_completion=False,
)
console = Console()


# =============================================================================
# Database Commands
# =============================================================================

@app.command()
def db_init():
    """Create database tables."""
    from rest_api.models import Base
    from shared.infrastructure.db import engine

    console.print(f"[blue]Creating tables on: {engine.url.render_as_string(hide_password=True)}[/blue]")

    Base.metadata.create_all(bind=engine)

    table = Table(title="Tables")
    table.add_column("Name", style="cyan")
    for name in sorted(Base.metadata.tables):
        table.add_row(name)
    console.print(table)
    console.print("[green]✓ Tables created[/green]")


@app.command()
def db_seed(
    force: bool = typer.Option(False, "--force", "-f", help="Allow seeding in production"),
):
    """Seed empty tables with sample data."""
    from rest_api.models import Base
    from rest_api.seed import seed
    from shared.config.settings import settings
    from shared.infrastructure.db import engine, get_db_context

    if settings.environment == "production" and not force:
        console.print("[red]Cannot seed production without --force[/red]")
        raise typer.Exit(1)

    Base.metadata.create_all(bind=engine)
    with get_db_context() as db:
        inserted = seed(db)

    table = Table(title="Seed")
    table.add_column("Entity", style="cyan")
    table.add_column("Inserted", style="green")
    for entity, count in inserted.items():
        table.add_row(entity, str(count))
    console.print(table)


# =============================================================================
# Inspection Commands
# =============================================================================

@app.command()
def routes():
    """List the HTTP routes exposed by the API."""
    from rest_api.main import app as api

    table = Table(title="Routes")
    table.add_column("Method", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Summary", style="yellow")

    # OpenAPI paths include the routes of nested routers
    for path, operations in api.openapi()["paths"].items():
        for method, operation in operations.items():
            table.add_row(method.upper(), path, operation.get("summary", ""))

    console.print(table)


@app.command()
def version():
    """Show version information."""
    from rest_api.main import app as api

    table = Table(title="CRUD API Version")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")

    table.add_row("API", api.version)
    table.add_row("Python", sys.version.split()[0])

    console.print(table)


# =============================================================================
# Server
# =============================================================================

@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(None, help="Port (defaults to REST_API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API with uvicorn."""
    import uvicorn

    from shared.config.settings import settings

    uvicorn.run(
        "rest_api.main:app",
        host=host,
        port=port or settings.rest_api_port,
        reload=reload,
    )


if __name__ == "__main__":
    app()

"""Command line interface: run the server, manage tables, print the schema."""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel

console = Console()

app = typer.Typer(
    help="📚 Bookshelf GraphQL API",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
    log_level: str = typer.Option(
        "info", help="Log level (debug, info, warning, error, critical)"
    ),
) -> None:
    """
    🚀 Start the API server with uvicorn.
    """
    import uvicorn

    from bookshelf.runtime.context import get_config

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    console.print(
        Panel.fit("[bold green]Starting Bookshelf API[/bold green]", border_style="green")
    )
    console.print(
        f"[blue]GraphQL endpoint:[/blue] http://{host}:{port}{config.graphql.path}"
    )
    uvicorn.run(
        "bookshelf.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        access_log=False,
    )


@app.command(name="init-db")
def init_db(
    drop: bool = typer.Option(
        False, "--drop", help="Drop existing tables before creating them"
    ),
) -> None:
    """
    🗄️  Create the author and book tables.
    """
    from bookshelf.core.services.database.db_manage import DbManageService
    from bookshelf.core.services.database.db_session import DbSessionService

    async def _run() -> None:
        database = DbSessionService()
        manager = DbManageService(database)
        try:
            if drop:
                await manager.drop_all()
            await manager.create_all()
        finally:
            await database.dispose()

    asyncio.run(_run())
    console.print("[green]✅ Database tables are ready[/green]")


@app.command()
def schema() -> None:
    """
    📄 Print the GraphQL schema (SDL).
    """
    from bookshelf.api.graphql.schema import print_schema

    typer.echo(print_schema())


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

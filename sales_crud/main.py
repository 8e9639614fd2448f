from __future__ import annotations

import sys

import typer

from sales_crud.config import get_settings
from sales_crud.dispatcher import MenuDispatcher
from sales_crud.errors import CrudFatalError
from sales_crud.infrastructure.db_factory import get_collection
from sales_crud.operations import available_operations
from sales_crud.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(help="Sales CRUD CLI.", add_completion=False)


@app.callback(invoke_without_command=True)
def menu(ctx: typer.Context) -> None:
    """
    Connect to the sales collection and run the interactive CRUD menu.
    """
    if ctx.invoked_subcommand is not None:
        return
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    try:
        collection = get_collection(settings=settings)
        MenuDispatcher(collection).run(repeat=settings.menu_repeat)
    except CrudFatalError as exc:
        log.error("Fatal error", extra={"error": str(exc), "error_type": type(exc).__name__})
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    user = settings.mongo_user or "<none>"
    password = "***" if settings.mongo_password else "<none>"
    source = "MONGO_URI" if settings.mongo_uri else "components"
    typer.echo(
        f"DB={user}:{password}@{settings.mongo_host}:{settings.mongo_port}/{settings.mongo_db} "
        f"(uri from {source}) | collection={settings.mongo_collection} "
        f"timeout_ms={settings.mongo_timeout_ms} repeat={settings.menu_repeat}"
    )
    typer.echo("Operations: " + ", ".join(available_operations()))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

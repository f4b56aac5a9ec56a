"""CLI interface for provisioner."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from provisioner.config import load_config, merge_cli_overrides
from provisioner.content.models import ContentType
from provisioner.content.store import ContentStore
from provisioner.errors import ContentStoreError, ProvisionError
from provisioner.provision.resolver import ProvisionResolver

app = typer.Typer(
    name="provisioner",
    help="Resolve stored content into signed, type-specific provision payloads.",
)

console = Console()
err_console = Console(stderr=True)

EXIT_CODES: dict[str, int] = {
    "invalid_input": 2,
    "invalid_content": 2,
    "unsupported_type": 2,
    "not_found": 4,
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from provisioner import __version__

        console.print(f"provisioner {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """Provisioner - signed delivery payloads for stored content."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def provision(
    content_id: Annotated[str, typer.Argument(help="Id of the content to provision.")],
    store_dir: Annotated[
        Optional[Path],
        typer.Option("--store", "-s", help="Directory holding the content store."),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .provisioner.toml file."),
    ] = None,
    expires: Annotated[
        Optional[int],
        typer.Option("--expires", help="Signed url lifetime in seconds.", min=1),
    ] = None,
) -> None:
    """Print the provision payload for CONTENT_ID as JSON."""
    config = merge_cli_overrides(
        load_config(config_path),
        store_directory=str(store_dir) if store_dir is not None else None,
        link_expiration_seconds=expires,
    )
    store = ContentStore(Path(config.store.directory))
    resolver = ProvisionResolver.from_config(store, config)

    try:
        payload = resolver.provision(content_id)
    except ProvisionError as exc:
        err_console.print(f"[red]{exc.kind}:[/red] {exc.message}")
        raise typer.Exit(EXIT_CODES.get(exc.kind, 1)) from exc

    typer.echo(json.dumps(payload.model_dump(mode="json"), indent=2))


@app.command("list")
def list_cmd(
    store_dir: Annotated[
        Optional[Path],
        typer.Option("--store", "-s", help="Directory holding the content store."),
    ] = None,
    content_type: Annotated[
        Optional[ContentType],
        typer.Option("--type", "-t", help="Only show records of this type."),
    ] = None,
    include_deleted: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include soft-deleted records."),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .provisioner.toml file."),
    ] = None,
) -> None:
    """List records in the content store."""
    config = merge_cli_overrides(
        load_config(config_path),
        store_directory=str(store_dir) if store_dir is not None else None,
    )
    store = ContentStore(Path(config.store.directory))

    try:
        records = store.list(content_type=content_type, include_deleted=include_deleted)
    except ContentStoreError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    if not records:
        console.print("[yellow]No content records found.[/yellow]")
        return

    table = Table(title="Content")
    table.add_column("ID")
    table.add_column("Type")
    table.add_column("Title")
    table.add_column("Likes", justify="right")
    table.add_column("Deleted")
    for record in records:
        table.add_row(
            record.id,
            record.type or "-",
            record.title or "",
            str(record.total_likes),
            "yes" if record.is_deleted else "",
        )
    console.print(table)

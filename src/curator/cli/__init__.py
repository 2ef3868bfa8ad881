"""Curator command-line interface."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from curator import __version__

app = typer.Typer(
    name="curator",
    help="Curate content items into an ordered set of shadow items.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"curator version {__version__}")
        raise typer.Exit()


def _get_registry(config: str | None):
    """Build the module registry, applying the settings file if any."""
    from curator.config import build_registry

    config_path = Path(config).expanduser().resolve() if config else None
    try:
        return build_registry(config_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _get_engine(config: str | None):
    """Build an engine over the default SQLite stores."""
    from curator.core import CurationEngine
    from curator.core.stores import (
        SQLiteContentStore,
        SQLiteMetadataStore,
        SQLiteTaxonomyStore,
    )

    return CurationEngine(
        registry=_get_registry(config),
        content_store=SQLiteContentStore(),
        taxonomy_store=SQLiteTaxonomyStore(),
        metadata_store=SQLiteMetadataStore(),
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Curator: keep curated shadow items in step with their sources."""
    pass


@app.command()
def setup(
    config: str = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """Create the classification terms for all enabled modules."""
    engine = _get_engine(config)
    created = engine.setup_default_terms()

    if not created:
        console.print("[dim]All classification terms already exist.[/dim]")
        return

    for term in created:
        console.print(f"[green]Created term:[/green] {term.label}")


@app.command()
def modules(
    config: str = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """Show the configured curation modules."""
    registry = _get_registry(config)

    table = Table(title="Curation Modules")
    table.add_column("Module", style="cyan")
    table.add_column("Label", style="bold")
    table.add_column("Term", style="magenta")
    table.add_column("Enabled", justify="center")

    for module in registry.get_modules().values():
        table.add_row(
            module.id,
            module.display_label,
            module.classification_label,
            "[green]yes[/green]" if module.enabled else "[dim]no[/dim]",
        )

    console.print(table)

    kinds = registry.get_eligible_content_kinds()
    console.print(f"[dim]Content kinds: {', '.join(kinds) if kinds else '(none)'}[/dim]")
    console.print(f"[dim]Default status: {registry.get_default_status()}[/dim]")


@app.command()
def add(
    title: str = typer.Argument(..., help="Item title"),
    kind: str = typer.Option("post", "--kind", "-k", help="Content kind"),
    status: str = typer.Option("draft", "--status", "-s", help="Initial status"),
) -> None:
    """Add a source content item."""
    from curator.core.stores import SQLiteContentStore

    store = SQLiteContentStore()
    item_id = store.create_item(kind=kind, title=title, status=status, comments_open=True)

    if item_id is None:
        console.print("[red]Error:[/red] Content store rejected the item")
        raise typer.Exit(1)

    console.print(f"[green]Added:[/green] {title} [dim]({kind} {item_id})[/dim]")


@app.command()
def curate(
    item_id: str = typer.Argument(..., help="Source item ID"),
    module: str = typer.Option(None, "--module", "-m", help="Module to curate with (default: active module)"),
    title: str = typer.Option(None, "--title", "-t", help="Title for the curated item (default: source title)"),
    config: str = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """Curate a source item."""
    from curator.core import format_curation_result

    engine = _get_engine(config)

    if title is None:
        item = engine.content_store.get_item(item_id)
        if not item:
            console.print(f"[red]Error:[/red] Item not found: {item_id}")
            raise typer.Exit(1)
        title = item.title

    result = engine.create(item_id, title, module or engine.registry.get_active_module())
    console.print(format_curation_result(result))

    if not result.success:
        raise typer.Exit(1)


@app.command()
def uncurate(
    item_id: str = typer.Argument(..., help="Source item ID"),
    config: str = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """Stop curating a source item and delete its curated item."""
    engine = _get_engine(config)
    curated_id = engine.get_related_id(item_id)

    engine.remove(item_id)

    if curated_id:
        console.print(f"[green]Removed:[/green] curated item {curated_id} for {item_id}")
    else:
        console.print(f"[dim]{item_id} was not curated.[/dim]")


@app.command("set-status")
def set_status(
    item_id: str = typer.Argument(..., help="Source item ID"),
    status: str = typer.Argument(..., help="New status (e.g. 'publish', 'draft')"),
    config: str = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """Change an item's status, curating or uncurating it as needed."""
    from curator.core import format_curation_result, handle_transition

    engine = _get_engine(config)
    item = engine.content_store.get_item(item_id)

    if not item:
        console.print(f"[red]Error:[/red] Item not found: {item_id}")
        raise typer.Exit(1)

    engine.content_store.update_status(item_id, status)
    console.print(f"[green]Status:[/green] {item.status} -> {status}")

    result = handle_transition(engine, item, item.status, status)
    if result is not None:
        console.print(format_curation_result(result))
        if not result.success:
            raise typer.Exit(1)


@app.command()
def related(
    item_id: str = typer.Argument(..., help="Source or curated item ID"),
    config: str = typer.Option(None, "--config", "-c", help="Settings YAML file"),
) -> None:
    """Show the item paired with a source or curated item."""
    related_id = _get_engine(config).get_related_id(item_id)

    if not related_id:
        console.print(f"[dim]No related item for {item_id}.[/dim]")
        raise typer.Exit(1)

    console.print(related_id)


@app.command("init-config")
def init_config(
    path: str = typer.Argument("curator.yaml", help="Where to write the settings file"),
) -> None:
    """Write a settings file with the default configuration."""
    from curator.config import generate_settings_template

    config_path = Path(path).expanduser().resolve()

    if config_path.exists():
        console.print(f"[yellow]Warning:[/yellow] File already exists: {config_path}")
        confirm = typer.confirm("Overwrite?")
        if not confirm:
            console.print("[dim]Cancelled[/dim]")
            raise typer.Exit(0)

    generate_settings_template(config_path)
    console.print(f"[green]Created settings file:[/green] {config_path}")


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()

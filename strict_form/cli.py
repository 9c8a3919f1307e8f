"""CLI for strict-form."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from strict_form import __version__
from strict_form.config import ConfigError, configure_logging, load_settings
from strict_form.core.factory import create_translator
from strict_form.io import read_collection
from strict_form.mapping.diff import get_extra_values, is_identical, is_same_value
from strict_form.translation.catalog import CatalogError

app = typer.Typer(
    name="strict-form",
    help="Reconcile form fields with records using per-field accessors.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"strict-form version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", envvar="STRICT_FORM_LOG_LEVEL", help="Logging level"),
    ] = "WARNING",
) -> None:
    """strict-form: reconcile form fields with records."""
    configure_logging(log_level)


def _diff_table(title: str, values: dict) -> Table:
    table = Table(title=title)
    table.add_column("Key")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(str(key), repr(value))
    return table


@app.command()
def diff(
    original_path: Annotated[
        Path,
        typer.Argument(help="JSON/YAML file with the record's current collection"),
    ],
    submitted_path: Annotated[
        Path,
        typer.Argument(help="JSON/YAML file with the submitted collection"),
    ],
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Compare non-scalar elements by identity instead of value"),
    ] = False,
) -> None:
    """Show which elements would be added and removed."""
    for path in (original_path, submitted_path):
        if not path.exists():
            console.print(f"[red]Error:[/red] File not found: {path}")
            raise typer.Exit(1)

    try:
        original = read_collection(original_path)
        submitted = read_collection(submitted_path)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    is_equal = is_identical if strict else is_same_value
    to_add = get_extra_values(original, submitted, is_equal)
    to_remove = get_extra_values(submitted, original, is_equal)

    console.print(_diff_table("Add", to_add))
    console.print(_diff_table("Remove", to_remove))

    if not to_add and not to_remove:
        console.print("[green]No changes[/green]")
    else:
        console.print(f"[bold]Summary:[/bold] {len(to_add)} to add, {len(to_remove)} to remove")


@app.command()
def translate(
    key: Annotated[str, typer.Argument(help="Message key to translate")],
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", envvar="STRICT_FORM_CONFIG", help="Config file path"),
    ] = None,
    locale: Annotated[
        str | None,
        typer.Option("--locale", "-l", help="Override the configured locale"),
    ] = None,
) -> None:
    """Resolve a message key through the configured catalog."""
    try:
        settings = load_settings(config)
        if locale:
            settings = settings.model_copy(update={"locale": locale})
        translator = create_translator(settings)
    except (ConfigError, CatalogError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(translator.translate(key))


if __name__ == "__main__":
    app()

"""Main CLI application."""

import typer
from loguru import logger
from rich.table import Table

from injection.cli.utils import console, load_target, run_composition_root
from injection.registry import describe_type, get_registry

app = typer.Typer(
    name="injection-cli",
    help="Injection CLI - Inspect and check dependency registrations",
    no_args_is_help=True,
)

ROOT_ARGUMENT = typer.Argument(
    ...,
    help="Composition root to run, as 'module:callable'",
    metavar="<module:callable>",
)  # fmt: skip
REQUIRE_OPTION = typer.Option(
    [],
    "--require",
    "-r",
    help="Type that must be resolvable afterwards, as 'module:Type' (repeatable)",
    metavar="<module:Type>",
)  # fmt: skip


@app.command()
def inspect(root: str = ROOT_ARGUMENT) -> None:
    """Run a composition root and list the registered dependencies."""
    registry = get_registry()
    run_composition_root(load_target(root, "Composition root"), registry)

    entries = registry.snapshot()
    logger.debug(f"Composition root {root} registered {len(entries)} dependencies")

    table = Table(title=f"Dependencies registered by {root}")
    table.add_column("Type key", style="cyan")
    table.add_column("Value type")
    for type_key, value in sorted(entries.items(), key=lambda item: describe_type(item[0])):
        table.add_row(describe_type(type_key), describe_type(type(value)))
    console.print(table)


@app.command()
def check(root: str = ROOT_ARGUMENT, require: list[str] = REQUIRE_OPTION) -> None:
    """Run a composition root and verify required types are registered."""
    registry = get_registry()
    run_composition_root(load_target(root, "Composition root"), registry)

    missing = []
    for target in require:
        dependency_type = load_target(target, "Required type")
        if registry.is_registered(dependency_type):
            console.print(f"[green]OK[/green] {describe_type(dependency_type)}")
        else:
            console.print(f"[red]MISSING[/red] {describe_type(dependency_type)}")
            missing.append(target)

    if missing:
        logger.error(f"{len(missing)} required dependencies are not registered")
        raise typer.Exit(1)

    console.print(f"[green]All {len(require)} required dependencies are registered[/green]")

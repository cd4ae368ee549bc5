"""CLI utility functions shared across commands.

This module contains generic CLI utilities for:
- Resolving ``module:attribute`` targets
- Running composition roots
- Console output
"""

import importlib
import inspect
from collections.abc import Callable
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from injection.registry import DependencyRegistry

console = Console()


def load_target(target: str, description: str = "Target") -> Any:
    """Import the object named by a ``module:attribute`` string.

    Args:
        target: Import path such as ``myapp.composition:configure``. The
            attribute part may be dotted (``module:Outer.Inner``).
        description: Human-readable description for error messages

    Returns:
        The imported object

    Raises:
        typer.Exit: If the target is malformed or cannot be imported
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        console.print(f"[red]Error: {description} must look like 'module:attribute', got: {target}[/red]")
        raise typer.Exit(1)

    try:
        obj: Any = importlib.import_module(module_name)
    except Exception as e:
        console.print(f"[red]Error: Cannot import module {module_name}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            console.print(f"[red]Error: {description} {target} not found: {escape(str(e))}[/red]")
            raise typer.Exit(1) from e
    return obj


def run_composition_root(root: Callable[..., Any], registry: DependencyRegistry) -> None:
    """Run a composition root against a registry.

    Composition roots that accept a positional parameter receive the
    registry; other roots are called without arguments and are expected to
    use the process-wide functions.

    Args:
        root: The composition root callable
        registry: Registry handed to roots that accept one

    Raises:
        typer.Exit: If the target is not callable or raises
    """
    if not callable(root):
        console.print(f"[red]Error: Composition root is not callable: {escape(repr(root))}[/red]")
        raise typer.Exit(1)

    args = (registry,) if _accepts_positional(root) else ()
    try:
        root(*args)
    except Exception as e:
        console.print(f"[red]Error: Composition root failed: {type(e).__name__}: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


def _accepts_positional(root: Callable[..., Any]) -> bool:
    try:
        parameters = inspect.signature(root).parameters.values()
    except (TypeError, ValueError):
        # No introspectable signature (some builtins)
        return False
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.VAR_POSITIONAL)
    return any(p.kind in positional for p in parameters)

"""CLI entry point for depmap."""

from __future__ import annotations

from pathlib import Path

import click

from .console import step
from .errors import CyclicDependencyError
from .graph import process
from .toml import get_manifest, load_pyproject
from .workspace import build_order, discover_packages


@click.group()
@click.version_option(package_name="depmap")
def cli() -> None:
    """Dependency-first ordering for lazily discovered dependency graphs."""


@cli.command()
@click.argument(
    "manifest",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default="pyproject.toml",
)
@click.option(
    "-r",
    "--root",
    "roots",
    multiple=True,
    help="Item to start from (repeatable). Defaults to [tool.depmap].roots.",
)
@click.option("-v", "--verbose", is_flag=True, help="Show each item as it is expanded.")
def order(manifest: Path, roots: tuple[str, ...], verbose: bool) -> None:
    """Print the items of a [tool.depmap] manifest, dependencies first."""
    table = get_manifest(load_pyproject(manifest))

    def producer(item: str) -> list[str]:
        deps = table.dependencies_of(item)
        if verbose:
            click.echo(f"  {item} → [{', '.join(deps)}]", err=True)
        return deps

    try:
        result = process(list(roots) or table.initial(), producer)
    except CyclicDependencyError as exc:
        raise click.ClickException(str(exc)) from exc

    for item in result:
        click.echo(item)


@cli.command()
@click.option(
    "-p",
    "--package",
    "targets",
    multiple=True,
    help="Only order this package and its dependencies (repeatable).",
)
@click.option("-v", "--verbose", is_flag=True, help="Show each package as it is expanded.")
def workspace(targets: tuple[str, ...], verbose: bool) -> None:
    """Print the build order of the uv workspace in the current directory."""
    step("Discovering workspace packages")
    packages = discover_packages(Path.cwd())
    for name, info in packages.items():
        deps = f" → [{', '.join(info.deps)}]" if info.deps else ""
        click.echo(f"  {name} {info.version} ({info.path}){deps}", err=True)

    def show(name: str, deps: list[str]) -> None:
        click.echo(f"  {name} → [{', '.join(deps)}]", err=True)

    step("Ordering packages")
    try:
        result = build_order(
            packages, targets or None, on_expand=show if verbose else None
        )
    except KeyError as exc:
        raise click.ClickException(exc.args[0]) from exc
    except CyclicDependencyError as exc:
        raise click.ClickException(str(exc)) from exc

    for name in result:
        click.echo(name)

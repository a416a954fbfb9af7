"""CLI entry point: depaudit.

Subcommands:
    depaudit check [-p PATH] [--json]   # missing / not installed / unused report
    depaudit list  [-p PATH] [--json]   # declared dependencies of the manifest
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click

from depaudit.checker import analyze_dependencies, list_declared
from depaudit.config import AuditConfig
from depaudit.core.logging import setup_logging
from depaudit.exceptions import AuditError
from depaudit.models import DependencyResult


def _print_result(result: DependencyResult) -> None:
    if result.missing:
        click.echo("Missing dependencies:")
        for pkg in result.missing:
            click.echo(f"  - {pkg}")
        click.echo()

    if result.not_installed:
        click.echo("Not installed dependencies:")
        for pkg in result.not_installed:
            click.echo(f"  - {pkg}")
        click.echo()

    if result.unused:
        click.echo("Unused dependencies:")
        for u in result.unused:
            click.echo(f"  - {u.package}")
            if u.locations:
                click.echo(f"    Found in: {', '.join(str(loc) for loc in u.locations)}")
        click.echo()

    if result.issue_count == 0:
        click.echo("All dependencies are properly configured.")
    else:
        click.echo(f"Found {result.issue_count} issue(s).")


def _fail(exc: AuditError) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """depaudit: find missing, unused and uninstalled dependencies."""
    setup_logging("DEBUG" if verbose else None)


@main.command("check")
@click.option(
    "-p", "--path", "path", default=".", type=click.Path(exists=True, file_okay=False),
    help="Workspace root to scan (default: current directory)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--ignore", "ignore", multiple=True, help="Extra ignore glob (repeatable)")
def check(path: str, as_json: bool, ignore: tuple[str, ...]) -> None:
    """Scan the project for missing, uninstalled and unused dependencies."""
    root = Path(path).resolve()
    config = AuditConfig.from_env(extra_ignore=ignore)
    try:
        result = analyze_dependencies(root, config)
    except AuditError as exc:
        _fail(exc)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return
    _print_result(result)


@main.command("list")
@click.option(
    "-p", "--path", "path", default=".", type=click.Path(exists=True, file_okay=False),
    help="Workspace root (default: current directory)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_cmd(path: str, as_json: bool) -> None:
    """List the dependencies declared by the project's manifest."""
    root = Path(path).resolve()
    try:
        manifest, info = list_declared(root, AuditConfig.from_env())
    except AuditError as exc:
        _fail(exc)

    rel = manifest.relative_to(root).as_posix()
    if as_json:
        click.echo(
            json.dumps(
                {
                    "manifest": rel,
                    "dependencies": info.dependencies,
                    "dev_dependencies": info.dev_dependencies,
                },
                indent=2,
            )
        )
        return

    click.echo(rel)
    for title, section in (("dependencies", info.dependencies), ("dev", info.dev_dependencies)):
        if not section:
            continue
        click.echo(f"  [{title}]")
        for name, version in section.items():
            click.echo(f"    {name} {version}")


if __name__ == "__main__":
    main()

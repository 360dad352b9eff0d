"""CLI entry point: install, example, init."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from .commands import EXAMPLE_CONFIG, init_project, install_hooks
from .core.config import load_config
from .core.errors import HookmanError
from .core.log import setup_logging

console = Console()
err_console = Console(stderr=True)


def _fail(error: HookmanError) -> None:
    err_console.print(f"error: {escape(str(error))}", style="bold", soft_wrap=True)
    sys.exit(1)


# ── CLI entry point ─────────────────────────────────────────────────


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """hookman: generate git hook scripts from hookman.toml."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.option("--config", "-c", "config_path", default=None, help="Local config file")
@click.option("--no-global", is_flag=True, help="Ignore the per-user global config")
@click.option(
    "--hook-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Write scripts here instead of asking git",
)
@click.option("--dry-run", "-n", is_flag=True, help="Print scripts instead of writing them")
@click.pass_context
def install(
    ctx: click.Context,
    config_path: str | None,
    no_global: bool,
    hook_dir: Path | None,
    dry_run: bool,
):
    """Install git hooks."""
    config = load_config(
        config_path=config_path, no_global=no_global, verbose=ctx.obj.get("verbose", False)
    )
    setup_logging(config.verbose)

    try:
        result = install_hooks(config, hook_dir=hook_dir, dry_run=dry_run)
    except HookmanError as e:
        _fail(e)
        return

    if dry_run:
        for stage, script in result.scripts.items():
            console.print(f"would install {stage} script:", style="dim")
            click.echo(script)
        return

    if not result.scripts:
        console.print("no hooks configured", style="dim")
        return
    for path in result.written:
        console.print(f"installed {escape(str(path))}", soft_wrap=True)


@cli.command()
def example():
    """Print an example configuration file."""
    click.echo(EXAMPLE_CONFIG, nl=False)


@cli.command()
def init():
    """Write an example hookman.toml to the current directory."""
    created = init_project()
    if not created:
        console.print("hookman.toml already exists", style="dim")
    for path in created:
        console.print(f"created {escape(path)}")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()

"""
wsdlgen — CLI entrypoint.

Usage:
    wsdlgen --help
    wsdlgen tasks
    wsdlgen args axis2Wsdl2javaOrders
    wsdlgen command axis2Wsdl2javaOrders
    wsdlgen config check
"""

from __future__ import annotations

import json
import os
import shlex
import sys
from pathlib import Path

import click

from wsdlgen import __version__
from wsdlgen.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="wsdlgen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to wsdl.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """wsdlgen — compile Axis WSDL2Java generator command lines."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def tasks(ctx: click.Context, as_json: bool) -> None:
    """List configured generator tasks."""
    from wsdlgen.core.use_cases.tasks import list_tasks

    result = list_tasks(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not result.tasks:
        click.secho("No generator tasks configured.", fg="yellow")
        return

    click.secho(f"\n📋 Tasks: {len(result.tasks)}", fg="cyan", bold=True)
    for task in result.tasks:
        click.echo(f"   • {task.task_name} [{task.family}]")
        if not ctx.obj.get("quiet"):
            click.echo(f"       wsdl:   {task.wsdl_file or '-'}")
            click.echo(f"       output: {task.output_dir}")
    click.echo()


@cli.command()
@click.argument("task_name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def args(ctx: click.Context, task_name: str, as_json: bool) -> None:
    """Print the generator arguments of TASK_NAME, one per line."""
    from wsdlgen.core.use_cases.prepare import prepare_task

    result = prepare_task(task_name, config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(1 if result.error else 0)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.invocation is not None  # guaranteed after error check above
    for arg in result.invocation.args:
        click.echo(arg)
    _echo_warnings(ctx, result.warnings)


@cli.command()
@click.argument("task_name")
@click.option("--java", "java", default="java", show_default=True, help="Java launcher.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def command(ctx: click.Context, task_name: str, java: str, as_json: bool) -> None:
    """Print the full generator command line of TASK_NAME."""
    from wsdlgen.core.use_cases.prepare import prepare_task

    result = prepare_task(task_name, config_path=ctx.obj.get("config_path"))

    if result.error:
        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2))
        else:
            click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.invocation is not None  # guaranteed after error check above
    cmd = result.invocation.command(java=java)

    if as_json:
        data = result.to_dict()
        data["command"] = cmd
        click.echo(json.dumps(data, indent=2))
        return

    click.echo(shlex.join(cmd))
    _echo_warnings(ctx, result.warnings)


def _echo_warnings(ctx: click.Context, warnings: list[str]) -> None:
    """Warnings go to stderr so stdout stays machine-readable."""
    if ctx.obj.get("quiet"):
        return
    for warn in warnings:
        click.secho(f"⚠️  {warn}", fg="yellow", err=True)


@cli.group()
def config() -> None:
    """Generator configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate wsdl.yml configuration."""
    from wsdlgen.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.extension is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Axis1 tasks: {len(result.extension.axis1)}")
        click.echo(f"   Axis2 tasks: {len(result.extension.axis2)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


if __name__ == "__main__":
    cli()

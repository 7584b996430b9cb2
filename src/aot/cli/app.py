# src/aot/cli/app.py
"""Command-line interface for the Atom of Thoughts engine.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Builds settings (flags > env vars > aot.yaml > defaults)
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import json
import logging

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from aot import __version__
from aot.commands import config_cmd, replay
from aot.commands.base import ReplayStep
from aot.config import build_settings, load_config
from aot.render import render_atom, render_payload
from aot.settings import Settings
from aot.tools import Toolbox, ToolResponse

app = typer.Typer(
    name="aot",
    help="Atom of Thoughts - decompose, verify and contract atomic units of reasoning.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"aot {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log engine activity to stderr.",
    ),
) -> None:
    """Atom of Thoughts - structured reasoning engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_settings(config_file: str | None, max_depth: int | None = None) -> Settings:
    """Resolve settings or exit with an error message."""
    try:
        return build_settings(load_config(config_file), max_depth=max_depth)
    except (OSError, ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error: Failed to load configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


@app.command()
def serve(
    max_depth: int = typer.Option(
        None,
        "--max-depth",
        "-d",
        min=1,
        help="Maximum decomposition depth for the full engine.",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not render ingested atoms on stderr.",
    ),
) -> None:
    """Run the MCP server on stdio."""
    # Imported here so the other commands do not pay for the MCP SDK import
    from aot.server import serve as run_server

    settings = _load_settings(config_file, max_depth=max_depth)
    if quiet:
        settings = settings.model_copy(update={"render_atoms": False})
    run_server(settings=settings)


@app.command()
def tools() -> None:
    """List the tools exposed by the server."""
    table = Table(title="Atom of Thoughts Tools")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Required", style="green")
    table.add_column("Description", style="dim")

    for tool in Toolbox.create().list_tools():
        summary = tool["description"].splitlines()[0]
        required = ", ".join(tool["inputSchema"].get("required", []))
        table.add_row(tool["name"], required, summary)

    console.print(table)


@app.command("replay")
def replay_cmd(
    script: str = typer.Argument(..., help="JSON or YAML list of {tool, arguments} steps"),
    max_depth: int = typer.Option(
        None,
        "--max-depth",
        "-d",
        min=1,
        help="Maximum decomposition depth for the full engine.",
    ),
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print raw JSON payloads instead of rendered atoms.",
    ),
) -> None:
    """Replay a scripted session of tool calls against fresh engines."""
    settings = _load_settings(config_file, max_depth=max_depth)

    def on_atom(response: ToolResponse) -> None:
        if not plain and response.atom is not None:
            console.print(render_atom(response.atom, response.max_depth))

    def on_step(step: ReplayStep) -> None:
        if plain:
            console.print(f"# {step.index} {step.tool}")
            console.print(step.text, markup=False, highlight=False, soft_wrap=True)
            return
        if step.payload is not None:
            console.print(render_payload(step.payload))
        else:
            console.print(f"[red]✗ {escape(step.text)}[/red]")

    result = replay.replay(script, settings=settings, on_atom=on_atom, on_step=on_step)

    if not result.steps and not result.success:
        console.print(f"[red]Error: {escape(result.error or '')}[/red]")
        raise typer.Exit(1)

    if plain:
        console.print(json.dumps({"steps": len(result.steps), "failed": result.steps_failed}))
    else:
        console.print(f"\n[dim]{len(result.steps)} steps, {result.steps_failed} failed[/dim]")
    if not result.success:
        raise typer.Exit(1)


@app.command()
def config_cmd_handler(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file",
    ),
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Atom of Thoughts Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]Warning: {warning}[/yellow]")

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")


config_cmd_handler.__name__ = "config"

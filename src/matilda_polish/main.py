#!/usr/bin/env python3
"""
MATILDA POLISH - Turn raw transcripts into polished, context-appropriate text
"""

import json as jsonlib
import sys

import rich_click as click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__, app_hooks
from .errors import PolishError
from .schemas import ErrorResponse

# Configure rich-click to enable markup
click.rich_click.USE_RICH_MARKUP = True

# Dracula theme colors
click.rich_click.STYLE_OPTION = "#ff79c6"      # Dracula Pink - for option flags
click.rich_click.STYLE_ARGUMENT = "#8be9fd"    # Dracula Cyan - for argument types
click.rich_click.STYLE_COMMAND = "#50fa7b"     # Dracula Green - for subcommands
click.rich_click.STYLE_USAGE = "#bd93f9"       # Dracula Purple - for "Usage:" line
click.rich_click.STYLE_HELPTEXT = "#b3b8c0"    # Light gray - for help descriptions

DOCUMENT_TYPE_CHOICES = ["email", "message", "document", "social", "code", "search", "searchQuery", "unknown"]

console = Console()
err_console = Console(stderr=True)


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read()
    return text


def _fail(message: str, as_json: bool = False, error: Exception | None = None) -> None:
    if as_json:
        details = {"error_type": type(error).__name__} if error is not None else None
        _emit_json(ErrorResponse(error=message, details=details).model_dump())
    else:
        err_console.print(f"[red]Error: {message}[/red]")
    sys.exit(1)


def _emit_json(payload: dict) -> None:
    click.echo(jsonlib.dumps(payload, indent=2, ensure_ascii=False))


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="MATILDA POLISH")
def cli():
    """✨ [bold cyan]MATILDA POLISH[/bold cyan] - Turn raw speech-to-text output into polished writing

    \b
    Classifies a transcript (email, message, document, social, code, search)
    and rewrites it through self-correction removal, filler cleanup,
    punctuation and type-specific formatting.

    \b
    [bold yellow]🎯 Quick Start:[/bold yellow]
    \b
      [green]matilda-polish enhance "um so can you send me the report"[/green]
      [green]matilda-polish classify "hey are you coming tonight"[/green]
      [green]matilda-polish parse-command "BV, draft a tweet about launch day"[/green]
      [green]echo "hi sam thanks for lunch" | matilda-polish enhance -[/green]
    """


@cli.command()
@click.argument("text")
@click.option("--type", "doc_type", type=click.Choice(DOCUMENT_TYPE_CHOICES, case_sensitive=False),
              help=" 📄 Document type (auto-detected when omitted)")
@click.option("--no-learning", is_flag=True, help=" 🧠 Skip learned patterns")
@click.option("--cloud", is_flag=True, help=" ☁️  Request a cloud rewrite when configured")
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON format")
@click.option("--config", help=" ⚙️  Configuration file path")
def enhance(text, doc_type, no_learning, cloud, as_json, config):
    """🪄 Polish a transcript"""
    try:
        result = app_hooks.on_enhance(
            _read_text(text), type=doc_type, no_learning=no_learning, cloud=cloud, config=config
        )
    except PolishError as e:
        _fail(str(e), as_json, e)
        return

    if as_json:
        _emit_json(result)
        return

    console.print(Panel(result["enhanced_text"], title=f"[bold green]{result['document_type']}[/bold green]"))
    console.print(f"[dim]Rules: {', '.join(result['applied_rules'])}[/dim]")


@cli.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON format")
@click.option("--config", help=" ⚙️  Configuration file path")
def classify(text, as_json, config):
    """🏷️  Detect the document type of a transcript"""
    try:
        result = app_hooks.on_classify(_read_text(text), config=config)
    except PolishError as e:
        _fail(str(e), as_json, e)
        return

    if as_json:
        _emit_json(result)
    else:
        console.print(f"[bold cyan]{result['category']}[/bold cyan]")


@cli.command("parse-command")
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON format")
@click.option("--config", help=" ⚙️  Configuration file path")
def parse_command(text, as_json, config):
    """🎙️  Show the voice command instruction in a transcript, if any"""
    result = app_hooks.on_parse_command(_read_text(text), config=config)
    if as_json:
        _emit_json(result)
        return

    if not result["detected"]:
        console.print("[yellow]No voice command detected[/yellow]")
        return

    table = Table(show_header=False, box=None)
    for key in ("prefix", "instruction", "target_document_type", "recipient", "content"):
        table.add_row(f"[bold]{key}[/bold]", str(result.get(key) or ""))
    console.print(table)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help=" 📄 Output JSON format")
@click.option("--config", help=" ⚙️  Configuration file path")
def providers(as_json, config):
    """☁️  List cloud rewrite providers"""
    result = app_hooks.on_providers(config=config)

    if as_json:
        _emit_json(result)
        return

    table = Table(title="Cloud providers")
    table.add_column("Name", style="green")
    table.add_column("Description")
    table.add_column("API key env")
    for name, info in result["providers"].items():
        marker = " (configured)" if name == result["configured"] else ""
        table.add_row(name + marker, info["description"], info["api_key_env"])
    console.print(table)


def main():
    """Entry point for the polish CLI"""
    cli()


if __name__ == "__main__":
    main()

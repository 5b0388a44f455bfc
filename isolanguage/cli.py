"""Click CLI definitions."""

from __future__ import annotations

from collections import Counter
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from isolanguage import __version__
from isolanguage.core.registry import Language, UnrecognizedCode, languages, parse
from isolanguage.core.registry import families as iter_families
from isolanguage.utils.config import CODE_FORMATS, build_config
from isolanguage.utils.languages import languages_in_family, resolve_language
from isolanguage.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)

_CODE_HEADERS = {"code": "639-1", "code_t": "639-2/T", "code_b": "639-2/B"}


def _console() -> Console:
    # Wide enough that rows never wrap in captured output.
    return Console(width=120, highlight=False)


def _load_config(ctx: click.Context, cli_args: dict[str, Any]) -> dict[str, Any]:
    base = ctx.obj or {}
    cli_args = {"verbose": base.get("verbose") or None, **cli_args}
    try:
        config = build_config(cli_args=cli_args)
    except ValueError as e:
        raise click.ClickException(str(e))
    logger.debug("Effective config: %s", config)
    return config


def _lookup(value: str, strict: bool) -> Language:
    if strict:
        try:
            return parse(value)
        except UnrecognizedCode as e:
            raise click.ClickException(str(e))
    lang = resolve_language(value)
    if lang is None:
        raise click.ClickException(f"Unknown language: {value}")
    return lang


@click.group()
@click.version_option(version=__version__, prog_name="isolanguage")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """isolanguage - ISO 639-1 language code reference."""
    config = _load_config(ctx, {"verbose": verbose or None})
    setup_logging(verbose=config["verbose"])
    ctx.obj = {"verbose": config["verbose"]}


@cli.command("languages")
@click.option("--family", default=None, help="Only list languages of this family")
@click.option(
    "--code-format",
    type=click.Choice(CODE_FORMATS),
    default=None,
    help="Code column to show (default: code)",
)
@click.pass_context
def list_languages(ctx: click.Context, family: str | None, code_format: str | None) -> None:
    """List languages in the standard's order."""
    config = _load_config(ctx, {"family": family, "code_format": code_format})
    field = config["code_format"]

    entries = languages_in_family(config["family"]) if config["family"] else list(languages())

    table = Table(box=None)
    table.add_column(_CODE_HEADERS[field])
    table.add_column("Name")
    table.add_column("Family")
    for lang in entries:
        table.add_row(getattr(lang, field), lang.name, lang.family)
    _console().print(table)
    logger.info("Listed %d languages", len(entries))


@cli.command("families")
def list_families() -> None:
    """List language families with their language counts."""
    counts = Counter(lang.family for lang in languages())
    table = Table(box=None)
    table.add_column("Family")
    table.add_column("Languages", justify="right")
    for family in iter_families():
        table.add_row(family, str(counts[family]))
    _console().print(table)


@cli.command()
@click.argument("value")
@click.option("--strict", is_flag=True, default=False, help="Accept exact two letter codes only")
@click.pass_context
def show(ctx: click.Context, value: str, strict: bool) -> None:
    """Show every field of one language."""
    config = _load_config(ctx, {"strict": strict or None})
    lang = _lookup(value, config["strict"])
    click.echo(f"  code:   {lang.code}")
    click.echo(f"  code_t: {lang.code_t}")
    click.echo(f"  code_b: {lang.code_b}")
    click.echo(f"  name:   {lang.name}")
    click.echo(f"  family: {lang.family}")


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    cfg = _load_config(ctx, {})
    for key, val in sorted(cfg.items()):
        click.echo(f"  {key}: {val}")


def main() -> None:
    cli()

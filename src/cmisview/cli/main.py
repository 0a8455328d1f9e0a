"""cmisview CLI - decode CMIS/QSFP-DD module memory dumps."""

from __future__ import annotations

import json

import click
from pydantic import ValidationError

from cmisview.config import load_settings
from cmisview.utils.logging import setup_logging


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.pass_context
def cli(ctx: click.Context, debug: bool, json_output: bool) -> None:
    """cmisview - CMIS / QSFP-DD transceiver memory map decoder."""
    try:
        settings = load_settings()
    except ValidationError as exc:
        raise click.ClickException(f"Invalid CMISVIEW_* setting: {exc}") from exc
    if debug:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    if json_output:
        settings = settings.model_copy(update={"json_logs": True})

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["json_output"] = json_output
    ctx.obj["settings"] = settings
    setup_logging(level=settings.log_level, json_output=settings.json_logs)


@cli.command()
@click.argument("dump", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format", "fmt",
    type=click.Choice(["auto", "raw", "hex"]),
    default=None,
    help="Dump file format (default: auto-detect)",
)
@click.pass_context
def decode(ctx: click.Context, dump: str, fmt: str | None) -> None:
    """Decode a module memory dump of 256 or 768 bytes."""
    from cmisview.core.module import decode_module
    from cmisview.dump import load_dump
    from cmisview.exceptions import CmisViewError
    from cmisview.report import render_report

    settings = ctx.obj["settings"]

    try:
        buf = load_dump(dump, fmt or settings.dump_format)
        info = decode_module(buf)
    except CmisViewError as exc:
        raise click.ClickException(str(exc)) from exc

    if ctx.obj.get("json_output"):
        click.echo(json.dumps(info.model_dump(), indent=2))
    else:
        for line in render_report(info, settings):
            click.echo(line)


# Register subcommand groups
from cmisview.cli.fields import fields  # noqa: E402

cli.add_command(fields)


if __name__ == "__main__":
    cli()

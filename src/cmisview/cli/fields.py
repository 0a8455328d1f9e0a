"""Field table inspection CLI commands."""

from __future__ import annotations

import json

import click

from cmisview.core.types import Page

_PAGE_CHOICES = [p.name for p in Page]


def _field_row(field) -> dict:
    return {
        "name": field.name,
        "page": field.page.name,
        "offset": field.location.offset,
        "absolute_offset": field.page.base + field.location.offset,
        "kind": field.kind.value,
        "size": field.size,
        "count": field.count,
        "description": field.description,
    }


@click.group()
def fields():
    """Inspect the CMIS field table."""
    pass


@fields.command("list")
@click.option("--page", type=click.Choice(_PAGE_CHOICES), default=None, help="Only this page")
@click.pass_context
def list_fields(ctx: click.Context, page: str | None) -> None:
    """List known fields with their page and absolute offsets."""
    from cmisview.core.fields import FIELDS, fields_for_page

    if page is None:
        selected = list(FIELDS.values())
    else:
        selected = fields_for_page(Page[page])

    rows = [_field_row(f) for f in selected]

    if ctx.obj.get("json_output"):
        click.echo(json.dumps(rows, indent=2))
        return

    for row in rows:
        span = row["size"] * row["count"]
        click.echo(
            f"  0x{row['absolute_offset']:03X}  {row['page']:<8} "
            f"+0x{row['offset']:02X}  {span:>2}B  {row['kind']:<13} {row['name']}"
        )


@fields.command("show")
@click.argument("name")
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Show a single field definition."""
    from cmisview.core.fields import get_field

    try:
        field = get_field(name)
    except KeyError as exc:
        raise click.ClickException(f"Unknown field: {name}") from exc

    row = _field_row(field)
    if ctx.obj.get("json_output"):
        click.echo(json.dumps(row, indent=2))
        return

    click.echo(f"Field: {row['name']}")
    click.echo(f"  Page: {field.page.label}")
    click.echo(f"  Offset: 0x{row['offset']:02X} (absolute 0x{row['absolute_offset']:03X})")
    click.echo(f"  Kind: {row['kind']}")
    click.echo(f"  Size: {row['size']} x {row['count']}")
    if row["description"]:
        click.echo(f"  Description: {row['description']}")

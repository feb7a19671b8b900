"""filelist CLI: inspect and edit a comment-annotated list file.

Commands:
    filelist init [PATH]              create filelist.toml
    filelist show [--json]            dump all items
    filelist get VALUE                print an item's comment
    filelist exists VALUE             exit 0 if present, 1 otherwise
    filelist with-comment COMMENT     items whose comment matches exactly
    filelist add VALUE [COMMENT]      append an item (--once to dedupe)
    filelist remove VALUE             drop the first matching item

--file overrides the list path from filelist.toml.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from filelist.config import FileListConfig, init_config, load_config

if TYPE_CHECKING:
    from filelist.models import Item
    from filelist.reader import FileList

logger = logging.getLogger("filelist.cli")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg() -> FileListConfig:
    try:
        return load_config()
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc


def _open(ctx: click.Context) -> FileList:
    cfg = _load_cfg()
    override: str | None = ctx.obj.get("file") if ctx.obj else None
    if override:
        cfg.path = str(Path(override).resolve())
    try:
        return cfg.open_list()
    except OSError as exc:
        raise click.ClickException(f"Cannot read list: {exc}") from exc


def _save(fl: FileList) -> None:
    if not fl.changed:
        logger.info("no changes, %s left untouched", fl.path)
        return
    try:
        fl.save()
    except (OSError, ValueError) as exc:
        raise click.ClickException(f"Cannot write list: {exc}") from exc
    logger.info("saved %d items to %s", fl.count(), fl.path)


def _echo_items(items: list[Item], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps([item.to_dict() for item in items], indent=2))
        return
    for item in items:
        click.echo(f"{item.value}\t{item.comment}" if item.comment else item.value)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="filelist")
@click.option("--file", "-f", "file", default=None, help="List file (overrides filelist.toml)")
@click.option("--verbose", "-v", is_flag=True, help="Log what is loaded and saved")
@click.pass_context
def cli(ctx: click.Context, file: str | None, verbose: bool) -> None:
    """filelist: comment-annotated list files."""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(message)s")
    ctx.ensure_object(dict)
    ctx.obj["file"] = file


# ---------------------------------------------------------------------------
# filelist init
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("path", required=False)
@click.option("--dir", "root", default=".", show_default=True, help="Project root")
def init(path: str | None, root: str) -> None:
    """Create filelist.toml in the current project."""
    root_path = Path(root).resolve()
    try:
        config_path = init_config(root_path, path=path)
        click.echo(f"Created {config_path}")
    except FileExistsError:
        click.echo("filelist.toml already exists, skipping init")

    try:
        cfg = load_config(root_path)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"List file : {cfg.list_path}")


# ---------------------------------------------------------------------------
# Read commands
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Show every item in file order."""
    fl = _open(ctx)
    if as_json:
        _echo_items(fl.get_items(), as_json=True)
        return

    from rich.console import Console
    from rich.markup import escape as _markup_escape
    from rich.table import Table

    table = Table(title=str(fl.path), show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Value", no_wrap=True)
    table.add_column("Comment", style="dim")
    for i, item in enumerate(fl, 1):
        table.add_row(str(i), _markup_escape(item.value), _markup_escape(item.comment))
    Console().print(table)
    click.echo(f"{fl.count()} items")


@cli.command()
@click.argument("value")
@click.pass_context
def get(ctx: click.Context, value: str) -> None:
    """Print the comment of the first item with VALUE."""
    fl = _open(ctx)
    if not fl.exists(value):
        raise click.ClickException(f"Not in list: {value}")
    click.echo(fl.get_comment(value))


@cli.command()
@click.argument("value")
@click.pass_context
def exists(ctx: click.Context, value: str) -> None:
    """Exit with status 0 if VALUE is listed, 1 otherwise."""
    fl = _open(ctx)
    ctx.exit(0 if fl.exists(value) else 1)


@cli.command("with-comment")
@click.argument("comment")
@click.option("--json", "as_json", is_flag=True)
@click.pass_context
def with_comment(ctx: click.Context, comment: str, as_json: bool) -> None:
    """List items whose comment is exactly COMMENT."""
    fl = _open(ctx)
    _echo_items(fl.get_all_with_comment(comment), as_json)


# ---------------------------------------------------------------------------
# Write commands
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("value")
@click.argument("comment", required=False, default="")
@click.option("--once", is_flag=True, help="Update the comment instead of adding a duplicate")
@click.pass_context
def add(ctx: click.Context, value: str, comment: str, once: bool) -> None:
    """Append VALUE (with optional COMMENT) and save."""
    fl = _open(ctx)
    try:
        if once:
            fl.add_once(value, comment)
        else:
            fl.add(value, comment)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    _save(fl)


@cli.command()
@click.argument("value")
@click.pass_context
def remove(ctx: click.Context, value: str) -> None:
    """Remove the first item with VALUE and save."""
    fl = _open(ctx)
    fl.remove(value)
    _save(fl)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()

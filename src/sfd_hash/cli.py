"""Click CLI for sfd-hash."""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from sfd_hash.config import get_settings
from sfd_hash.hasher import DigestError, FailureKind, hash_file
from sfd_hash.record import format_record

logger = logging.getLogger(__name__)

# Diagnostics only; the record and the failure messages go through click.echo
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s  %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _usage(prog: str) -> str:
    return f"Usage: {prog} <file-path>"


@click.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)
@click.argument("paths", nargs=-1)
@click.pass_context
def cli(ctx: click.Context, paths: tuple[str, ...]) -> None:
    """sfd-hash: SHA-256 digest of a single file as a JSON record."""
    settings = get_settings()
    _setup_logging(settings.verbose)

    if len(paths) != 1:
        click.echo(_usage(ctx.find_root().info_name or "sfd-hash"), err=True)
        sys.exit(int(FailureKind.USAGE))

    path = paths[0]
    try:
        result = hash_file(path)
    except DigestError as exc:
        logger.debug("%s", exc)
        click.echo(exc.kind.message, err=True)
        sys.exit(int(exc.kind))

    click.echo(format_record(result))


def main() -> None:
    """Console script entry point."""
    cli()

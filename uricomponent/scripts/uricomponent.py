#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
uricomponent – command line front end

• Typer-based CLI (type hints, rich help)
• `encode` percent-encodes arguments or standard input
• `table` shows the unreserved byte set
"""

from __future__ import annotations

import os
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from uricomponent import __version__
from uricomponent.common.config import conf
from uricomponent.common.lib import SAFE_BYTES
from uricomponent.core.encoder import encode
from uricomponent.logger.colored_logger import logger, set_level

app = typer.Typer(
    name="uricomponent",
    help="Percent-encode text the way encodeURIComponent does",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"[bold cyan]uricomponent[/] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
    verbose: int = typer.Option(1, "-V", "--verbose", help="Verbosity level (0-5)"),
):
    conf.update(verbose=verbose)
    set_level(conf.verbose)


@app.command("encode")
def encode_command(
    text: Optional[List[str]] = typer.Argument(
        None, help="Values to encode; standard input is read when omitted"
    ),
    no_newline: bool = typer.Option(False, "--no-newline", "-n", help="Do not end results with a newline"),
    keep_newline: bool = typer.Option(
        False, "--keep-newline", help="Keep the trailing newline of standard input"
    ),
):
    """Percent-encode each TEXT argument, or standard input as a whole"""
    conf.update(newline=not no_newline)

    try:
        if text:
            for value in text:
                # argv arrives decoded with the filesystem encoding; recover the raw bytes
                data = os.fsencode(value)
                logger.debug(f"Encoding argument of {len(data)} bytes")
                typer.echo(encode(data).decode("ascii"), nl=conf.newline)
            return

        stream = typer.get_binary_stream("stdin")
        data = stream.read()
        if not keep_newline:
            if data.endswith(b"\r\n"):
                data = data[:-2]
            elif data.endswith(b"\n"):
                data = data[:-1]
        logger.debug(f"Encoding {len(data)} bytes from standard input")
        typer.echo(encode(data).decode("ascii"), nl=conf.newline)
    except (TypeError, UnicodeError, OSError) as exc:
        logger.critical(f"Encoding failed: {exc}")
        raise typer.Exit(1)


@app.command("table")
def table_command():
    """Show the bytes that are never escaped"""
    table = Table(title="Unreserved bytes")
    table.add_column("Char", justify="center", style="bold")
    table.add_column("Dec", justify="right")
    table.add_column("Hex", justify="right")
    for value in sorted(SAFE_BYTES):
        table.add_row(chr(value), str(value), f"0x{value:02X}")
    console.print(table)
    logger.success(f"{len(SAFE_BYTES)} unreserved bytes listed")


if __name__ == "__main__":
    app()

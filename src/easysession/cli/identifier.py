# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""'easysession new-id' and 'easysession verify' commands."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import click
from rich.table import Table

from easysession.cli.console import console, print_header
from easysession.cli.options import config_option, load_options
from easysession.kernel.exceptions import DecodeException, IdentifierGenerationException
from easysession.session.codec import EXPIRY_FORMAT, SessionIdCodec
from easysession.session.verifier import SessionIdVerifier


@click.command()
@config_option
def new_id_command(config_path: Path | None) -> None:
    """Print a freshly built session identifier."""
    codec = SessionIdCodec(load_options(config_path))
    try:
        click.echo(codec.build())
    except IdentifierGenerationException as exc:
        raise click.ClickException(str(exc)) from exc


@click.command()
@click.argument("token")
@config_option
@click.pass_context
def verify_command(ctx: click.Context, token: str, config_path: Path | None) -> None:
    """Check whether TOKEN is a valid, unexpired session identifier.

    Exits with status 1 when the identifier is rejected.
    """
    options = load_options(config_path)
    codec = SessionIdCodec(options)
    try:
        valid = SessionIdVerifier(codec).is_valid(token)
    except IdentifierGenerationException as exc:
        raise click.ClickException(str(exc)) from exc

    print_header("Verify")
    table = Table(show_header=False, border_style="dim")
    table.add_column("Key", style="info")
    table.add_column("Value")

    try:
        raw = codec.decode(token)
    except DecodeException:
        table.add_row("Payload", "[error]malformed[/error]")
    else:
        table.add_row("Payload length", f"{len(raw)} bytes (min {options.min_size})")
        if options.expires_in is not None and len(raw) >= options.min_size:
            (expires_at,) = EXPIRY_FORMAT.unpack_from(raw, options.size)
            try:
                expiry = datetime.fromtimestamp(expires_at / 1000, tz=UTC).isoformat()
            except (OverflowError, OSError, ValueError):
                expiry = repr(expires_at)
            table.add_row("Expires at", expiry)

    table.add_row("Signed", "yes" if options.key is not None else "no")
    table.add_row("Valid", "[success]yes[/success]" if valid else "[error]no[/error]")
    console.print(table)

    if not valid:
        ctx.exit(1)

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
"""'easysession info' — Display the effective session options."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from easysession.cli.console import console, print_header
from easysession.cli.options import config_option, load_options
from easysession.session.paths import LiteralPath


@click.command()
@config_option
def info_command(config_path: Path | None) -> None:
    """Display the session options a coordinator would be built with."""
    options = load_options(config_path)
    print_header("Session options")

    table = Table(show_header=False, border_style="dim")
    table.add_column("Option", style="info")
    table.add_column("Value")
    table.add_row("algorithm", options.algorithm)
    table.add_row("key", "[success]set[/success]" if options.key is not None else "[dim]not set[/dim]")
    table.add_row("expires_in", f"{options.expires_in} ms" if options.expires_in is not None else "[dim]never[/dim]")
    table.add_row("size", f"{options.size} bytes")
    table.add_row("cookie_name", options.cookie_name)
    table.add_row("cookie", f"secure={options.cookie.secure} http_only={options.cookie.http_only}")
    table.add_row("cache.segment", options.cache.segment)
    table.add_row("cache.expires_in", f"{options.cache.expires_in} ms")
    for entry in options.ignore_paths:
        shown = entry.value if isinstance(entry, LiteralPath) else f"/{entry.pattern.pattern}/"
        table.add_row("ignore", shown)

    console.print(table)
    console.print()

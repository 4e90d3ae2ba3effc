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
"""Shared option loading for CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from easysession.core.config import Config
from easysession.kernel.exceptions import ConfigurationException
from easysession.session.options import SessionOptions

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML or TOML configuration file.",
)


def load_options(config_path: Path | None) -> SessionOptions:
    """Load session options, turning configuration errors into CLI errors."""
    try:
        config = Config.from_file(config_path) if config_path is not None else Config.defaults()
        return SessionOptions.from_config(config)
    except (ConfigurationException, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

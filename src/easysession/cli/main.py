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
"""EasySession CLI — issue and inspect session identifiers."""

from __future__ import annotations

import click

from easysession.cli.identifier import new_id_command, verify_command
from easysession.cli.info import info_command


@click.group()
@click.version_option(package_name="easysession")
def cli() -> None:
    """EasySession — signed session identifier tools."""


cli.add_command(new_id_command, name="new-id")
cli.add_command(verify_command, name="verify")
cli.add_command(info_command, name="info")

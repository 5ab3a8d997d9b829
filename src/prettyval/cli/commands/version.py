# topmark:header:start
#
#   project      : PrettyVal
#   file         : version.py
#   file_relpath : src/prettyval/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyVal `version` command.

Prints the current PrettyVal version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from prettyval.constants import PRETTYVAL_VERSION

if TYPE_CHECKING:
    from prettyval.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PrettyVal.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
def version_command(*, as_json: bool = False) -> None:
    """Show the current version of PrettyVal."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if as_json:
        console.print(json.dumps({"version": PRETTYVAL_VERSION}))
    else:
        console.print(console.styled(PRETTYVAL_VERSION, bold=True))

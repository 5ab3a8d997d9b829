# topmark:header:start
#
#   project      : PrettyVal
#   file         : test_version_command.py
#   file_relpath : tests/cli/test_version_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from prettyval.constants import PRETTYVAL_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == PRETTYVAL_VERSION


def test_version_json() -> None:
    result = run_cli(["version", "--json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": PRETTYVAL_VERSION}

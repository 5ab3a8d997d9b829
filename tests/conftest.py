# topmark:header:start
#
#   project      : PrettyVal
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PrettyVal test suite.

This file sets up global fixtures and the logging configuration for test runs,
and offers small builders for the documents used across test modules.
"""

from __future__ import annotations

import pytest

from prettyval.config import logging
from prettyval.model import List, Raw, Tree


@pytest.fixture(autouse=True)
def silence_prettyval_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PrettyVal's log level is not forced via env during tests.

    Also drops color-forcing variables so color resolution only depends on
    what each test sets explicitly.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log everything down to TRACE while tests run (pytest captures the output)."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def zaphod() -> Tree:
    """The flat two-pair character record."""
    return Tree([("name", Raw("zaphod")), ("age", Raw("42"))])


@pytest.fixture
def zaphod_with_facts(zaphod: Tree) -> Tree:
    """A nested record mixing trees, lists and terminals."""
    return Tree(
        [
            ("character", zaphod),
            ("crook", Raw("yes")),
            (
                "facts",
                List(
                    [
                        Raw("invented pan-galactic gargle blaster"),
                        Raw("elected president"),
                        Tree([("heads", Raw("2")), ("arms", Raw("3"))]),
                        List([Raw("stole the heart of gold"), Raw("one hoopy frood")]),
                    ]
                ),
            ),
        ]
    )

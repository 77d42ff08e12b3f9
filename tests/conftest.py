"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import os

import pytest

from telegraph_nodes.cli.config import ENV_MAX_DEPTH, ENV_PARSER


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the developer's environment and working directory out of tests.

    Configuration is resolved from the working directory and from
    TELEGRAPH_NODES_* variables, so every test starts in an empty temporary
    directory with those variables unset. Values a test loads from a .env
    file are removed afterwards.
    """
    monkeypatch.delenv(ENV_PARSER, raising=False)
    monkeypatch.delenv(ENV_MAX_DEPTH, raising=False)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    os.environ.pop(ENV_PARSER, None)
    os.environ.pop(ENV_MAX_DEPTH, None)

"""Unit test configuration - isolate tests from local .env files and logging setup"""

import logging

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove MiniSearch variables so a developer's .env.local or shell exports
    cannot leak into config and CLI tests.
    """
    for name in (
        "MINISEARCH_MAX_RESULTS",
        "MINISEARCH_SNIPPET_WINDOW",
        "MINISEARCH_SNIPPET_LEAD",
        "MINISEARCH_DATA_FILE",
        "MINISEARCH_LOG_FILE",
        "LOG_LEVEL",
    ):
        # setenv first so teardown also removes values loaded by load_environment()
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    # load_environment() must not pick up files from the project root
    monkeypatch.setattr("minisearch.cli.load_environment", lambda: None)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers; put the originals back"""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)

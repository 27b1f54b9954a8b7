# topmark:header:start
#
#   project      : Py2Rb
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Py2Rb test suite.

Sets up global fixtures and turns on TRACE logging so that failing tests show
how each line was classified and rewritten.

Notes:
    Tests should respect the immutable/mutable configuration split: build configs
    with `py2rb.config.MutableConfig`, then `freeze()` into a `py2rb.config.Config`.
    Do **not** mutate a frozen `Config`; call `Config.thaw()` instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from py2rb.config import Config, MutableConfig, logging


@pytest.fixture(autouse=True)
def silence_py2rb_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set TRACE logging for the whole test run.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty working directory, so no project config is discovered.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(layout: dict[str, Any] | None = None, **tables: dict[str, str]) -> Config:
    """Return a frozen `Config` built from defaults plus overrides.

    Args:
        layout (dict[str, Any] | None): Values for the ``[layout]`` section.
        **tables (dict[str, str]): Entries merged into the named substitution tables.

    Returns:
        Config: The frozen configuration.
    """
    data: dict[str, Any] = dict(tables)
    if layout:
        data["layout"] = layout
    draft: MutableConfig = MutableConfig.from_defaults().merge_with(
        MutableConfig.from_toml_dict(data)
    )
    return draft.freeze()

"""Pytest configuration for test isolation.

The application logger writes under ``<project>/logs``. To keep the working
tree clean, the project root seen by the logging module is redirected to a
temporary directory for the whole session.
"""

import pytest

from savings_rate.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True, scope="session")
def _isolate_log_dir(tmp_path_factory):
    """Point log files at a session temporary directory."""
    project_root = tmp_path_factory.mktemp("project")
    with pytest.MonkeyPatch.context() as patcher:
        patcher.setattr(
            logger_module,
            "get_project_root",
            lambda: project_root,
        )
        yield project_root

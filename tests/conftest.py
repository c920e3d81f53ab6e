import logging

import pytest


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo configure_logging so caplog sees records again."""
    yield
    app_logger = logging.getLogger("setup_php")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture
def inputs(tmp_path):
    """Action inputs writing into a temporary tool cache"""
    return {"RUNNER_TOOL_CACHE": str(tmp_path)}

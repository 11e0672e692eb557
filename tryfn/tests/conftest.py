"""Pytest configuration and fixtures."""

import asyncio
import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog and stdlib logging configuration a test applied."""
    root = logging.getLogger()
    library = logging.getLogger("tryfn")
    root_level, root_handlers = root.level, list(root.handlers)
    library_level = library.level
    yield
    structlog.reset_defaults()
    root.setLevel(root_level)
    root.handlers[:] = root_handlers
    library.setLevel(library_level)


@pytest.fixture
def resolved_future():
    """Future already resolved to "success", bound to the running loop."""

    def make(value="success"):
        future = asyncio.get_running_loop().create_future()
        future.set_result(value)
        return future

    return make


@pytest.fixture
def rejected_future():
    """Future already failed with the given exception."""

    def make(error):
        future = asyncio.get_running_loop().create_future()
        future.set_exception(error)
        return future

    return make

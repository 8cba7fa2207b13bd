"""Top-level pytest configuration for jolien."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

# Import error modules first so every category and code is registered
import jolien.errors.base
import jolien.config.errors
import jolien.di.errors
import jolien.aop.errors

from jolien.config import clear_settings_cache as _clear_settings_cache
from jolien.di import Container, get_container


@pytest.fixture
def container() -> Container:
    """A fresh, empty container independent of the process-wide one."""
    return Container()


@pytest.fixture(autouse=True)
def clean_global_container() -> Iterator[Container]:
    """Reset the process-wide container around every test."""
    global_container = get_container()
    global_container.reset()
    yield global_container
    global_container.reset()


@pytest.fixture
def clear_settings_cache() -> Iterator[None]:
    """Drop cached settings before and after a test that changes JOLIEN_* vars."""
    _clear_settings_cache()
    yield
    _clear_settings_cache()

"""pytest fixture providing a verified mock controller.

Enable it from a ``conftest.py`` with::

    pytest_plugins = ["periphmock.pytest_plugin"]
"""

from __future__ import annotations

from typing import Iterator

import pytest

from .mock import Mock


@pytest.fixture
def hal_mock() -> Iterator[Mock]:
    """A fresh ``Mock`` that is verified when the test finishes."""

    mock = Mock()
    yield mock
    mock.verify()

"""Shared pytest fixtures for periphmock tests."""

from __future__ import annotations

from periphmock.pytest_plugin import hal_mock  # noqa: F401

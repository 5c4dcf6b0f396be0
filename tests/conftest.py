# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures."""

import os
from collections.abc import Generator
from unittest.mock import patch

import pytest

from academic_records.core.config import clear_settings_cache


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def test_environment() -> dict[str, str]:
    """Provide test environment variables.

    Returns:
        Dictionary of environment variables for testing.
    """
    return {
        "ENVIRONMENT": "development",
        "DEBUG": "true",
        "LOG_LEVEL": "DEBUG",
        "SMTP_HOST": "smtp.test.local",
        "SMTP_USERNAME": "registrar",
        "SMTP_PASSWORD": "test-password",
        "SMTP_FROM_EMAIL": "registrar@test.local",
    }


@pytest.fixture
def patched_environment(test_environment: dict[str, str]) -> Generator[dict[str, str], None, None]:
    """Apply the test environment and reset cached settings around the test."""
    with patch.dict(os.environ, test_environment, clear=False):
        clear_settings_cache()
        yield test_environment
    clear_settings_cache()


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )

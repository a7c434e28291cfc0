"""Shared fixtures."""

import pytest

from userfiles.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Clear the process-wide limiter counters between tests."""
    limiter.reset()
    yield
    limiter.reset()

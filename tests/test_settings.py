"""Tests for settings validation."""

import pytest
from pydantic import ValidationError

from app.shared.config.settings import Settings


@pytest.mark.parametrize("limit", [0, -3])
def test_top_subscriptions_limit_rejected_at_load(limit) -> None:
    """A non-positive ranking size fails when settings load, not on the first request."""
    with pytest.raises(ValidationError):
        Settings(TOP_SUBSCRIPTIONS_LIMIT=limit)


def test_environment_is_normalised() -> None:
    assert Settings(ENVIRONMENT=" Production ").is_production

"""Shared test fixtures for sqlaqt."""

from __future__ import annotations

import pytest

from sqlaqt.renderer import Renderer
from sqlaqt.settings import RenderSettings


@pytest.fixture
def settings() -> RenderSettings:
    """Unquoted defaults, independent of the environment."""
    return RenderSettings(quote_identifiers=False, _env_file=None)


@pytest.fixture
def renderer(settings: RenderSettings) -> Renderer:
    return Renderer(settings)


@pytest.fixture
def backtick_renderer(settings: RenderSettings) -> Renderer:
    """Renderer quoting identifiers MySQL-style."""
    quoted = settings.model_copy(update={"quote_identifiers": True, "quote_chars": ("`", "`")})
    return Renderer(quoted)

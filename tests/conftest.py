"""Pytest configuration for overview navigator tests."""

import logging

import pytest

from overview_navigator.config import SettingsStore
from overview_navigator.models.icon_state import DockIconState
from overview_navigator.services.highlight_animator import HighlightAnimator
from overview_navigator.services.interaction_engine import InteractionEngine
from overview_navigator.services.recency_resolver import RecencyResolver

from tests.fixtures.fake_host import FakeHost


@pytest.fixture(autouse=True)
def debug_logging(caplog):
    """Capture navigator debug logs for every test."""
    caplog.set_level(logging.DEBUG, logger="overview_navigator")


@pytest.fixture
def host():
    """Fake host with 8 workspaces, workspace 0 active."""
    return FakeHost(workspaces=8, active=0)


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "overview-navigator" / "settings.json"


@pytest.fixture
def settings(settings_file):
    """Settings store with defaults, backed by a temp file."""
    return SettingsStore(settings_file)


@pytest.fixture
def resolver(host):
    return RecencyResolver(host.history, host.tracker)


@pytest.fixture
def animator(host, resolver, settings):
    return HighlightAnimator(host.overview, resolver, settings, host.clock)


@pytest.fixture
def engine(host, resolver, animator, settings):
    return InteractionEngine(host.manager, host.overview, resolver, animator, settings, host.clock)


@pytest.fixture
def icon_state():
    return DockIconState()

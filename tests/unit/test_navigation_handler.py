"""Unit tests for workspace switcher scroll and key handling."""

import pytest

from overview_navigator.models.events import (
    EventResult,
    KeyEvent,
    KeyTarget,
    ModifierType,
    MotionDirection,
    ScrollDirection,
    ScrollEvent,
)
from overview_navigator.services.navigation_handler import (
    DefaultNavigationHandler,
    ReorderNavigationHandler,
    resolve_key_target,
)

from tests.fixtures.fake_host import FakeSwitcher

SHIFT = ModifierType.SHIFT


@pytest.fixture
def switcher():
    return FakeSwitcher()


@pytest.fixture
def default_handler(host, settings):
    return DefaultNavigationHandler(host.manager, host.overview, settings)


@pytest.fixture
def reorder_handler(host, settings):
    return ReorderNavigationHandler(host.manager, host.overview, settings)


class TestResolveKeyTarget:
    """Test key to workspace target mapping."""

    @pytest.mark.parametrize("key,vertical,rtl,expected", [
        ("Page_Up", True, False, MotionDirection.UP),
        ("Page_Up", False, False, MotionDirection.LEFT),
        ("Page_Up", False, True, MotionDirection.RIGHT),
        ("Page_Down", True, False, MotionDirection.DOWN),
        ("Page_Down", False, False, MotionDirection.RIGHT),
        ("Page_Down", False, True, MotionDirection.LEFT),
    ])
    def test_page_keys(self, key, vertical, rtl, expected):
        target = resolve_key_target(key, vertical=vertical, rtl=rtl, n_workspaces=8)
        assert target == KeyTarget(direction=expected)

    def test_home_is_first_workspace(self):
        assert resolve_key_target("Home", vertical=False, rtl=False, n_workspaces=8) == KeyTarget(index=0)

    def test_end_is_last_workspace(self):
        assert resolve_key_target("End", vertical=False, rtl=False, n_workspaces=8) == KeyTarget(index=7)

    @pytest.mark.parametrize("key", ["a", "Return", "Tab", "space"])
    def test_other_keys(self, key):
        assert resolve_key_target(key, vertical=False, rtl=False, n_workspaces=8) is None

    @pytest.mark.parametrize("direction,step", [
        (MotionDirection.UP, -1),
        (MotionDirection.LEFT, -1),
        (MotionDirection.DOWN, 1),
        (MotionDirection.RIGHT, 1),
    ])
    def test_reorder_direction(self, direction, step):
        assert KeyTarget(direction=direction).reorder_direction == step

    def test_index_target_has_no_reorder_direction(self):
        assert KeyTarget(index=0).reorder_direction == 0


class TestDefaultScroll:
    """Test host default scroll handling."""

    def test_defers_to_host(self, default_handler, switcher):
        event = ScrollEvent(ScrollDirection.DOWN)

        assert default_handler.handle_scroll(switcher, event) == EventResult.STOP
        assert switcher.default_scrolls == [event]

    def test_gesture_claims_event(self, default_handler, switcher):
        switcher.claimed_by_gesture = True

        assert default_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.DOWN)) == EventResult.PROPAGATE
        assert switcher.default_scrolls == []

    def test_unmapped(self, default_handler, switcher):
        switcher.mapped = False
        assert default_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.DOWN)) == EventResult.PROPAGATE

    def test_secondary_monitor_when_primary_only(self, default_handler, switcher):
        switcher.workspaces_only_on_primary = True
        event = ScrollEvent(ScrollDirection.DOWN, monitor_index=1)

        assert default_handler.handle_scroll(switcher, event) == EventResult.PROPAGATE
        assert switcher.default_scrolls == []

    def test_primary_only_setting(self, default_handler, settings, switcher):
        settings.set("workspaces_only_on_primary", True)
        event = ScrollEvent(ScrollDirection.DOWN, monitor_index=1)

        assert default_handler.handle_scroll(switcher, event) == EventResult.PROPAGATE
        assert switcher.default_scrolls == []

    def test_primary_only_setting_allows_primary_monitor(self, default_handler, settings, switcher):
        settings.set("workspaces_only_on_primary", True)
        event = ScrollEvent(ScrollDirection.DOWN, monitor_index=0)

        assert default_handler.handle_scroll(switcher, event) == EventResult.STOP
        assert switcher.default_scrolls == [event]

    def test_without_settings(self, host, switcher):
        handler = DefaultNavigationHandler(host.manager, host.overview)
        event = ScrollEvent(ScrollDirection.DOWN, monitor_index=1)

        assert handler.handle_scroll(switcher, event) == EventResult.STOP


class TestDefaultKeys:
    """Test host default key handling."""

    def test_page_down_moves_right(self, host, default_handler, switcher):
        result = default_handler.handle_key_press(switcher, KeyEvent("Page_Down"))

        assert result == EventResult.STOP
        assert host.manager.active is host.workspace(1)

    def test_page_up_at_first_workspace(self, host, default_handler, switcher):
        result = default_handler.handle_key_press(switcher, KeyEvent("Page_Up"))

        assert result == EventResult.STOP
        assert host.overview.moved_to == []

    def test_shift_does_not_reorder(self, host, default_handler, switcher):
        default_handler.handle_key_press(switcher, KeyEvent("Page_Down", SHIFT))

        assert host.manager.reorders == []
        assert host.manager.active is host.workspace(1)

    def test_tab_propagates(self, default_handler, switcher):
        assert default_handler.handle_key_press(switcher, KeyEvent("Tab")) == EventResult.PROPAGATE

    def test_picker_inactive(self, host, default_handler, switcher):
        switcher.picker_active = False

        assert default_handler.handle_key_press(switcher, KeyEvent("End")) == EventResult.PROPAGATE
        assert host.overview.moved_to == []


class TestReorderScroll:
    """Test Shift + scroll reordering."""

    def test_shift_scroll_down_moves_workspace(self, host, reorder_handler, switcher):
        active = host.manager.active = host.workspace(2)

        result = reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.DOWN, SHIFT))

        assert result == EventResult.STOP
        assert active.index() == 3
        assert switcher.default_scrolls == []

    def test_shift_scroll_up_moves_workspace(self, host, reorder_handler, switcher):
        active = host.manager.active = host.workspace(2)

        reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.UP, SHIFT))

        assert active.index() == 1

    def test_shift_scroll_at_boundary_is_noop(self, host, reorder_handler, switcher):
        result = reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.UP, SHIFT))

        assert result == EventResult.STOP
        assert host.manager.reorders == []

    def test_plain_scroll_defers_to_host(self, host, reorder_handler, switcher):
        reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.DOWN))

        assert host.manager.reorders == []
        assert len(switcher.default_scrolls) == 1

    def test_shift_horizontal_scroll_defers_to_host(self, host, reorder_handler, switcher):
        reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.LEFT, SHIFT))

        assert host.manager.reorders == []
        assert len(switcher.default_scrolls) == 1

    def test_reorder_disabled(self, host, reorder_handler, settings, switcher):
        settings.set("reorder_workspaces", False)

        reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.DOWN, SHIFT))

        assert host.manager.reorders == []
        assert len(switcher.default_scrolls) == 1

    def test_gesture_claims_event(self, host, reorder_handler, switcher):
        switcher.claimed_by_gesture = True

        result = reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.DOWN, SHIFT))

        assert result == EventResult.PROPAGATE
        assert host.manager.reorders == []

    def test_secondary_monitor_when_primary_only(self, host, reorder_handler, switcher):
        switcher.workspaces_only_on_primary = True

        result = reorder_handler.handle_scroll(
            switcher, ScrollEvent(ScrollDirection.DOWN, SHIFT, monitor_index=1)
        )

        assert result == EventResult.PROPAGATE
        assert host.manager.reorders == []

    def test_primary_only_setting_blocks_secondary_monitor(self, host, reorder_handler, settings, switcher):
        settings.set("workspaces_only_on_primary", True)
        host.manager.active = host.workspace(2)

        result = reorder_handler.handle_scroll(
            switcher, ScrollEvent(ScrollDirection.DOWN, SHIFT, monitor_index=1)
        )

        assert result == EventResult.PROPAGATE
        assert host.manager.reorders == []
        assert switcher.default_scrolls == []

    def test_primary_only_setting_reorders_on_primary(self, host, reorder_handler, settings, switcher):
        settings.set("workspaces_only_on_primary", True)
        active = host.manager.active = host.workspace(2)

        reorder_handler.handle_scroll(switcher, ScrollEvent(ScrollDirection.DOWN, SHIFT))

        assert active.index() == 3


class TestReorderKeys:
    """Test key handling with reordering and dash focus."""

    def test_home_goes_to_first_workspace(self, host, reorder_handler, switcher):
        host.manager.active = host.workspace(5)

        result = reorder_handler.handle_key_press(switcher, KeyEvent("Home"))

        assert result == EventResult.STOP
        assert host.manager.active is host.workspace(0)

    def test_end_goes_to_last_workspace(self, host, reorder_handler, switcher):
        reorder_handler.handle_key_press(switcher, KeyEvent("End"))
        assert host.manager.active is host.workspace(7)

    def test_shift_page_down_reorders(self, host, reorder_handler, switcher):
        active = host.manager.active

        result = reorder_handler.handle_key_press(switcher, KeyEvent("Page_Down", SHIFT))

        assert result == EventResult.STOP
        assert active.index() == 1
        assert host.overview.moved_to == []

    def test_shift_page_up_rtl_reorders_towards_end(self, host, reorder_handler, switcher):
        """Page_Up points right in right-to-left layouts."""
        switcher.rtl = True
        active = host.manager.active

        reorder_handler.handle_key_press(switcher, KeyEvent("Page_Up", SHIFT))

        assert active.index() == 1

    def test_shift_page_up_vertical(self, host, reorder_handler, switcher):
        host.manager.layout_rows = -1
        active = host.manager.active = host.workspace(3)

        reorder_handler.handle_key_press(switcher, KeyEvent("Page_Up", SHIFT))

        assert active.index() == 2

    def test_shift_home_is_swallowed(self, host, reorder_handler, switcher):
        host.manager.active = host.workspace(3)

        result = reorder_handler.handle_key_press(switcher, KeyEvent("Home", SHIFT))

        assert result == EventResult.STOP
        assert host.manager.reorders == []
        assert host.overview.moved_to == []

    def test_shift_navigates_when_reorder_disabled(self, host, reorder_handler, settings, switcher):
        settings.set("reorder_workspaces", False)

        reorder_handler.handle_key_press(switcher, KeyEvent("Page_Down", SHIFT))

        assert host.manager.reorders == []
        assert host.manager.active is host.workspace(1)

    @pytest.mark.parametrize("key", ["Tab", "space"])
    def test_tab_and_space_stop_without_dash(self, host, reorder_handler, switcher, key):
        assert reorder_handler.handle_key_press(switcher, KeyEvent(key)) == EventResult.STOP
        assert host.overview.dash_focused == 0

    @pytest.mark.parametrize("key", ["Tab", "space"])
    def test_tab_and_space_focus_dash(self, host, reorder_handler, settings, switcher, key):
        settings.set("space_activates_dash", True)

        assert reorder_handler.handle_key_press(switcher, KeyEvent(key)) == EventResult.STOP
        assert host.overview.dash_focused == 1

    def test_unknown_key_propagates(self, host, reorder_handler, switcher):
        result = reorder_handler.handle_key_press(switcher, KeyEvent("a", SHIFT))

        assert result == EventResult.PROPAGATE
        assert host.manager.reorders == []

    def test_not_reactive(self, host, reorder_handler, switcher):
        switcher.reactive = False

        assert reorder_handler.handle_key_press(switcher, KeyEvent("Page_Down", SHIFT)) == EventResult.PROPAGATE
        assert host.manager.reorders == []

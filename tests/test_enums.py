import pytest

from fluentkit.enums import (
    CalendarDisplayMode,
    CloseButtonVisibility,
    ContentDialogButton,
    DarkMode,
    HourFormat,
    NavigationDisplayMode,
    NavigationPageMode,
    PageLaunchMode,
    SheetPosition,
    StatusMode,
    TabWidthBehavior,
    TimelineMode,
    TreeViewSelectionMode,
    WindowLaunchMode,
)


def test_dark_mode_lookup_by_value():
    assert DarkMode(0) is DarkMode.SYSTEM
    assert DarkMode(2) is DarkMode.DARK


def test_sheet_position_bottom_is_four():
    assert SheetPosition(4) is SheetPosition.BOTTOM


def test_page_and_window_launch_modes_differ():
    assert PageLaunchMode(4) is PageLaunchMode.SINGLE_INSTANCE
    assert WindowLaunchMode(2) is WindowLaunchMode.SINGLE_INSTANCE
    with pytest.raises(ValueError):
        WindowLaunchMode(4)


def test_unknown_value_raises():
    with pytest.raises(ValueError):
        StatusMode(3)


def test_content_dialog_buttons_combine():
    both = ContentDialogButton(1 | 4)
    assert both == ContentDialogButton.NEUTRAL | ContentDialogButton.POSITIVE
    assert ContentDialogButton.POSITIVE in both
    assert ContentDialogButton.NEGATIVE not in both
    assert int(both) == 5


@pytest.mark.parametrize(
    "enum_cls",
    [
        SheetPosition,
        DarkMode,
        TimelineMode,
        PageLaunchMode,
        WindowLaunchMode,
        TreeViewSelectionMode,
        StatusMode,
        HourFormat,
        CalendarDisplayMode,
        TabWidthBehavior,
        CloseButtonVisibility,
        NavigationDisplayMode,
        NavigationPageMode,
    ],
)
def test_values_are_unique_and_round_trip(enum_cls):
    values = [member.value for member in enum_cls]
    assert len(values) == len(set(values))
    for member in enum_cls:
        assert enum_cls(member.value) is member
        assert enum_cls[member.name] is member


def test_navigation_display_auto():
    assert NavigationDisplayMode(4) is NavigationDisplayMode.AUTO
    assert NavigationDisplayMode.AUTO > NavigationDisplayMode.MINIMAL
    assert NavigationPageMode(1) is NavigationPageMode.NO_STACK
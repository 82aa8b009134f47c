"""Enumerations shared by the FluentUI controls."""

from enum import IntEnum, IntFlag

__all__ = [
    "SheetPosition",
    "DarkMode",
    "TimelineMode",
    "PageLaunchMode",
    "WindowLaunchMode",
    "TreeViewSelectionMode",
    "StatusMode",
    "ContentDialogButton",
    "HourFormat",
    "CalendarDisplayMode",
    "TabWidthBehavior",
    "CloseButtonVisibility",
    "NavigationDisplayMode",
    "NavigationPageMode",
]


class SheetPosition(IntEnum):
    """Edge a sheet slides in from."""

    LEFT = 0x0000
    TOP = 0x0001
    RIGHT = 0x0002
    BOTTOM = 0x0004


class DarkMode(IntEnum):
    """Theme brightness selection."""

    SYSTEM = 0x0000
    LIGHT = 0x0001
    DARK = 0x0002


class TimelineMode(IntEnum):
    """Side on which timeline items are laid out."""

    LEFT = 0x0000
    RIGHT = 0x0001
    ALTERNATE = 0x0002


class PageLaunchMode(IntEnum):
    """How a page is pushed onto a page stack."""

    STANDARD = 0x0000
    SINGLE_TASK = 0x0001
    SINGLE_TOP = 0x0002
    SINGLE_INSTANCE = 0x0004


class WindowLaunchMode(IntEnum):
    """How a window is created when it is requested again."""

    STANDARD = 0x0000
    SINGLE_TASK = 0x0001
    SINGLE_INSTANCE = 0x0002


class TreeViewSelectionMode(IntEnum):
    """Selection behaviour of a tree view."""

    NONE = 0x0000
    SINGLE = 0x0001
    MULTIPLE = 0x0002


class StatusMode(IntEnum):
    """State shown by a status layout."""

    LOADING = 0x0000
    EMPTY = 0x0001
    ERROR = 0x0002
    SUCCESS = 0x0004


class ContentDialogButton(IntFlag):
    """Buttons a content dialog shows; values may be combined."""

    NEUTRAL = 0x0001
    NEGATIVE = 0x0002
    POSITIVE = 0x0004


class HourFormat(IntEnum):
    """Hour display of a time picker."""

    H = 0x0000
    HH = 0x0001


class CalendarDisplayMode(IntEnum):
    """Granularity a calendar view displays."""

    MONTH = 0x0000
    YEAR = 0x0001
    DECADE = 0x0002


class TabWidthBehavior(IntEnum):
    """How tab widths are computed."""

    EQUAL = 0x0000
    SIZE_TO_CONTENT = 0x0001
    COMPACT = 0x0002


class CloseButtonVisibility(IntEnum):
    """When a tab's close button is visible."""

    NEVER = 0x0000
    ALWAYS = 0x0001
    ON_HOVER = 0x0002


class NavigationDisplayMode(IntEnum):
    """Layout of a navigation view pane."""

    OPEN = 0x0000
    COMPACT = 0x0001
    MINIMAL = 0x0002
    AUTO = 0x0004


class NavigationPageMode(IntEnum):
    """Whether navigated pages are kept on a stack."""

    STACK = 0x0000
    NO_STACK = 0x0001
"""Flags controlling how an object is shown, saved and unloaded."""

from __future__ import annotations

from enum import IntFlag


class HideFlags(IntFlag):
    """Visibility and persistence flags for engine objects."""

    NONE = 0
    HIDE_IN_HIERARCHY = 1
    HIDE_IN_INSPECTOR = 2
    DONT_SAVE_IN_EDITOR = 4
    NOT_EDITABLE = 8
    DONT_SAVE_IN_BUILD = 16
    DONT_UNLOAD_UNUSED_ASSET = 32
    DONT_SAVE = 52
    HIDE_AND_DONT_SAVE = 128
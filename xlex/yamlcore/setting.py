"""Settings whose changes can be recorded and undone."""

from __future__ import annotations


class Setting:
    """A value that hands back an undo record whenever it is changed."""

    def __init__(self, value=None):
        self.value = value

    def set(self, value):
        """Change the value and return the change that undoes it."""
        change = SettingChange(self)
        self.value = value
        return change

    def restore(self, old):
        """Take the value held by another setting."""
        self.value = old.value


class SettingChange:
    """The saved state of a setting from before one change."""

    def __init__(self, setting):
        self.setting = setting
        self.old = Setting(setting.value)

    def pop(self):
        """Put the saved value back into the setting."""
        self.setting.restore(self.old)


class SettingChanges:
    """A collection of changes undone together."""

    def __init__(self):
        self._changes: list[SettingChange] = []

    def __len__(self):
        return len(self._changes)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.clear()
        return False

    def push(self, change):
        """Record a change."""
        self._changes.append(change)

    def restore(self):
        """Undo every recorded change, in the order they were recorded."""
        for change in self._changes:
            change.pop()

    def clear(self):
        """Undo every recorded change and forget them."""
        self.restore()
        self._changes.clear()
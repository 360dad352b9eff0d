"""Error taxonomy: HookmanError, ConfigParseError, InstallError."""

from __future__ import annotations

from pathlib import Path


class HookmanError(Exception):
    """Base class for errors reported to the user by the CLI."""


class ConfigParseError(HookmanError):
    """A config source could not be read or is malformed."""

    def __init__(self, source: Path | str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class InstallError(HookmanError):
    """The hook directory is unusable or a script could not be written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")

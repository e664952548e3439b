from __future__ import annotations

from pathlib import Path


class AutoclearError(Exception):
    """Base class for errors raised while clearing a backup directory."""


class DirectoryUnreadable(AutoclearError):
    def __init__(self, directory: Path, reason: str) -> None:
        super().__init__(f"cannot read directory '{directory}': {reason}")
        self.directory = directory
        self.reason = reason


class MetadataUnreadable(AutoclearError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read metadata of '{path}': {reason}")
        self.path = path
        self.reason = reason


class DeleteFailed(AutoclearError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot remove file '{path}': {reason}")
        self.path = path
        self.reason = reason

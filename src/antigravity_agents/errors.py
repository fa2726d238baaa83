from __future__ import annotations

from pathlib import Path

from antigravity_agents.summary import RunSummary
from antigravity_agents.types import CollectionKind


class InstallerError(Exception):
    """Base class for failures that abort an installation."""


class MissingSourceCollection(InstallerError):
    def __init__(self, kind: CollectionKind, path: Path) -> None:
        self.kind = kind
        self.path = path
        super().__init__(f"Source {kind.value} directory not found at {path}")


class HostEnvironmentNotFound(InstallerError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Antigravity global directory not found at {path}. "
            "Please make sure Antigravity AI is installed."
        )


class CopyFailed(InstallerError):
    """A single file could not be copied.

    ``summary`` carries the counts completed before the failure; files copied
    up to that point are left in place.
    """

    def __init__(self, file: Path, cause: OSError, summary: RunSummary) -> None:
        self.file = file
        self.cause = cause
        self.summary = summary
        super().__init__(f"Failed to copy {file}: {cause}")

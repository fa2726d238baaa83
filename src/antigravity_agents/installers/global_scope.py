from __future__ import annotations

from pathlib import Path

from antigravity_agents.errors import HostEnvironmentNotFound
from antigravity_agents.types import CollectionKind, InstallMode

HOST_DIR = "antigravity"
RULES_FILENAME = "GEMINI.md"

_PATHS = {
    CollectionKind.AGENTS: "global_agents",
    CollectionKind.WORKFLOWS: "global_workflows",
}


class GlobalInstaller:
    """Installs into the per-user Antigravity configuration directory.

    ``root`` is the user config root (``~/.gemini`` by default). The host
    directory beneath it belongs to Antigravity itself and is never created
    here; only the two collection directories inside it are.
    """

    name = "global"
    mode = InstallMode.GLOBAL

    def __init__(self, root: Path) -> None:
        self.root = root

    @property
    def destination_root(self) -> Path:
        return self.root / HOST_DIR

    def get_target_dir(self, kind: CollectionKind) -> Path:
        if kind not in _PATHS:
            raise ValueError(f"{kind.value} is not installed as a directory")
        return self.destination_root / _PATHS[kind]

    def get_rules_target(self) -> Path:
        return self.root / RULES_FILENAME

    def check_environment(self) -> list[str]:
        if not self.destination_root.is_dir():
            raise HostEnvironmentNotFound(self.destination_root)
        return []

    def describe_target(self) -> str:
        return f"global install for all projects at {self.destination_root}"

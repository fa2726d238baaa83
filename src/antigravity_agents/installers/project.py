from __future__ import annotations

from pathlib import Path

from antigravity_agents.types import CollectionKind, InstallMode

AGENT_DIR = ".agent"
PROJECT_MARKERS = ("pubspec.yaml", "package.json", "app.json")

_PATHS = {
    CollectionKind.AGENTS: "agents",
    CollectionKind.WORKFLOWS: "workflows",
}


class ProjectInstaller:
    name = "project"
    mode = InstallMode.PROJECT

    def __init__(self, root: Path) -> None:
        self.root = root

    @property
    def destination_root(self) -> Path:
        return self.root / AGENT_DIR

    def get_target_dir(self, kind: CollectionKind) -> Path:
        if kind not in _PATHS:
            raise ValueError(f"{kind.value} is not installed as a directory")
        return self.destination_root / _PATHS[kind]

    def get_rules_target(self) -> Path:
        return self.destination_root / "rules" / "rules.md"

    def check_environment(self) -> list[str]:
        # Advisory only: a missing marker never blocks the install.
        if any((self.root / marker).is_file() for marker in PROJECT_MARKERS):
            return []
        return [
            f"No {', '.join(PROJECT_MARKERS)} found in {self.root}. "
            "Are you in a Flutter or React Native project directory?"
        ]

    def describe_target(self) -> str:
        return f"project install into {self.destination_root}"

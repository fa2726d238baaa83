from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from antigravity_agents.types import CollectionKind, InstallMode


@runtime_checkable
class AgentInstaller(Protocol):
    name: str
    mode: InstallMode
    root: Path

    @property
    def destination_root(self) -> Path: ...
    def get_target_dir(self, kind: CollectionKind) -> Path: ...
    def get_rules_target(self) -> Path: ...
    def check_environment(self) -> list[str]: ...
    def describe_target(self) -> str: ...

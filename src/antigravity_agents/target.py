from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from antigravity_agents.installers.protocol import AgentInstaller
from antigravity_agents.types import CollectionKind, InstallMode


class InstallationTarget(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: InstallMode
    root: Path
    exists: bool
    has_existing_content: bool


def _has_files(directory: Path) -> bool:
    if not directory.is_dir():
        return False
    return any(p.is_file() for p in directory.iterdir())


def resolve_target(installer: AgentInstaller) -> InstallationTarget:
    root = installer.destination_root
    return InstallationTarget(
        mode=installer.mode,
        root=root,
        exists=root.is_dir(),
        has_existing_content=any(
            _has_files(installer.get_target_dir(kind))
            for kind in (CollectionKind.AGENTS, CollectionKind.WORKFLOWS)
        ),
    )

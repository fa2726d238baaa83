from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from antigravity_agents.errors import MissingSourceCollection
from antigravity_agents.types import CollectionKind

EXCLUDED_FROM_COUNT = "README.md"

_RULES_CANDIDATES = (Path("rules.md"), Path("rules") / "rules.md")


class PayloadCollection(BaseModel):
    kind: CollectionKind
    source: Path
    destination: Path | None = None
    files: list[Path] = Field(default_factory=list)

    @property
    def counted_files(self) -> list[Path]:
        return [f for f in self.files if f.name != EXCLUDED_FROM_COUNT]

    def target_for(self, file: Path) -> Path:
        """Where ``file`` lands: the rules target itself, else inside the directory."""
        if self.destination is None:
            raise ValueError(f"{self.kind.value} collection has no destination yet")
        if self.kind == CollectionKind.RULES:
            return self.destination
        return self.destination / file.name


class Payload(BaseModel):
    root: Path
    agents: PayloadCollection
    workflows: PayloadCollection
    rules: PayloadCollection | None = None

    @property
    def collections(self) -> list[PayloadCollection]:
        found = [self.agents, self.workflows]
        if self.rules is not None:
            found.append(self.rules)
        return found


def _list_files(directory: Path) -> list[Path]:
    return sorted(p for p in directory.iterdir() if p.is_file())


def _load_directory(root: Path, kind: CollectionKind) -> PayloadCollection:
    source = root / kind.value
    if not source.is_dir():
        raise MissingSourceCollection(kind, source)
    return PayloadCollection(kind=kind, source=source, files=_list_files(source))


def find_rules_file(root: Path) -> Path | None:
    for candidate in _RULES_CANDIDATES:
        path = root / candidate
        if path.is_file():
            return path
    return None


def load_payload(root: Path) -> Payload:
    agents = _load_directory(root, CollectionKind.AGENTS)
    workflows = _load_directory(root, CollectionKind.WORKFLOWS)

    rules = None
    rules_file = find_rules_file(root)
    if rules_file is not None:
        rules = PayloadCollection(
            kind=CollectionKind.RULES, source=rules_file, files=[rules_file]
        )

    return Payload(root=root, agents=agents, workflows=workflows, rules=rules)

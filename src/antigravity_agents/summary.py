from __future__ import annotations

from pydantic import BaseModel

from antigravity_agents.types import CollectionKind, RunStatus

_LABELS = {
    CollectionKind.AGENTS: ("agent", "agents"),
    CollectionKind.WORKFLOWS: ("workflow", "workflows"),
    CollectionKind.RULES: ("rules file", "rules files"),
}


class RunSummary(BaseModel):
    status: RunStatus = RunStatus.COMPLETED
    agents: int = 0
    workflows: int = 0
    rules: int = 0

    @classmethod
    def cancelled(cls) -> RunSummary:
        return cls(status=RunStatus.CANCELLED)

    def count(self, kind: CollectionKind) -> int:
        return getattr(self, kind.value)

    def record(self, kind: CollectionKind) -> None:
        setattr(self, kind.value, self.count(kind) + 1)

    @property
    def total(self) -> int:
        return self.agents + self.workflows + self.rules

    def describe(self) -> str:
        """Render counts as e.g. ``2 agents, 1 workflow, 1 rules file``.

        The rules count is omitted when no rules file was installed.
        """
        parts = []
        for kind, (singular, plural) in _LABELS.items():
            n = self.count(kind)
            if kind == CollectionKind.RULES and n == 0:
                continue
            parts.append(f"{n} {singular if n == 1 else plural}")
        return ", ".join(parts)

from __future__ import annotations

from enum import Enum


class InstallMode(str, Enum):
    GLOBAL = "global"
    PROJECT = "project"


class CollectionKind(str, Enum):
    AGENTS = "agents"
    WORKFLOWS = "workflows"
    RULES = "rules"


class RunStatus(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DRY_RUN = "dry-run"

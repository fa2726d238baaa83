from __future__ import annotations

from antigravity_agents.summary import RunSummary
from antigravity_agents.types import CollectionKind, RunStatus


def test_record_increments_per_collection() -> None:
    summary = RunSummary()
    summary.record(CollectionKind.AGENTS)
    summary.record(CollectionKind.AGENTS)
    summary.record(CollectionKind.WORKFLOWS)

    assert summary.agents == 2
    assert summary.workflows == 1
    assert summary.rules == 0
    assert summary.total == 3


def test_describe_pluralizes() -> None:
    summary = RunSummary(agents=2, workflows=1, rules=1)

    assert summary.describe() == "2 agents, 1 workflow, 1 rules file"


def test_describe_omits_missing_rules() -> None:
    assert RunSummary(agents=1, workflows=0).describe() == "1 agent, 0 workflows"


def test_cancelled_has_no_counts() -> None:
    summary = RunSummary.cancelled()

    assert summary.status == RunStatus.CANCELLED
    assert summary.total == 0

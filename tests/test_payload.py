"""Tests for payload discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from antigravity_agents.errors import MissingSourceCollection
from antigravity_agents.payload import find_rules_file, load_payload
from antigravity_agents.types import CollectionKind
from conftest import write_files


class TestLoadPayload:
    def test_lists_files_sorted(self, source: Path) -> None:
        payload = load_payload(source)

        assert [f.name for f in payload.agents.files] == ["x.md", "y.md"]
        assert [f.name for f in payload.workflows.files] == ["z.md"]
        assert payload.rules is not None
        assert payload.rules.files == [source / "rules.md"]

    def test_readme_is_listed_but_not_counted(self, source: Path) -> None:
        (source / "agents" / "README.md").write_text("readme", encoding="utf-8")

        payload = load_payload(source)

        assert len(payload.agents.files) == 3
        assert [f.name for f in payload.agents.counted_files] == ["x.md", "y.md"]

    def test_non_markdown_files_are_part_of_the_payload(self, source: Path) -> None:
        (source / "agents" / "notes.txt").write_text("opaque", encoding="utf-8")

        payload = load_payload(source)

        assert "notes.txt" in [f.name for f in payload.agents.counted_files]

    def test_subdirectories_are_not_descended(self, source: Path) -> None:
        write_files(source / "agents" / "nested", {"deep.md": "deep"})

        payload = load_payload(source)

        assert [f.name for f in payload.agents.files] == ["x.md", "y.md"]

    def test_missing_agents(self, tmp_path: Path) -> None:
        (tmp_path / "workflows").mkdir()

        with pytest.raises(MissingSourceCollection) as excinfo:
            load_payload(tmp_path)

        assert excinfo.value.kind == CollectionKind.AGENTS

    def test_missing_workflows(self, tmp_path: Path) -> None:
        (tmp_path / "agents").mkdir()

        with pytest.raises(MissingSourceCollection) as excinfo:
            load_payload(tmp_path)

        assert excinfo.value.kind == CollectionKind.WORKFLOWS
        assert excinfo.value.path == tmp_path / "workflows"

    def test_rules_is_optional(self, source: Path) -> None:
        (source / "rules.md").unlink()

        payload = load_payload(source)

        assert payload.rules is None
        assert len(payload.collections) == 2


class TestFindRulesFile:
    def test_prefers_top_level_rules(self, source: Path) -> None:
        write_files(source / "rules", {"rules.md": "nested"})

        assert find_rules_file(source) == source / "rules.md"

    def test_falls_back_to_rules_directory(self, source: Path) -> None:
        (source / "rules.md").unlink()
        write_files(source / "rules", {"rules.md": "nested"})

        assert find_rules_file(source) == source / "rules" / "rules.md"

    def test_none_when_absent(self, tmp_path: Path) -> None:
        assert find_rules_file(tmp_path) is None


class TestTargetFor:
    def test_directory_collection(self, source: Path, tmp_path: Path) -> None:
        agents = load_payload(source).agents.model_copy(update={"destination": tmp_path / "out"})

        assert agents.target_for(source / "agents" / "x.md") == tmp_path / "out" / "x.md"

    def test_rules_collection_targets_the_file_itself(self, source: Path, tmp_path: Path) -> None:
        rules = load_payload(source).rules
        assert rules is not None
        rules = rules.model_copy(update={"destination": tmp_path / "GEMINI.md"})

        assert rules.target_for(source / "rules.md") == tmp_path / "GEMINI.md"

    def test_unbound_collection(self, source: Path) -> None:
        with pytest.raises(ValueError):
            load_payload(source).agents.target_for(source / "agents" / "x.md")

"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from antigravity_agents.config import get_settings


class ScriptedConfirm:
    """Confirm callable that replays canned answers and records questions."""

    def __init__(self, *answers: bool) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        if not self._answers:
            raise AssertionError(f"Unexpected confirmation prompt: {question}")
        return self._answers.pop(0)


def write_files(directory: Path, files: dict[str, str]) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (directory / name).write_text(content, encoding="utf-8")


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under ``root`` to its bytes."""
    if not root.exists():
        return {}
    return {
        str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()
    }


@pytest.fixture
def source(tmp_path: Path) -> Path:
    """Payload with two agents, one workflow and a top-level rules file."""
    root = tmp_path / "source"
    write_files(root / "agents", {"x.md": "# agent x\n", "y.md": "# agent y\n"})
    write_files(root / "workflows", {"z.md": "# workflow z\n"})
    (root / "rules.md").write_text("# rules\n", encoding="utf-8")
    return root


@pytest.fixture
def project(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    (root / "pubspec.yaml").write_text("name: demo\n", encoding="utf-8")
    return root


@pytest.fixture
def user_config(tmp_path: Path) -> Path:
    """A ~/.gemini stand-in with the Antigravity host directory present."""
    root = tmp_path / "home" / ".gemini"
    (root / "antigravity").mkdir(parents=True)
    return root


@pytest.fixture
def never_confirm() -> ScriptedConfirm:
    return ScriptedConfirm()


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate tests from ANTIGRAVITY_* variables and the settings cache."""
    for name in ("ANTIGRAVITY_USER_CONFIG_ROOT", "ANTIGRAVITY_SOURCE_ROOT", "ANTIGRAVITY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

"""Confirmation-gated, additive copy of a payload tree into an install target."""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path
from typing import TextIO

from pydantic import BaseModel, ConfigDict, Field

from antigravity_agents.confirm import Confirm, prompt_confirm
from antigravity_agents.errors import CopyFailed
from antigravity_agents.installers.global_scope import GlobalInstaller
from antigravity_agents.installers.project import ProjectInstaller
from antigravity_agents.installers.protocol import AgentInstaller
from antigravity_agents.payload import Payload, PayloadCollection, load_payload
from antigravity_agents.summary import RunSummary
from antigravity_agents.target import InstallationTarget, resolve_target
from antigravity_agents.types import CollectionKind, InstallMode, RunStatus

logger = logging.getLogger(__name__)

_INSTALLERS = {
    InstallMode.GLOBAL: GlobalInstaller,
    InstallMode.PROJECT: ProjectInstaller,
}


class InstallPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    payload: Payload
    target: InstallationTarget
    warnings: list[str] = Field(default_factory=list)

    @property
    def needs_confirmation(self) -> bool:
        return self.target.has_existing_content


def get_installer(mode: InstallMode, root: Path) -> AgentInstaller:
    return _INSTALLERS[InstallMode(mode)](root)


def resolve_destinations(installer: AgentInstaller, payload: Payload) -> Payload:
    """Return a copy of ``payload`` with each collection's destination set."""

    def bind(collection: PayloadCollection) -> PayloadCollection:
        if collection.kind == CollectionKind.RULES:
            destination = installer.get_rules_target()
        else:
            destination = installer.get_target_dir(collection.kind)
        return collection.model_copy(update={"destination": destination})

    return payload.model_copy(
        update={
            "agents": bind(payload.agents),
            "workflows": bind(payload.workflows),
            "rules": bind(payload.rules) if payload.rules is not None else None,
        }
    )


def plan(installer: AgentInstaller, source_root: Path) -> InstallPlan:
    """Check preconditions and describe the install without touching disk.

    Raises:
        MissingSourceCollection: ``agents/`` or ``workflows/`` is missing.
        HostEnvironmentNotFound: global host directory does not exist.
    """
    payload = load_payload(source_root)
    warnings = installer.check_environment()
    for warning in warnings:
        logger.warning(warning)
    target = resolve_target(installer)
    logger.debug(
        "Planned %s install from %s into %s (existing content: %s)",
        installer.name,
        source_root,
        target.root,
        target.has_existing_content,
    )
    return InstallPlan(
        payload=resolve_destinations(installer, payload),
        target=target,
        warnings=warnings,
    )


def _ensure_dir(directory: Path, summary: RunSummary, out: TextIO) -> None:
    if directory.is_dir():
        return
    print(f"Creating {directory} (first-time setup)", file=out)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CopyFailed(directory, exc, summary) from exc


def _copy(source: Path, destination: Path, summary: RunSummary) -> None:
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
    except OSError as exc:
        raise CopyFailed(source, exc, summary) from exc
    logger.debug("Copied %s -> %s", source, destination)


def _report_plan(
    installer: AgentInstaller, install_plan: InstallPlan, out: TextIO
) -> None:
    for warning in install_plan.warnings:
        print(f"Warning: {warning}", file=out)
    payload = install_plan.payload
    print(f"Target: {installer.describe_target()}", file=out)
    print("Installation locations:", file=out)
    for collection in payload.collections:
        label = f"{collection.kind.value.capitalize()}:"
        print(f"   {label:<11}{collection.destination}", file=out)
    print("", file=out)

    print("Found:", file=out)
    print(f"   {len(payload.agents.counted_files)} agents", file=out)
    print(f"   {len(payload.workflows.counted_files)} workflows", file=out)
    if payload.rules is not None:
        print("   1 rules file", file=out)
    print("", file=out)


def run_install(
    installer: AgentInstaller,
    source_root: Path,
    *,
    confirm: Confirm = prompt_confirm,
    assume_yes: bool = False,
    dry_run: bool = False,
    output: TextIO | None = None,
) -> RunSummary:
    out = output or sys.stdout
    install_plan = plan(installer, source_root)
    _report_plan(installer, install_plan, out)

    if dry_run:
        summary = RunSummary(status=RunStatus.DRY_RUN)
        for collection in install_plan.payload.collections:
            for file in collection.files:
                target = collection.target_for(file)
                print(f"  would copy {file.name} -> {target}", file=out)
            for _ in collection.counted_files:
                summary.record(collection.kind)
        print("Dry run: nothing was written.", file=out)
        return summary

    if install_plan.needs_confirmation and not assume_yes:
        question = (
            f"{install_plan.target.root} already has content. "
            "Merge and overwrite existing files?"
        )
        if not confirm(question):
            logger.info("Installation cancelled by user")
            print("Installation cancelled.", file=out)
            return RunSummary.cancelled()

    summary = RunSummary()
    for collection in install_plan.payload.collections:
        print(f"Installing {collection.kind.value}...", file=out)
        if collection.kind != CollectionKind.RULES:
            _ensure_dir(collection.destination, summary, out)
        counted = set(collection.counted_files)
        for file in collection.files:
            _copy(file, collection.target_for(file), summary)
            if file in counted:
                summary.record(collection.kind)
            print(f"  ✓ {file.name}", file=out)
        print("", file=out)
    return summary


def install(
    mode: InstallMode,
    source_root: Path,
    destination_root: Path,
    *,
    confirm: Confirm = prompt_confirm,
    assume_yes: bool = False,
    dry_run: bool = False,
    output: TextIO | None = None,
) -> RunSummary:
    """Install the payload under ``source_root`` for ``mode``.

    ``destination_root`` is the user config root for global installs and the
    project directory for project installs.
    """
    return run_install(
        get_installer(mode, destination_root),
        source_root,
        confirm=confirm,
        assume_yes=assume_yes,
        dry_run=dry_run,
        output=output,
    )

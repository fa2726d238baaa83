from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, TextIO

from pydantic import ValidationError

from antigravity_agents.config import LOG_LEVELS, get_settings, setup_logging
from antigravity_agents.confirm import Confirm, prompt_confirm
from antigravity_agents.errors import CopyFailed, InstallerError
from antigravity_agents.installer import install
from antigravity_agents.summary import RunSummary
from antigravity_agents.types import CollectionKind, InstallMode, RunStatus

_TITLES = {
    InstallMode.GLOBAL: "Antigravity AI Agents - Global Installation",
    InstallMode.PROJECT: "Antigravity AI Agents - Project Installation",
}

_NEXT_STEPS = {
    InstallMode.GLOBAL: "Open any project in Antigravity AI",
    InstallMode.PROJECT: "Open this project in Antigravity AI",
}


def eprint(*args: object, **kwargs: Any) -> None:
    print(*args, file=sys.stderr, **kwargs)


def _add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Directory containing agents/, workflows/ and optionally rules.md "
        "(default: the payload shipped with this package).",
    )
    p.add_argument(
        "--target",
        type=Path,
        default=None,
        help="User config root for global installs (default: ~/.gemini), "
        "project directory for project installs (default: current directory).",
    )
    p.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Overwrite existing files without prompting.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be copied without writing anything.",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING).",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="antigravity-agents",
        description="Install Antigravity agents, workflows and rules.",
    )
    sub = p.add_subparsers(dest="mode", required=True)
    for mode in InstallMode:
        _add_common_arguments(sub.add_parser(mode.value, help=_TITLES[mode]))
    return p


def _print_summary(mode: InstallMode, summary: RunSummary, out: TextIO) -> None:
    print("Installation complete!", file=out)
    print("", file=out)
    print("Summary:", file=out)
    print(f"   {summary.agents} agents installed", file=out)
    print(f"   {summary.workflows} workflows installed", file=out)
    if summary.count(CollectionKind.RULES):
        print("   1 rules file installed", file=out)
    print(f"   ({summary.describe()})", file=out)
    print("", file=out)
    print("Next steps:", file=out)
    print(f"   1. {_NEXT_STEPS[mode]}", file=out)
    print("   2. Use workflows with slash commands, e.g. /feature-flutter", file=out)


def run(
    mode: InstallMode,
    args: argparse.Namespace,
    *,
    confirm: Confirm = prompt_confirm,
    output: TextIO | None = None,
) -> int:
    out = output or sys.stdout
    try:
        settings = get_settings()
    except ValidationError as exc:
        eprint(f"Error: invalid ANTIGRAVITY_* settings:\n{exc}")
        return 1
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    setup_logging(settings)

    source = args.source.expanduser() if args.source else settings.source_path
    if args.target is not None:
        target = args.target.expanduser()
    elif mode == InstallMode.GLOBAL:
        target = settings.user_config_path
    else:
        target = Path.cwd()

    print(_TITLES[mode], file=out)
    print("", file=out)

    try:
        summary = install(
            mode,
            source,
            target,
            confirm=confirm,
            assume_yes=args.yes,
            dry_run=args.dry_run,
            output=out,
        )
    except CopyFailed as exc:
        eprint(f"Error: {exc}")
        eprint(f"Copied before failure: {exc.summary.describe()}")
        return 1
    except InstallerError as exc:
        eprint(f"Error: {exc}")
        return 1

    if summary.status == RunStatus.COMPLETED:
        _print_summary(mode, summary, out)
    elif summary.status == RunStatus.DRY_RUN:
        print(f"Would install {summary.describe()}", file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return run(InstallMode(args.mode), args)


def _single_mode_main(mode: InstallMode, argv: list[str] | None) -> int:
    p = argparse.ArgumentParser(
        prog=f"install-{mode.value}", description=_TITLES[mode]
    )
    _add_common_arguments(p)
    return run(mode, p.parse_args(argv))


def install_global_main(argv: list[str] | None = None) -> int:
    return _single_mode_main(InstallMode.GLOBAL, argv)


def install_project_main(argv: list[str] | None = None) -> int:
    return _single_mode_main(InstallMode.PROJECT, argv)


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

from typing import Callable

Confirm = Callable[[str], bool]

_YES = {"y", "yes"}


def prompt_confirm(question: str) -> bool:
    """Ask a yes/no question on stdin; anything but y/yes (or EOF) is no."""
    try:
        reply = input(f"{question} [y/N]: ")
    except EOFError:
        return False
    return reply.strip().lower() in _YES

"""Interactive prompting utilities for the deeper CLI."""

import builtins
import sys
from typing import Optional


def is_interactive() -> bool:
    """Return True when prompts can safely read from stdin."""
    # If input() has been monkeypatched (e.g. during tests), assume interactivity.
    if input is not builtins.input:  # type: ignore[name-defined]
        return True

    stdin = getattr(sys, "stdin", None)
    if stdin is None:
        return False

    try:
        return stdin.isatty()
    except (AttributeError, ValueError):
        return False


def confirm(message: str) -> bool:
    """
    Ask a yes/no question, defaulting to no.

    Returns:
        True only for an explicit 'y' or 'yes'
    """
    if not is_interactive():
        print("\nℹ️ Skipping confirmation prompt (no TTY detected).")
        return False

    try:
        response = input(f"\n❓ {message} (y/N): ").strip().lower()
    except (EOFError, KeyboardInterrupt):
        return False
    return response in ['y', 'yes']


def prompt_text(label: str, default: Optional[str] = None) -> str:
    """
    Collect multi-line text until an empty line.

    Used for the evening reflection items; each non-empty line is one entry.
    """
    if not is_interactive():
        return default or ""

    print(f"✏️  {label} (finish with an empty line)")
    lines = []
    while True:
        try:
            line = input("   > ")
        except (EOFError, KeyboardInterrupt):
            break
        if not line.strip():
            break
        lines.append(line)
    return "\n".join(lines) if lines else (default or "")

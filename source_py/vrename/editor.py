"""
Launching the user's preferred text editor.
"""

import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from .name_file import NameFile
from .types import EditorError


def resolve_editor(override: Optional[str] = None,
                   environ: Optional[Mapping[str, str]] = None) -> str:
    """Pick the editor command: the explicit override, else $EDITOR."""
    if override:
        return override

    if environ is None:
        environ = os.environ
    editor = environ.get("EDITOR", "").strip()
    if not editor:
        raise EditorError("missing preferred editor (EDITOR) environment variable")
    return editor


def run_editor(editor: str, path: Path) -> None:
    """Open path in the editor and block until it exits.

    The editor shares our stdin, stdout and stderr so it can run
    interactively in the terminal.
    """
    try:
        command = shlex.split(editor)
    except ValueError as e:
        raise EditorError(f"cannot parse preferred text editor command {editor!r}: {e}") from e
    if not command:
        raise EditorError("preferred text editor command is empty")
    command.append(str(path))

    logging.info(f"Running editor: {command}")
    try:
        result = subprocess.run(command)
    except OSError as e:
        raise EditorError(f"failed to run preferred text editor: {e}") from e

    if result.returncode != 0:
        raise EditorError(
            f"preferred text editor exited with failure status ({result.returncode})"
        )


def edit_names(editor: str, file_names: Sequence[str]) -> Dict[str, str]:
    """Let the user edit file_names in the editor; return old -> new names."""
    with NameFile(file_names) as name_file:
        run_editor(editor, name_file.path)
        return name_file.read_back()

"""Installer: locate the git hooks directory and write stage scripts into it."""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from pathlib import Path

from hookman.core.errors import InstallError

logger = logging.getLogger(__name__)

SCRIPT_MODE = 0o755


def find_hook_dir(cwd: Path | None = None) -> Path:
    """Ask git where hooks live for the repository at *cwd* (honours core.hooksPath)."""
    cwd = cwd or Path.cwd()
    try:
        r = subprocess.run(
            ["git", "rev-parse", "--git-path", "hooks"],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise InstallError(cwd, f"cannot run git: {e}") from e
    if r.returncode != 0:
        raise InstallError(cwd, f"git rev-parse failed: {r.stderr.strip()}")

    out = r.stdout.strip()
    if not out:
        raise InstallError(cwd, "no git directory found")
    hook_dir = (cwd / out).resolve()
    logger.debug("hook directory: %s", hook_dir)
    return hook_dir


def write_script(path: Path, contents: str) -> None:
    """Write *contents* to *path* as an executable file, replacing any existing file."""
    tmp = None
    try:
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(contents)
        os.chmod(tmp, SCRIPT_MODE)
        os.replace(tmp, path)
    except OSError as e:
        if tmp is not None:
            Path(tmp).unlink(missing_ok=True)
        raise InstallError(path, f"cannot write hook script: {e}") from e


def install_scripts(scripts: dict[str, str], hook_dir: Path) -> list[Path]:
    """Write one script per stage into *hook_dir*. Returns the written paths.

    Stops at the first failure; scripts written before it are left in place.
    """
    if not hook_dir.is_dir():
        raise InstallError(hook_dir, "hook directory does not exist")
    if not os.access(hook_dir, os.W_OK | os.X_OK):
        raise InstallError(hook_dir, "hook directory is not writable")

    written: list[Path] = []
    for stage, contents in scripts.items():
        path = hook_dir / stage
        logger.info("writing %s hook to %s", stage, path)
        write_script(path, contents)
        written.append(path)
    return written

"""The install pipeline: load, merge, group, render, write."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from hookman.core.config import Config
from hookman.hooks import find_hook_dir, group_by_stage, install_scripts, render_scripts

logger = logging.getLogger(__name__)


@dataclass
class InstallResult:
    scripts: dict[str, str] = field(default_factory=dict)
    written: list[Path] = field(default_factory=list)
    hook_dir: Path | None = None


def build_scripts(config: Config) -> dict[str, str]:
    """Render the script text for every stage that has hooks, keyed by stage."""
    effective = config.load_hooks()
    if effective.is_empty():
        logger.info("no hooks configured, nothing to install")
        return {}
    groups = group_by_stage(effective)
    logger.debug("hooks per stage: %s", {s: [h.name for h in hs] for s, hs in groups.items()})
    return render_scripts(groups)


def install_hooks(
    config: Config, hook_dir: Path | None = None, dry_run: bool = False
) -> InstallResult:
    """Regenerate all stage scripts. Config errors abort before anything is written."""
    result = InstallResult(scripts=build_scripts(config))
    if dry_run or not result.scripts:
        return result

    result.hook_dir = hook_dir or find_hook_dir(config.cwd)
    result.written = install_scripts(result.scripts, result.hook_dir)
    return result

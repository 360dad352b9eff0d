"""Combine the global and local hook sets into one effective config."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from .models import EffectiveConfig, HookSet
from .parser import load_hook_set

logger = logging.getLogger(__name__)


def merge_hook_sets(global_set: HookSet | None, local_set: HookSet | None) -> EffectiveConfig:
    """Merge two sources; local hooks override global ones with the same stage and name.

    An overriding hook takes the global hook's position and records its name in
    ``original_name``. Local hooks with new names are appended in local order.
    """
    if global_set is None and local_set is None:
        return EffectiveConfig()
    if global_set is None:
        return local_set
    if local_set is None:
        return global_set

    overrides = {h.key: h for h in local_set}
    merged = []
    for hook in global_set:
        local = overrides.pop(hook.key, None)
        if local is None:
            merged.append(hook)
            continue
        logger.info("local hook '%s' (%s) overrides global hook", local.name, local.stage)
        merged.append(replace(local, original_name=hook.name))
    # overrides now holds only local-only hooks, still in local order
    merged.extend(overrides.values())
    return EffectiveConfig(hooks=tuple(merged), source=local_set.source)


def load_effective_config(
    global_path: Path | None = None, local_path: Path | None = None
) -> EffectiveConfig:
    """Load whichever of the two config files exist and merge them."""
    sources = []
    for label, path in (("global", global_path), ("local", local_path)):
        if path is None or not path.is_file():
            logger.debug("no %s configuration found at %s", label, path)
            sources.append(None)
            continue
        sources.append(load_hook_set(path))
    effective = merge_hook_sets(*sources)
    logger.debug("effective hooks: %s", effective.names())
    return effective

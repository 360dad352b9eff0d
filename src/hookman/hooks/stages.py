"""Partition an effective config by stage."""

from __future__ import annotations

from .models import EffectiveConfig, HookDef


def group_by_stage(config: EffectiveConfig) -> dict[str, list[HookDef]]:
    """Map each stage that has hooks to its hooks, in merged order.

    Stages appear in order of their first hook; stages without hooks are absent.
    """
    groups: dict[str, list[HookDef]] = {}
    for hook in config:
        groups.setdefault(hook.stage, []).append(hook)
    return groups

"""Hooks: config model, parsing, merging, grouping, rendering, installation."""

from .installer import find_hook_dir, install_scripts, write_script
from .merge import load_effective_config, merge_hook_sets
from .models import DEFAULT_STAGE, STAGES, EffectiveConfig, HookDef, HookSet
from .parser import load_hook_set, parse_config_text, parse_hook_def, parse_hook_set
from .renderer import command_words, function_names, render_script, render_scripts, shell_name
from .stages import group_by_stage

__all__ = [
    "DEFAULT_STAGE",
    "STAGES",
    "EffectiveConfig",
    "HookDef",
    "HookSet",
    "find_hook_dir",
    "command_words",
    "function_names",
    "group_by_stage",
    "install_scripts",
    "load_effective_config",
    "load_hook_set",
    "merge_hook_sets",
    "parse_config_text",
    "parse_hook_def",
    "parse_hook_set",
    "render_script",
    "render_scripts",
    "shell_name",
    "write_script",
]

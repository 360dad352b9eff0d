"""Config parsing: parse_hook_def, parse_hook_set, parse_config_text, load_hook_set."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from hookman.core.errors import ConfigParseError

from .models import DEFAULT_STAGE, STAGES, HookDef, HookSet

logger = logging.getLogger(__name__)


def _field(raw: dict, key: str, kind: type, where: str, source: str, default=None):
    if key not in raw:
        if default is None:
            raise ConfigParseError(source, f"{where}: missing required field '{key}'")
        return default
    value = raw[key]
    if not isinstance(value, kind):
        raise ConfigParseError(
            source, f"{where}: field '{key}' must be a {kind.__name__}, got {value!r}"
        )
    return value


def parse_hook_def(raw: dict, source: str = "<config>", index: int = 0) -> HookDef:
    """Build a HookDef from one ``[[hooks]]`` table. Unknown keys are ignored."""
    where = f"hooks[{index}]"
    if not isinstance(raw, dict):
        raise ConfigParseError(source, f"{where} must be a table")

    name = _field(raw, "name", str, where, source)
    if not name.strip():
        raise ConfigParseError(source, f"{where}: field 'name' must not be empty")
    where = f"hook '{name}'"
    command = _field(raw, "command", str, where, source)
    if not command.strip():
        raise ConfigParseError(source, f"{where}: field 'command' must not be empty")
    if all(not line.strip() or line.lstrip().startswith("#") for line in command.splitlines()):
        raise ConfigParseError(source, f"{where}: field 'command' contains only comments")
    if command.endswith("\\"):
        raise ConfigParseError(
            source, f"{where}: field 'command' must not end with a line continuation"
        )
    stage = _field(raw, "stage", str, where, source, default=DEFAULT_STAGE)
    if stage not in STAGES:
        raise ConfigParseError(source, f"{where}: unknown stage '{stage}'")

    return HookDef(
        name=name,
        command=command,
        stage=stage,
        background=_field(raw, "background", bool, where, source, default=False),
        pass_git_files=_field(raw, "pass_git_files", bool, where, source, default=False),
    )


def parse_hook_set(data: dict, source: str = "<config>") -> HookSet:
    """Parse a decoded config document into a HookSet."""
    settings = data.get("hookman", {})
    if not isinstance(settings, dict):
        raise ConfigParseError(source, "'hookman' must be a table")

    raw_hooks = data.get("hooks", [])
    if not isinstance(raw_hooks, list):
        raise ConfigParseError(source, "'hooks' must be an array of tables")

    hooks: list[HookDef] = []
    seen: set[tuple[str, str]] = set()
    for i, raw in enumerate(raw_hooks):
        hook = parse_hook_def(raw, source, i)
        if hook.key in seen:
            raise ConfigParseError(
                source, f"duplicate hook name '{hook.name}' in stage '{hook.stage}'"
            )
        seen.add(hook.key)
        hooks.append(hook)
    return HookSet(hooks=tuple(hooks), source=source)


def parse_config_text(text: str, source: str = "<config>") -> HookSet:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(source, f"invalid TOML: {e}") from e
    return parse_hook_set(data, source)


def load_hook_set(path: Path) -> HookSet:
    """Read and parse one config file."""
    logger.info("reading configuration from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(path, f"cannot read config file: {e}") from e
    hook_set = parse_config_text(text, str(path))
    logger.debug("parsed %d hook(s) from %s", len(hook_set), path)
    return hook_set

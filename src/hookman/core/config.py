"""Configuration: env, paths, config-file locations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import click
from dotenv import load_dotenv

from hookman.core.errors import ConfigParseError
from hookman.hooks import EffectiveConfig, load_effective_config

CONFIG_FILE_NAME = "hookman.toml"

_TRUTHY = ("1", "true", "yes", "on")


def _default_global_dir() -> Path:
    return Path(click.get_app_dir("hookman"))


@dataclass
class Config:
    cwd: Path = field(default_factory=Path.cwd)
    global_dir: Path = field(default_factory=_default_global_dir)
    local_path: Path | None = None  # explicit override; None = cwd / hookman.toml
    use_global: bool = True
    verbose: bool = False

    @property
    def global_path(self) -> Path | None:
        return self.global_dir / CONFIG_FILE_NAME if self.use_global else None

    @property
    def local_config_path(self) -> Path:
        if self.local_path is not None:
            return self.local_path if self.local_path.is_absolute() else self.cwd / self.local_path
        return self.cwd / CONFIG_FILE_NAME

    def load_hooks(self) -> EffectiveConfig:
        """Read the global and local sources and merge them."""
        local = self.local_config_path
        if self.local_path is not None and not local.is_file():
            raise ConfigParseError(local, "config file not found")
        return load_effective_config(self.global_path, local)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def load_config(
    config_path: str | None = None,
    no_global: bool = False,
    verbose: bool = False,
    cwd: Path | None = None,
) -> Config:
    """Load config with priority: CLI args > env > .env > defaults."""
    load_dotenv()

    config = Config(cwd=cwd or Path.cwd())

    if global_dir := os.getenv("HOOKMAN_GLOBAL_DIR"):
        config.global_dir = Path(global_dir).expanduser()
    if local := os.getenv("HOOKMAN_CONFIG"):
        config.local_path = Path(local).expanduser()
    if _env_flag("HOOKMAN_NO_GLOBAL"):
        config.use_global = False
    if _env_flag("HOOKMAN_VERBOSE"):
        config.verbose = True

    if config_path:
        config.local_path = Path(config_path).expanduser()
    if no_global:
        config.use_global = False
    if verbose:
        config.verbose = True

    return config

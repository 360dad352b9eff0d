"""Commands: the install pipeline and project scaffolding."""

from .install import InstallResult, build_scripts, install_hooks
from .scaffold import EXAMPLE_CONFIG, init_project

__all__ = [
    "EXAMPLE_CONFIG",
    "InstallResult",
    "build_scripts",
    "init_project",
    "install_hooks",
]

"""Project scaffolding: example config and `hookman init`."""

from __future__ import annotations

from pathlib import Path

from hookman.core.config import CONFIG_FILE_NAME

EXAMPLE_CONFIG = """\
# hookman configuration. Run `hookman install` after editing.
[hookman]

[[hooks]]
name = "Test"
command = "pytest"
stage = "pre-push"

[[hooks]]
name = "Generate tags"
command = "ctags --tag-relative=yes -Rf .git/tags"
stage = "post-commit"
background = true
pass_git_files = true

[[hooks]]
name = "Lint"
command = "pylint"
"""


def init_project(cwd: Path | None = None) -> list[str]:
    """Write an example hookman.toml. Returns list of created paths."""
    cwd = cwd or Path.cwd()
    created: list[str] = []

    config_path = cwd / CONFIG_FILE_NAME
    if not config_path.exists():
        config_path.write_text(EXAMPLE_CONFIG)
        created.append(str(config_path.relative_to(cwd)))

    return created

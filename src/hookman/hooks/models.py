"""Hook data models: STAGES, HookDef, HookSet, EffectiveConfig."""

from __future__ import annotations

from dataclasses import dataclass

# Every hook name git will execute from the hooks directory.
STAGES = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "pre-merge-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "proc-receive",
    "post-receive",
    "post-update",
    "reference-transaction",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
    "fsmonitor-watchman",
    "post-index-change",
)

DEFAULT_STAGE = "pre-commit"


@dataclass(frozen=True)
class HookDef:
    """A single configured hook: a shell command bound to a stage."""

    name: str
    command: str
    stage: str = DEFAULT_STAGE
    background: bool = False
    pass_git_files: bool = False
    original_name: str | None = None  # set when a local hook overrides a global one

    @property
    def key(self) -> tuple[str, str]:
        return (self.stage, self.name)

    @property
    def shell_command(self) -> str:
        if self.pass_git_files:
            return f"{self.command} $(git ls-files)"
        return self.command


@dataclass(frozen=True)
class HookSet:
    """Ordered hooks from one config source. Order is execution order."""

    hooks: tuple[HookDef, ...] = ()
    source: str | None = None

    def __iter__(self):
        return iter(self.hooks)

    def __len__(self) -> int:
        return len(self.hooks)

    def names(self) -> list[str]:
        return [h.name for h in self.hooks]

    def is_empty(self) -> bool:
        return not self.hooks


# The merged result has the same shape; the alias names its role.
EffectiveConfig = HookSet

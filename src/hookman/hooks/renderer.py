"""Script rendering: one bash script per stage, one shell function per hook."""

from __future__ import annotations

import re
import shlex
from collections.abc import Sequence

from .models import HookDef

SHEBANG = "#!/usr/bin/env bash"

# Function names that would shadow the entry point or a builtin the hooks may call.
RESERVED_NAMES = frozenset(
    {
        "main",
        "alias", "bg", "break", "builtin", "cd", "command", "continue", "declare",
        "echo", "eval", "exec", "exit", "export", "false", "fg", "getopts", "hash",
        "kill", "let", "local", "printf", "pwd", "read", "readonly", "return", "set",
        "shift", "source", "test", "trap", "true", "type", "ulimit", "umask",
        "unset", "wait",
    }
)

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]+")


def shell_name(name: str) -> str:
    """Turn a hook name into a valid shell function identifier."""
    ident = _INVALID_CHARS.sub("_", name.strip()).strip("_") or "hook"
    if ident[0].isdigit():
        ident = f"_{ident}"
    return ident


def command_words(hook: HookDef) -> set[str]:
    """Words in the hook's command that bash could resolve to a function."""
    lexer = shlex.shlex(hook.command, posix=True, punctuation_chars=True)
    lexer.whitespace_split = True
    try:
        words = set(lexer)
    except ValueError:
        words = set(hook.command.split())
    if hook.pass_git_files:
        words.add("git")
    return words


def function_names(hooks: Sequence[HookDef]) -> list[str]:
    """Unique function names for *hooks*, in order.

    A name never shadows a word used by any command in the same script.
    """
    taken = set(RESERVED_NAMES)
    for hook in hooks:
        taken |= command_words(hook)
    names = []
    for hook in hooks:
        base = shell_name(hook.name)
        candidate, n = base, 1
        while candidate in taken:
            n += 1
            candidate = f"{base}_{n}"
        taken.add(candidate)
        names.append(candidate)
    return names


def _function(func: str, hook: HookDef) -> list[str]:
    lines = [f"{func}() {{"]
    if hook.original_name is not None:
        message = f"hookman: running {hook.name} (overrides global hook {hook.original_name})"
        lines.append(f"    echo {shlex.quote(message)} >&2")
    # multi-line commands keep their own indentation (heredocs must stay verbatim)
    lines.append(f"    {hook.shell_command}")
    lines.append("}")
    return lines


def render_script(stage: str, hooks: Sequence[HookDef]) -> str:
    """Render the script git runs for *stage*.

    Hooks run in order; background hooks are started with ``&`` and never
    waited on. ``set -euo pipefail`` makes a failing foreground hook abort the
    rest of the stage.
    """
    names = function_names(hooks)
    lines = [
        SHEBANG,
        f"# {stage} hook generated by hookman. Re-run `hookman install` to regenerate.",
        "",
        "set -euo pipefail",
        "",
    ]
    for func, hook in zip(names, hooks):
        lines.extend(_function(func, hook))
        lines.append("")

    lines.append("main() {")
    for func, hook in zip(names, hooks):
        lines.append(f"    {func} &" if hook.background else f"    {func}")
    lines.append("}")
    lines.append("")
    lines.append("main")
    return "\n".join(lines) + "\n"


def render_scripts(groups: dict[str, Sequence[HookDef]]) -> dict[str, str]:
    """Render every non-empty stage group."""
    return {stage: render_script(stage, hooks) for stage, hooks in groups.items() if hooks}

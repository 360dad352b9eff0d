"""Tests for script rendering: shape, function names, background dispatch."""

import os
import shutil
import subprocess

import pytest

from hookman.hooks import (
    HookDef,
    command_words,
    function_names,
    render_script,
    render_scripts,
    shell_name,
)

needs_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not installed")


def _run(tmp_path, hooks, stage="pre-commit", **kwargs):
    path = tmp_path / stage
    path.write_text(render_script(stage, hooks))
    env = {**os.environ, "FUNCNEST": "50"}
    if "stdout" not in kwargs:
        kwargs["capture_output"] = True
    return subprocess.run(
        ["bash", str(path)], cwd=tmp_path, env=env, text=True, timeout=30, **kwargs
    )


def _main_body(script: str) -> list[str]:
    lines = script.splitlines()
    start = lines.index("main() {")
    end = lines.index("}", start)
    return [line.strip() for line in lines[start + 1 : end]]


class TestShellName:
    def test_plain_name_kept(self):
        assert shell_name("Lint") == "Lint"

    def test_spaces_become_underscores(self):
        assert shell_name("Generate tags") == "Generate_tags"

    def test_punctuation(self):
        assert shell_name("run: mypy --strict") == "run_mypy_strict"

    def test_leading_digit(self):
        assert shell_name("2fa check") == "_2fa_check"

    def test_nothing_usable(self):
        assert shell_name("!!!") == "hook"


class TestFunctionNames:
    def test_unique(self):
        hooks = [
            HookDef(name="a b", command="x"),
            HookDef(name="a_b", command="y"),
            HookDef(name="a-b", command="z"),
        ]
        assert function_names(hooks) == ["a_b", "a_b_2", "a_b_3"]

    def test_reserved_names_suffixed(self):
        hooks = [HookDef(name="main", command="x"), HookDef(name="test", command="y")]
        assert function_names(hooks) == ["main_2", "test_2"]

    def test_name_matching_own_command(self):
        assert function_names([HookDef(name="pytest", command="pytest")]) == ["pytest_2"]

    def test_name_matching_other_hooks_command(self):
        hooks = [
            HookDef(name="Lint", command="ls >/dev/null"),
            HookDef(name="ls", command="echo hook"),
        ]
        assert function_names(hooks) == ["Lint", "ls_2"]

    def test_pass_git_files_reserves_git(self):
        hooks = [HookDef(name="git", command="pylint", pass_git_files=True)]
        assert function_names(hooks) == ["git_2"]

    def test_non_clashing_name_kept(self):
        assert function_names([HookDef(name="Lint", command="pylint")]) == ["Lint"]


class TestCommandWords:
    def test_splits_on_operators(self):
        words = command_words(HookDef(name="Fmt", command="black --check .&&isort .|cat"))
        assert {"black", "isort", "cat"} <= words

    def test_subshell(self):
        words = command_words(HookDef(name="Lint", command="pylint $(find . -name '*.py')"))
        assert "find" in words
        assert "pylint" in words

    def test_unbalanced_quotes_fall_back(self):
        words = command_words(HookDef(name="Say", command="echo 'oops"))
        assert words == {"echo", "'oops"}


class TestRenderScript:
    def test_shape(self):
        script = render_script("pre-commit", [HookDef(name="Lint", command="pylint")])
        lines = script.splitlines()
        assert lines[0].startswith("#!")
        assert "bash" in lines[0]
        assert "set -euo pipefail" in lines
        assert lines[-1] == "main"
        assert script.endswith("\n")
        # functions are defined before main
        assert script.index("Lint() {") < script.index("main() {")

    def test_round_trip_scenario(self):
        script = render_script("pre-commit", [HookDef(name="Lint", command="pylint")])
        assert "Lint() {\n    pylint\n}" in script
        assert "echo" not in script
        assert _main_body(script) == ["Lint"]

    def test_override_echo_before_command(self):
        hook = HookDef(name="Lint", command="pylint", original_name="Lint")
        script = render_script("pre-commit", [hook])
        body = script[script.index("Lint() {") : script.index("main() {")]
        echo_at = body.index("echo ")
        assert echo_at < body.index("    pylint")
        assert ">&2" in body
        assert "overrides global hook Lint" in body

    def test_command_verbatim(self):
        cmd = 'test -z "$(git diff --cached --name-only | grep secret)" && echo ok'
        script = render_script("pre-commit", [HookDef(name="Secrets", command=cmd)])
        assert f"    {cmd}\n" in script

    def test_pass_git_files(self):
        hook = HookDef(name="Lint", command="pylint", pass_git_files=True)
        script = render_script("pre-commit", [hook])
        assert "    pylint $(git ls-files)\n" in script

    def test_background_dispatch(self):
        hooks = [
            HookDef(name="F", command="make check"),
            HookDef(name="B", command="ctags -R", background=True),
        ]
        assert _main_body(render_script("post-commit", hooks)) == ["F", "B &"]

    def test_background_first_does_not_block(self):
        hooks = [
            HookDef(name="B", command="ctags -R", background=True),
            HookDef(name="F", command="make check"),
        ]
        assert _main_body(render_script("post-commit", hooks)) == ["B &", "F"]

    def test_order_preserved(self):
        hooks = [HookDef(name=n, command=n.lower()) for n in ("C", "A", "B")]
        assert _main_body(render_script("pre-push", hooks)) == ["C", "A", "B"]

    def test_spaced_name_uses_sanitised_function(self):
        hook = HookDef(name="Generate tags", command="ctags")
        script = render_script("post-commit", [hook])
        assert "Generate_tags() {" in script
        assert _main_body(script) == ["Generate_tags"]

    def test_stage_in_header(self):
        script = render_script("pre-push", [HookDef(name="T", command="pytest")])
        assert "pre-push" in script.splitlines()[1]

    @needs_bash
    def test_runs_hooks_in_order(self, tmp_path):
        hooks = [
            HookDef(name="First", command="echo one"),
            HookDef(name="Second", command="echo two"),
        ]
        r = _run(tmp_path, hooks)
        assert r.returncode == 0, r.stderr
        assert r.stdout == "one\ntwo\n"
        assert r.stderr == ""

    @needs_bash
    def test_failing_hook_stops_the_rest(self, tmp_path):
        hooks = [
            HookDef(name="A", command="echo a"),
            HookDef(name="B", command="exit 3"),
            HookDef(name="C", command="echo c"),
        ]
        r = _run(tmp_path, hooks)
        assert r.returncode == 3
        assert r.stdout == "a\n"

    @needs_bash
    def test_failing_pipeline_stops_the_rest(self, tmp_path):
        hooks = [
            HookDef(name="A", command="false | cat"),
            HookDef(name="B", command="echo b"),
        ]
        r = _run(tmp_path, hooks)
        assert r.returncode != 0
        assert r.stdout == ""

    @needs_bash
    def test_background_hook_does_not_block(self, tmp_path):
        hooks = [
            HookDef(name="Slow", command="sleep 2; touch slow_done", background=True),
            HookDef(name="Fast", command="[ ! -e slow_done ] && touch fast_done"),
        ]
        r = _run(tmp_path, hooks, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        assert r.returncode == 0
        assert (tmp_path / "fast_done").exists()

    @needs_bash
    def test_override_echo_goes_to_stderr(self, tmp_path):
        hook = HookDef(name="Lint", command="echo linted", original_name="Lint")
        r = _run(tmp_path, [hook])
        assert r.returncode == 0, r.stderr
        assert r.stdout == "linted\n"
        assert "overrides global hook Lint" in r.stderr

    @needs_bash
    def test_hook_named_after_its_command(self, tmp_path):
        r = _run(tmp_path, [HookDef(name="ls", command="ls >/dev/null")])
        assert r.returncode == 0, r.stderr

    @needs_bash
    def test_hook_name_does_not_hijack_other_command(self, tmp_path):
        hooks = [
            HookDef(name="Lint", command="ls >/dev/null && echo listed"),
            HookDef(name="ls", command="echo hook"),
        ]
        r = _run(tmp_path, hooks)
        assert r.returncode == 0, r.stderr
        assert r.stdout == "listed\nhook\n"


class TestRenderScripts:
    def test_one_script_per_stage(self):
        groups = {
            "pre-commit": [HookDef(name="Lint", command="pylint")],
            "pre-push": [HookDef(name="Test", command="pytest", stage="pre-push")],
        }
        scripts = render_scripts(groups)
        assert list(scripts) == ["pre-commit", "pre-push"]
        assert "pylint" in scripts["pre-commit"]
        assert "pytest" in scripts["pre-push"]

    def test_empty_stage_skipped(self):
        assert render_scripts({"pre-commit": []}) == {}

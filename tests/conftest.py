"""Shared test fixtures for gitsniffer tests."""

import subprocess

import pytest

from gitsniffer.config import SnifferConfig
from gitsniffer.models import ToolConfig, ToolFamily, ToolResult
from gitsniffer.runner import ProcessRunner


class FakeRunner(ProcessRunner):
    """ProcessRunner that records every call instead of starting processes."""

    def __init__(
        self,
        diff="",
        head=True,
        outputs=None,
        test_status=0,
        test_lines=(),
        add_status=0,
    ):
        super().__init__()
        self.diff = diff
        self.head = head
        self.outputs = outputs or {}
        self.test_status = test_status
        self.test_lines = list(test_lines)
        self.add_status = add_status
        self.calls = []
        self.commands = []
        self.streamed = []

    def git(self, *args):
        cmd = ["git", *args]
        self.calls.append(cmd)
        if args[:2] == ("rev-parse", "--verify"):
            if self.head:
                return subprocess.CompletedProcess(cmd, 0, stdout="0f1e2d3c\n", stderr="")
            return subprocess.CompletedProcess(
                cmd, 128, stdout="", stderr="fatal: Needed a single revision\n"
            )
        if args[0] == "diff-index":
            return subprocess.CompletedProcess(cmd, 0, stdout=self.diff, stderr="")
        if args[0] == "add":
            return subprocess.CompletedProcess(cmd, self.add_status, stdout="", stderr="")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    def run(self, command):
        self.calls.append(command.argv)
        self.commands.append(command)
        output = self.outputs.get(command.tool, "")
        return ToolResult(tool=command.tool, output=output, exit_status=1 if output else 0)

    def stream(self, argv, on_line=print):
        self.calls.append(list(argv))
        self.streamed.append(list(argv))
        for line in self.test_lines:
            on_line(line)
        return self.test_status

    @property
    def git_add_calls(self):
        return [c for c in self.calls if c[:2] == ["git", "add"]]

    def commands_for(self, tool):
        return [c for c in self.commands if c.tool == tool]


def _make_config(
    phpcs=True,
    fixer=True,
    eslint=True,
    php_extensions=("php",),
    eslint_extensions=("js",),
    eslint_ignore_path="",
    phpcs_ignore=(),
    run_tests=False,
    env="local",
    app_env="local",
):
    config = SnifferConfig(env=env, app_env=app_env)
    if phpcs:
        config.phpcs = ToolConfig(
            family=ToolFamily.PHPCS,
            binary="vendor/bin/phpcs",
            fixer="vendor/bin/phpcbf" if fixer else "",
            extensions=tuple(php_extensions),
            standard="PSR2",
            encoding="utf-8",
            ignore_patterns=tuple(phpcs_ignore),
        )
    if eslint:
        config.eslint = ToolConfig(
            family=ToolFamily.ESLINT,
            binary="node_modules/.bin/eslint",
            config_path=".eslintrc.json",
            ignore_path=eslint_ignore_path,
            extensions=tuple(eslint_extensions),
        )
    config.run_tests = run_tests
    config.test_bin = "vendor/bin/phpunit"
    return config


@pytest.fixture
def make_config():
    """Factory for a SnifferConfig with both tool families configured."""
    return _make_config


@pytest.fixture
def make_runner():
    """Factory for a FakeRunner."""
    return FakeRunner


@pytest.fixture
def all_exist():
    return lambda path: True

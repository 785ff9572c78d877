"""gitsniffer init command — bootstrap project config and the git hook."""

from __future__ import annotations

import stat
import subprocess
import sys
from pathlib import Path

from gitsniffer.config import CONFIG_FILENAME

# ---------------------------------------------------------------------------
# Template builders
# ---------------------------------------------------------------------------


def _build_gitsniffer_yml() -> str:
    return """\
# .gitsniffer.yml — gitsniffer configuration
#
# Checks only run when the active environment (app_env, falling back to
# $APP_ENV, then "local") equals env.
env: local
# app_env: local

# ---------------------------------------------------------------------------
# PHP_CodeSniffer: phpcbf fixes staged files in place and re-stages them,
# then phpcs reports what is left. Set bin to null to disable.
# ---------------------------------------------------------------------------
phpcs:
  bin: ./vendor/bin/phpcs
  fixer_bin: ./vendor/bin/phpcbf
  standard: PSR2
  encoding: utf-8
  extensions: [php]
  ignore: []

# ---------------------------------------------------------------------------
# ESLint: config is required when bin is set; without ignore_path
# ESLint runs with --no-ignore.
# ---------------------------------------------------------------------------
eslint:
  bin: null
  config: .eslintrc.json
  ignore_path: null
  extensions: [js]

# ---------------------------------------------------------------------------
# Test suite: runs after linting passes, a non-zero exit blocks the commit
# ---------------------------------------------------------------------------
tests:
  enabled: false
  bin: ./vendor/bin/phpunit
"""


def _build_pre_commit_hook() -> str:
    return f"""\
#!/bin/sh
# Installed by gitsniffer init
exec "{sys.executable}" -m gitsniffer check
"""


def _git_hooks_dir(root: Path) -> Path | None:
    """Locate the hooks directory of the repository containing ``root``."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--git-path", "hooks"],
            capture_output=True,
            text=True,
            check=True,
            cwd=root,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    hooks_dir = Path(result.stdout.strip())
    if not hooks_dir.is_absolute():
        hooks_dir = root / hooks_dir
    return hooks_dir


def _write_file(path: Path, content: str, force: bool) -> bool:
    """Write content unless the file exists and ``force`` is not set."""
    if path.exists() and not force:
        print(f"⏭️  {path} already exists (use --force to overwrite)", file=sys.stderr)
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"📝 Wrote {path}", file=sys.stderr)
    return True


def init_command(args) -> int:
    """Write .gitsniffer.yml and install the pre-commit hook."""
    root = Path(getattr(args, "path", None) or ".").resolve()
    force = getattr(args, "force", False)

    if not root.is_dir():
        print(f"❌ {root} is not a directory", file=sys.stderr)
        return 1

    _write_file(root / CONFIG_FILENAME, _build_gitsniffer_yml(), force)

    if getattr(args, "no_hook", False):
        return 0

    hooks_dir = _git_hooks_dir(root)
    if hooks_dir is None:
        print(f"❌ {root} is not inside a git repository; hook not installed", file=sys.stderr)
        return 1

    hook_path = hooks_dir / "pre-commit"
    if _write_file(hook_path, _build_pre_commit_hook(), force):
        mode = hook_path.stat().st_mode
        hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    print("✅ gitsniffer initialized", file=sys.stderr)
    return 0

#!/usr/bin/env python3
"""Git pre-commit hook for gitsniffer.

Install by copying or symlinking this file to `.git/hooks/pre-commit`
(or run `gitsniffer init`), or use with the pre-commit framework:

    # .pre-commit-config.yaml
    repos:
      - repo: local
        hooks:
          - id: gitsniffer
            name: gitsniffer PHP_CodeSniffer / ESLint check
            entry: python -m gitsniffer check
            language: python
            pass_filenames: false
            always_run: true
"""

from __future__ import annotations

import subprocess
import sys


def main() -> int:
    """Run gitsniffer on staged changes."""
    cmd = [
        sys.executable,
        "-m",
        "gitsniffer",
        "check",
        *sys.argv[1:],
    ]

    result = subprocess.run(cmd)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())

"""gitsniffer — pre-commit gate running PHP_CodeSniffer and ESLint on staged files."""

__version__ = "0.1.0"

"""Shared Rich console instances for CLI output."""

from rich.console import Console

console = Console()

# Diagnostics for environment errors (missing files, failed writes) go to stderr
error_console = Console(stderr=True)

__all__ = ["console", "error_console"]

"""safeinput-toolkit - validated console prompts, a CSV record collector and a file scanner."""

__version__ = "0.1.0"

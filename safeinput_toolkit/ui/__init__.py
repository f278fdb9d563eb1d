"""Console presentation helpers."""

from .header import format_header
from .header import pretty_header

__all__ = ["format_header", "pretty_header"]

"""Shared result types produced by the scanners."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class KeyMatch:
    """A single secret detected in a file.

    ``key`` always holds the masked form of the secret, never the raw value.
    ``hardcoded`` tells whether the secret looks like a literal in the file
    rather than a value read at runtime.
    """

    file_path: Path
    line_number: int
    provider: str
    key: str
    hardcoded: bool
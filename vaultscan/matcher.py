"""Line-by-line secret matching, masking and the hardcoded heuristic."""

from __future__ import annotations

import hashlib
from collections.abc import Iterable, Iterator
from pathlib import Path

from .models import KeyMatch
from .patterns import SecretPattern


def hash_text(text: str) -> str:
    """Return a hex digest identifying ``text`` without revealing it."""
    return hashlib.blake2b(text.encode("utf-8"), digest_size=32).hexdigest()


def _lines(content: str) -> Iterator[str]:
    """Split on newlines, dropping a trailing carriage return from each line."""
    if not content:
        return
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def find_matches(
    file_path: str | Path,
    content: str,
    patterns: Iterable[SecretPattern],
    hardcoded_by_default: bool,
) -> Iterator[tuple[KeyMatch, str]]:
    """Yield ``(match, key_hash)`` for every secret found in ``content``.

    Lines are visited in order; on each line every pattern is applied in
    order. ``key_hash`` is the digest of the raw, unmasked key.
    """
    path = Path(file_path)
    pattern_list = list(patterns)
    for number, line in enumerate(_lines(content), start=1):
        for pattern in pattern_list:
            for found in pattern.regex.finditer(line):
                raw = found.group(1)
                if raw is None or not pattern.allows_key(raw):
                    continue
                yield (
                    KeyMatch(
                        file_path=path,
                        line_number=number,
                        provider=pattern.name,
                        key=mask_key(raw),
                        hardcoded=hardcoded_by_default or is_hardcoded_in_line(line, raw),
                    ),
                    hash_text(raw),
                )


def is_hardcoded_in_line(line: str, key: str) -> bool:
    """Guess whether ``key`` is written as a literal on ``line``.

    True when the key is quoted, or when the line contains the key together
    with an ``=`` or ``:``.
    """
    if any(f"{q}{key}{q}" in line for q in ('"', "'", "`")):
        return True
    trimmed = line.strip()
    return key in trimmed and ("=" in trimmed or ":" in trimmed)


def mask_key(val: str) -> str:
    """Keep the first 10 and last 4 characters of long keys; hide short ones."""
    if len(val) >= 12:
        return f"{val[:10]}...{val[-4:]}"
    return "****"
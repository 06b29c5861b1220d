"""Persistent per-file scan cache stored under ``.vault-cache/index.json``.

A file is rescanned only when its content hash differs from the one recorded
the last time it was scanned. The index is written atomically through a
temporary sibling file that is renamed into place.
"""

from __future__ import annotations

import json
import os
import time
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

_CACHE_DIR_NAME = ".vault-cache"
_INDEX_NAME = "index.json"


@dataclass(frozen=True)
class CacheMatch:
    """A stored match: the masked key and the digest of the raw key."""

    provider: str
    line_number: int
    key_masked: str
    hardcoded: bool
    key_hash: str

    @classmethod
    def _from_json(cls, data: dict[str, Any]) -> CacheMatch:
        return cls(
            provider=_expect(data["provider"], str),
            line_number=_expect(data["line_number"], int),
            key_masked=_expect(data["key_masked"], str),
            hardcoded=_expect(data["hardcoded"], bool),
            key_hash=_expect(data["key_hash"], str),
        )


@dataclass
class _CacheEntry:
    mtime_secs: int
    size_bytes: int
    content_hash: str
    matches: list[CacheMatch] = field(default_factory=list)

    @classmethod
    def _from_json(cls, data: dict[str, Any]) -> _CacheEntry:
        return cls(
            mtime_secs=_expect(data["mtime_secs"], int),
            size_bytes=_expect(data["size_bytes"], int),
            content_hash=_expect(data["content_hash"], str),
            matches=[CacheMatch._from_json(m) for m in _expect(data["matches"], list)],
        )

    def _to_json(self) -> dict[str, Any]:
        return {
            "mtime_secs": self.mtime_secs,
            "size_bytes": self.size_bytes,
            "content_hash": self.content_hash,
            "matches": [asdict(m) for m in self.matches],
        }


def _expect(value: Any, kind: type) -> Any:
    if kind is int and isinstance(value, bool):
        raise TypeError("expected an integer")
    if not isinstance(value, kind):
        raise TypeError(f"expected {kind.__name__}")
    return value


def _cache_dir(root: Path) -> Path:
    return root / _CACHE_DIR_NAME


def _cache_path(root: Path) -> Path:
    return _cache_dir(root) / _INDEX_NAME


def _path_key(root: Path, path: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def _file_signature(path: Path) -> tuple[int, int]:
    """Return ``(mtime_secs, size_bytes)``, or ``(0, 0)`` if unavailable."""
    try:
        info = path.stat()
    except OSError:
        return (0, 0)
    mtime = int(info.st_mtime)
    if mtime < 0:
        mtime = int(time.time())
    return (mtime, info.st_size)


def _parse_index(raw: str) -> tuple[int, dict[str, _CacheEntry]]:
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise TypeError("index must be an object")
    version = _expect(data["version"], int)
    entries = {
        _expect(key, str): _CacheEntry._from_json(value)
        for key, value in _expect(data["entries"], dict).items()
    }
    return version, entries


class Cache:
    """File-level scan cache rooted at a scan directory."""

    def __init__(
        self,
        root: str | Path,
        version: int = 0,
        entries: dict[str, _CacheEntry] | None = None,
    ) -> None:
        self.root = Path(root)
        self.version = version
        self._entries: dict[str, _CacheEntry] = dict(entries or {})
        self.dirty = False

    @classmethod
    def load(cls, root: str | Path) -> Cache:
        """Load the index under ``root``; a missing or broken index gives an empty cache."""
        root_path = Path(root)
        try:
            raw = _cache_path(root_path).read_text(encoding="utf-8")
            version, entries = _parse_index(raw)
        except (OSError, UnicodeDecodeError, ValueError, KeyError, TypeError):
            return cls(root_path)
        return cls(root_path, version, entries)

    def get_matches_with_hash(
        self, path: str | Path, content_hash: str
    ) -> list[CacheMatch] | None:
        """Return the cached matches for ``path`` if its content hash is unchanged."""
        entry = self._entries.get(_path_key(self.root, Path(path)))
        if entry is None or entry.content_hash != content_hash:
            return None
        return list(entry.matches)

    def store(self, path: str | Path, content_hash: str, matches: list[CacheMatch]) -> None:
        """Record the scan result for ``path``, replacing any previous entry."""
        file_path = Path(path)
        mtime_secs, size_bytes = _file_signature(file_path)
        self._entries[_path_key(self.root, file_path)] = _CacheEntry(
            mtime_secs=mtime_secs,
            size_bytes=size_bytes,
            content_hash=content_hash,
            matches=list(matches),
        )
        self.dirty = True

    def save(self) -> None:
        """Write the index atomically if anything was stored; I/O errors are ignored."""
        if not self.dirty:
            return
        path = _cache_path(self.root)
        try:
            _cache_dir(self.root).mkdir(parents=True, exist_ok=True)
        except OSError:
            pass
        document = {
            "version": self.version,
            "entries": {key: entry._to_json() for key, entry in self._entries.items()},
        }
        payload = json.dumps(document)
        tmp = path.with_name(path.name + ".tmp")
        try:
            tmp.write_text(payload, encoding="utf-8")
        except OSError:
            return
        try:
            os.replace(tmp, path)
        except OSError:
            pass
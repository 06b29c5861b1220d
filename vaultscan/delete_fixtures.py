"""Delete generated mock ``.env`` fixture files matching a prefix."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .env_fixtures import is_valid_prefix

DEFAULT_PREFIX = "vault_env"


def is_generated_env_file(path: str | Path, prefix: str) -> bool:
    """Return True if the file name starts with ``.env.<prefix>_``."""
    return Path(path).name.startswith(f".env.{prefix}_")


def collect_matches(directory: str | Path, prefix: str) -> list[Path]:
    """Return every generated fixture under ``directory``, sorted."""
    found: list[Path] = []
    pending = [Path(directory)]
    while pending:
        current = pending.pop()
        for entry in current.iterdir():
            if entry.is_dir():
                pending.append(entry)
            elif is_generated_env_file(entry, prefix):
                found.append(entry)
    return sorted(found)


def _validate(target_dir: Path, prefix: str) -> None:
    if not target_dir.is_dir():
        raise FileNotFoundError(f"target directory does not exist: {target_dir}")
    if not is_valid_prefix(prefix):
        raise ValueError("prefix must contain only letters, numbers, underscore or dash")


def main(argv: list[str] | None = None) -> int:
    """Delete (or with ``--dry-run`` list) matching fixtures; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="delete-mock-env-fixtures",
        description="Delete generated mock .env fixture files matching a given prefix",
    )
    parser.add_argument(
        "target_dir", type=Path, help="Root directory to scan for generated mock .env files."
    )
    parser.add_argument(
        "prefix", nargs="?", default=DEFAULT_PREFIX, help="Prefix used by the generator."
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Print matching files without deleting them."
    )
    args = parser.parse_args(argv)

    try:
        _validate(args.target_dir, args.prefix)
        matches = collect_matches(args.target_dir, args.prefix)
        for path in matches:
            print(path)
            if not args.dry_run:
                path.unlink()
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    pattern = f".env.{args.prefix}_*"
    if args.dry_run:
        print(f"dry-run: found {len(matches)} files matching {pattern} under {args.target_dir}")
    else:
        print(f"deleted {len(matches)} files matching {pattern} under {args.target_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
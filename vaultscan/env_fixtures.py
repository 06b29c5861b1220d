"""Generate nested ``.env`` fixture files holding mock provider keys."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from pathlib import Path

MOCK_FILE_PREFIX = "vault_env"
PROJECTS_PER_WORKSPACE = 20
TOKEN_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_-"
ALPHANUMERIC_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
HEX_CHARSET = "abcdef0123456789"


class RandomSource:
    """Draws random strings from a charset using a byte source."""

    def __init__(self, read: Callable[[int], bytes] = os.urandom) -> None:
        self._read = read

    def sample(self, charset: str, length: int) -> str:
        """Return ``length`` characters of ``charset``, one per random byte."""
        data = self._read(length)
        if len(data) != length:
            raise OSError("short read from random source")
        return "".join(charset[byte % len(charset)] for byte in data)


def is_valid_prefix(prefix: str) -> bool:
    """Return True if ``prefix`` is non-empty ASCII letters, digits, ``_`` or ``-``."""
    return bool(prefix) and all(
        (ch.isascii() and ch.isalnum()) or ch in "_-" for ch in prefix
    )


def openai_key(index: int, random: RandomSource) -> str:
    token = random.sample(TOKEN_CHARSET, 40)
    return f"sk-proj-{token}" if index % 2 == 0 else f"sk-{token}"


def gemini_key(random: RandomSource) -> str:
    return f"AIza{random.sample(TOKEN_CHARSET, 35)}"


def openrouter_key(random: RandomSource) -> str:
    return f"sk-or-v1-{random.sample(HEX_CHARSET, 64)}"


def grok_key(random: RandomSource) -> str:
    return random.sample(TOKEN_CHARSET, 48)


def anthropic_key(random: RandomSource) -> str:
    return f"sk-ant-{random.sample(TOKEN_CHARSET, 32)}"


def ollama_key(index: int, random: RandomSource) -> str:
    variant = index % 3
    if variant == 0:
        return f"ollama_{random.sample(TOKEN_CHARSET, 32)}"
    if variant == 1:
        return f"sk-ollama-{random.sample(TOKEN_CHARSET, 32)}"
    return f"{random.sample(HEX_CHARSET, 32)}.{random.sample(TOKEN_CHARSET, 24)}"


def deepseek_key(random: RandomSource) -> str:
    return f"sk-{random.sample(ALPHANUMERIC_CHARSET, 32)}"


def env_file_name(prefix: str, index: int) -> str:
    """Return the fixture file name; the suffix rotates with ``index``."""
    base = f".env.{prefix}_{index:03}"
    suffixes = {0: "", 1: ".local", 2: ".development", 3: ".production"}
    return base + suffixes.get(index % 5, ".test")


def build_env_fixture(index: int, prefix: str, random: RandomSource) -> str:
    """Return the contents of one fixture file."""
    lines = [
        "# Mock secrets generated for scanner testing only.",
        f"# Prefix marker: {prefix}",
        f"APP_NAME=fixture-{index:03}",
        "NODE_ENV=test",
        f"OPENAI_API_KEY={openai_key(index, random)}",
        f"GPT_API_KEY={openai_key(index + 1, random)}",
        f"OPENROUTER_API_KEY={openrouter_key(random)}",
        f"GEMINI_API_KEY={gemini_key(random)}",
        f"XAI_API_KEY={grok_key(random)}",
        f"ANTHROPIC_API_KEY={anthropic_key(random)}",
        f"OLLAMA_API_KEY={ollama_key(index, random)}",
        f"DEEPSEEK_API_KEY={deepseek_key(random)}",
    ]
    return "\n".join(lines) + "\n"


def generate_env_fixtures(
    target_dir: str | Path, count: int, prefix: str = MOCK_FILE_PREFIX
) -> list[Path]:
    """Write ``count`` fixture files under ``target_dir`` and return their paths.

    Files go to ``workspace-NN/project-NNN``, twenty projects per workspace.
    Raises ValueError for a non-positive count or an unsafe prefix.
    """
    if count <= 0:
        raise ValueError("count must be a positive integer")
    if not is_valid_prefix(prefix):
        raise ValueError("prefix must contain only letters, numbers, underscore or dash")

    root = Path(target_dir)
    root.mkdir(parents=True, exist_ok=True)
    random = RandomSource()
    created = []
    for index in range(1, count + 1):
        workspace_id = (index - 1) // PROJECTS_PER_WORKSPACE + 1
        fixture_dir = root / f"workspace-{workspace_id:02}" / f"project-{index:03}"
        fixture_dir.mkdir(parents=True, exist_ok=True)
        fixture_file = fixture_dir / env_file_name(prefix, index)
        fixture_file.write_text(build_env_fixture(index, prefix, random), encoding="utf-8")
        created.append(fixture_file)
    return created


def main(argv: list[str] | None = None) -> int:
    """Generate fixtures from command-line arguments; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="generate-mock-env-fixtures",
        description="Generate nested .env fixtures with mock provider keys for scanner testing",
    )
    parser.add_argument(
        "target_dir", type=Path, help="Root directory where nested fixture folders will be created."
    )
    parser.add_argument(
        "count", nargs="?", type=int, default=50, help="Number of .env files to generate."
    )
    parser.add_argument(
        "prefix",
        nargs="?",
        default=MOCK_FILE_PREFIX,
        help="Prefix embedded in the generated .env file name.",
    )
    args = parser.parse_args(argv)

    try:
        created = generate_env_fixtures(args.target_dir, args.count, args.prefix)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path in created:
        print(f"generated {path}")
    print(
        f"Created {len(created)} mock .env files under {args.target_dir} "
        f"using prefix {args.prefix}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
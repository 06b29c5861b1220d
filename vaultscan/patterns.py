"""Registry of detectable secret formats."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class SecretPattern:
    """Describes one provider's secret format.

    The secret itself is always the first capture group of ``regex``.
    Keys starting with any of ``excluded_prefixes`` belong to another
    provider and are rejected.
    """

    name: str
    short_name: str
    color: tuple[int, int, int]
    regex: re.Pattern[str]
    excluded_prefixes: tuple[str, ...] = ()

    def first_capture(self, line: str) -> str | None:
        """Return the first acceptable secret in ``line``, or None."""
        for found in self.regex.finditer(line):
            candidate = found.group(1)
            if candidate is not None and self.allows_key(candidate):
                return candidate
        return None

    def allows_key(self, key: str) -> bool:
        """Return True unless ``key`` starts with an excluded prefix."""
        return not any(key.startswith(prefix) for prefix in self.excluded_prefixes)


_PATTERNS: tuple[SecretPattern, ...] = (
    SecretPattern(
        name="OpenRouter API Key",
        short_name="OpenRtr",
        color=(0, 255, 255),
        regex=re.compile(
            r"(?:^|[^A-Za-z0-9])(sk-or-v1-[0-9a-fA-F]{64})(?:$|[^A-Za-z0-9])"
        ),
    ),
    SecretPattern(
        name="OpenAI API Key",
        short_name="OpenAI",
        color=(0, 255, 0),
        regex=re.compile(
            r"(?:^|[^A-Za-z0-9])((?:sk-proj-|sk-)[A-Za-z0-9_-]{32,})(?:$|[^A-Za-z0-9])"
        ),
        # OpenRouter keys also start with "sk-".
        excluded_prefixes=("sk-or-v1-",),
    ),
    SecretPattern(
        name="Deepseek API Key",
        short_name="DpSk",
        color=(255, 255, 0),
        regex=re.compile(r"(?:^|[^A-Za-z0-9])(sk-[a-zA-Z0-9]{32})(?:$|[^A-Za-z0-9])"),
    ),
    SecretPattern(
        name="Gemini API Key",
        short_name="Gemini",
        color=(0, 0, 255),
        regex=re.compile(r"(?:^|[^A-Za-z0-9])(AIza[0-9A-Za-z_-]{35})(?:$|[^A-Za-z0-9])"),
    ),
    SecretPattern(
        name="Grok API Key",
        short_name="Grok",
        color=(255, 0, 255),
        regex=re.compile(
            r"""(?:^|[^A-Za-z0-9_])XAI_API_KEY\s*[:=]\s*["']?([A-Za-z0-9._-]{24,})(?:["']|$)"""
        ),
    ),
    SecretPattern(
        name="Anthropic API Key",
        short_name="Anthro",
        color=(255, 165, 0),
        regex=re.compile(
            r"(?:^|[^A-Za-z0-9])(sk-ant-[A-Za-z0-9_-]{20,})(?:$|[^A-Za-z0-9])"
        ),
    ),
    SecretPattern(
        name="Ollama API Key",
        short_name="Ollama",
        color=(255, 100, 100),
        regex=re.compile(
            r"(?:^|[^A-Za-z0-9])((?:ollama_[A-Za-z0-9_-]{20,}"
            r"|sk-ollama-[A-Za-z0-9_-]{20,}"
            r"|[0-9a-fA-F]{32}\.[A-Za-z0-9_-]{20,}))(?:$|[^A-Za-z0-9])"
        ),
    ),
)


def get_patterns() -> list[SecretPattern]:
    """Return every registered secret pattern, in detection order."""
    return list(_PATTERNS)
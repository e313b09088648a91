"""Shell-style wildcard matching used by the file and method filters.

Only two wildcards are recognised: ``*`` matches any run of characters
(including none) and ``?`` matches exactly one character. Everything else,
including ``[``, ``]`` and ``\\``, is a literal. Matching is case-sensitive and
anchored at both ends.
"""

from __future__ import annotations

import re
from functools import lru_cache


@lru_cache(maxsize=256)
def _compile(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


def glob_match(text: str, pattern: str) -> bool:
    """Return True when the whole of ``text`` matches ``pattern``."""
    return _compile(pattern).fullmatch(text) is not None


__all__ = ["glob_match"]

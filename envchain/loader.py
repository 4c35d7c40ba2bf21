"""
Loader for .env style source files.

Each entry sits on one line and its value must be wrapped in double quotes:

    KEY = "value"   # optional comment

Quotes inside a value are not supported; requiring them is what lets a
trailing comment follow the entry. A line whose key is LOAD_KEY names another
source file, which is loaded with the same overwrite flag and merged in.
Files are read as UTF-8; undecodable bytes become U+FFFD instead of failing.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path

from .env import Env

logger = logging.getLogger(__name__)

LOAD_KEY = "__ENV_LOAD"
# Older source files chain with this name; both keys behave the same.
LEGACY_LOAD_KEY = "__GO_LOAD"
LOAD_KEYS = frozenset({LOAD_KEY, LEGACY_LOAD_KEY})


class InclusionCycleError(RuntimeError):
    """Raised when a source file includes itself, directly or through others."""

    def __init__(self, chain: tuple[Path, ...]) -> None:
        self.chain = chain
        joined = " -> ".join(str(p) for p in chain)
        super().__init__(f"Inclusion cycle detected: {joined}")


class LineKind(enum.Enum):
    BLANK = "blank"
    COMMENT = "comment"
    MALFORMED = "malformed"
    ENTRY = "entry"


@dataclass(frozen=True)
class ParsedLine:
    kind: LineKind
    key: str = ""
    value: str = ""


_MALFORMED = ParsedLine(LineKind.MALFORMED)


def parse_line(line: str) -> ParsedLine:
    """
    Classify a single source line and pull out its key/value pair.

    An empty quoted value (KEY = "") is not an entry and comes back MALFORMED.
    Whitespace inside the quotes is kept as written.
    """
    stripped = line.strip()
    if not stripped:
        return ParsedLine(LineKind.BLANK)
    if stripped.startswith("#"):
        return ParsedLine(LineKind.COMMENT)

    key_part, sep, rest = line.partition("=")
    if not sep or "#" in key_part:
        return _MALFORMED
    key = key_part.strip()
    if not key:
        return _MALFORMED

    rest = rest.lstrip(" \t")
    if not rest.startswith('"'):
        return _MALFORMED
    closing = rest.find('"', 1)
    if closing <= 1:
        # unterminated, or ""
        return _MALFORMED

    trailer = rest[closing + 1 :].strip()
    if trailer and not trailer.startswith("#"):
        return _MALFORMED

    return ParsedLine(LineKind.ENTRY, key=key, value=rest[1:closing])


def load(path: str | Path, overwrite: bool = True) -> Env:
    """
    Read environment variables from the given source file.

    overwrite decides whether variables from files pulled in via LOAD_KEY
    replace ones already set. Later lines of the same file always replace
    earlier ones. OSError from any file in the chain propagates unchanged.
    """
    return _load(Path(path), overwrite, ())


def _load(path: Path, overwrite: bool, chain: tuple[Path, ...]) -> Env:
    resolved = path.resolve()
    if resolved in chain:
        raise InclusionCycleError(chain + (resolved,))
    chain = chain + (resolved,)

    text = path.read_text(encoding="utf-8", errors="replace")
    env = Env()
    for lineno, line in enumerate(text.split("\n"), start=1):
        parsed = parse_line(line)
        if parsed.kind is LineKind.MALFORMED:
            logger.debug("Skipping malformed line %s:%d", path, lineno)
            continue
        if parsed.kind is not LineKind.ENTRY:
            continue

        if parsed.key in LOAD_KEYS:
            logger.debug("Including %s from %s:%d", parsed.value, path, lineno)
            included = _load(Path(parsed.value), overwrite, chain)
            env = env.merge(included, overwrite)

        # The load key itself stays visible as a regular entry.
        env.set(parsed.key, parsed.value)

    logger.info("Loaded %d variables from %s", env.count(), path)
    return env

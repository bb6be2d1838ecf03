"""
Seed environment variables from a .env file without overriding existing ones.
"""

import io
import logging
import os
import threading
from dataclasses import dataclass
from typing import MutableMapping

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

# Guard the per-key read-then-write against concurrent seeding in this process
_seed_lock = threading.Lock()


@dataclass(frozen=True)
class SeedResult:
    """Outcome of seeding from one file. found=False is not an error."""

    path: str
    found: bool
    applied: tuple[str, ...] = ()
    skipped: tuple[str, ...] = ()
    error: str | None = None


def _parse_line(line: str) -> tuple[str, str] | None:
    """
    Parse one KEY=VALUE line. Each line stands alone, so an unterminated
    quote never swallows the lines after it.
    Returns None for blank, comment and '='-less lines.
    """
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    parsed = dotenv_values(stream=io.StringIO(line), interpolate=False)
    for key, value in parsed.items():
        if key and value is not None:
            return key, value
    if parsed:
        # KEY without '=' (possibly followed by a comment)
        return None

    # python-dotenv rejected the line (e.g. 'KEY='unterminated, 'MY KEY=1')
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip()


def _read_env_file(path: str) -> dict[str, str]:
    with open(path, "r", encoding="utf-8") as f:
        lines = f.readlines()

    values: dict[str, str] = {}
    for line in lines:
        entry = _parse_line(line)
        if entry is not None:
            key, value = entry
            values[key] = value
    return values


def seed(path: str | os.PathLike, environ: MutableMapping[str, str] | None = None) -> SeedResult:
    """
    Load variables from the file at path into environ (default: os.environ).

    A key is only written when environ has no non-empty value for it, so
    variables set by the surrounding environment always win.
    A missing or unreadable file yields SeedResult(found=False) and is logged,
    as is a value the environment refuses (e.g. one with a NUL byte).
    """
    if environ is None:
        environ = os.environ
    path = os.fspath(path)

    try:
        parsed = _read_env_file(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("No env file loaded from %s, falling back to environment variables: %s", path, e)
        return SeedResult(path=path, found=False, error=str(e))

    applied: list[str] = []
    skipped: list[str] = []
    with _seed_lock:
        for key, value in parsed.items():
            if environ.get(key):
                skipped.append(key)
                logger.debug("Keeping existing value for %s", key)
                continue
            try:
                environ[key] = value
            except ValueError as e:
                skipped.append(key)
                logger.warning("Failed to set env var %s from %s: %s", key, path, e)
                continue
            applied.append(key)
            logger.debug("Seeded %s from %s", key, path)

    return SeedResult(path=path, found=True, applied=tuple(applied), skipped=tuple(skipped))

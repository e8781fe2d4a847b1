"""Speaker classification and name normalisation."""
from __future__ import annotations

from typing import Dict, Iterable, Optional
import re

# Institutional roles rather than voting members. Matched as plain substrings,
# so a member whose surname contains e.g. "CHAIR" is classified as procedural.
PROCEDURAL_SPEAKERS = (
    "PRESIDING OFFICER",
    "ACTING PRESIDENT pro tempore",
    "PRESIDENT pro tempore",
    "SPEAKER",
    "SPEAKER pro tempore",
    "CLERK",
    "READING CLERK",
    "CHIEF CLERK",
    "CHAIR",
    "CHAIRMAN",
    "CHAIRWOMAN",
)
_PROCEDURAL_KEYS = tuple(role.upper() for role in PROCEDURAL_SPEAKERS)

_HONORIFIC_PREFIX = re.compile(r"^(?:Mr\.|Ms\.|Mrs\.|The)\s+", re.IGNORECASE)
_STATE_SUFFIX = re.compile(r"\s+of\s+\w+$", re.IGNORECASE)


def is_procedural_speaker(name: str) -> bool:
    """Return ``True`` if ``name`` names a presiding officer, clerk or chair."""

    upper_name = name.upper()
    return any(role in upper_name for role in _PROCEDURAL_KEYS)


def normalize_speaker_name(speaker: str) -> str:
    """Canonical roster key: ``"Mr. KAPTUR of Ohio"`` -> ``"KAPTUR"``."""

    name = _HONORIFIC_PREFIX.sub("", speaker)
    name = _STATE_SUFFIX.sub("", name)
    return name.strip().upper()


def build_roster_index(last_names: Iterable[str]) -> Dict[str, str]:
    """Map uppercase last names to the roster spelling.

    The first spelling wins when two roster entries share a last name.
    """

    index: Dict[str, str] = {}
    for last_name in last_names:
        key = last_name.strip().upper()
        if key and key not in index:
            index[key] = last_name
    return index


def match_roster(speaker: str, roster_index: Dict[str, str]) -> Optional[str]:
    """Look up ``speaker`` in an index built by :func:`build_roster_index`."""

    if is_procedural_speaker(_HONORIFIC_PREFIX.sub("", speaker)):
        return None
    return roster_index.get(normalize_speaker_name(speaker))


__all__ = [
    "PROCEDURAL_SPEAKERS",
    "build_roster_index",
    "is_procedural_speaker",
    "match_roster",
    "normalize_speaker_name",
]

"""Destinations for parsed transcripts."""
from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import List
import json
import logging

from ..core.types import GovInfoPackage, ParsedTranscript, SessionContext

LOGGER = logging.getLogger(__name__)


class JsonDirectorySink:
    """Write every parsed section to ``<directory>/<package>-<chamber>.json``."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory
        self.written: List[Path] = []

    def __call__(self, package: GovInfoPackage, transcript: ParsedTranscript) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        target = self._directory / f"{package.package_id}-{transcript.metadata.chamber}.json"
        payload = {"package_id": package.package_id, **transcript.to_dict()}
        for index, segment in enumerate(payload["segments"]):
            segment["context"] = asdict(SessionContext.for_segment(transcript, index))
        with target.open("w", encoding="utf8") as fh:
            json.dump(payload, fh, ensure_ascii=False, indent=2)
            fh.write("\n")
        LOGGER.info("Wrote %s", target)
        self.written.append(target)


__all__ = ["JsonDirectorySink"]

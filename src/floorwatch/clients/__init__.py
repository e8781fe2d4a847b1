"""HTTP clients used by the floorwatch pipeline."""
from __future__ import annotations

from .govinfo import GovInfoClient, GovInfoClientError, TranscriptNotFoundError

__all__ = ["GovInfoClient", "GovInfoClientError", "TranscriptNotFoundError"]

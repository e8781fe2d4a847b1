"""Core domain entities used across the pipeline."""
from __future__ import annotations

from .types import (
    CHAMBERS,
    AgendaItemType,
    BillReference,
    Chamber,
    GovInfoPackage,
    ParsedAgendaItem,
    ParsedTranscript,
    SessionContext,
    TranscriptMetadata,
    TranscriptSegment,
)

__all__ = [
    "AgendaItemType",
    "BillReference",
    "CHAMBERS",
    "Chamber",
    "GovInfoPackage",
    "ParsedAgendaItem",
    "ParsedTranscript",
    "SessionContext",
    "TranscriptMetadata",
    "TranscriptSegment",
]

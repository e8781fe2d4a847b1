"""Typed domain objects shared by the parser, client and pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional

Chamber = Literal["senate", "house"]
AgendaItemType = Literal["bill", "resolution", "motion", "tribute", "nomination", "other"]

CHAMBERS: tuple[Chamber, ...] = ("senate", "house")


@dataclass(slots=True)
class TranscriptSegment:
    """A contiguous run of floor speech attributed to a single speaker."""

    speaker: str
    text: str
    page_number: Optional[str] = None
    is_procedural_speaker: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class ParsedAgendaItem:
    """A legislative item announced somewhere in the transcript."""

    title: str
    type: AgendaItemType
    start_segment_index: int
    bill_number: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class TranscriptMetadata:
    """Chamber, date and page markers of a parsed transcript."""

    chamber: Chamber
    date: str = ""
    pages: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class ParsedTranscript:
    """Result of parsing one chamber section of the Congressional Record."""

    segments: List[TranscriptSegment]
    agenda_items: List[ParsedAgendaItem]
    metadata: TranscriptMetadata

    def to_dict(self) -> Dict[str, Any]:
        return {
            "segments": [segment.to_dict() for segment in self.segments],
            "agenda_items": [item.to_dict() for item in self.agenda_items],
            "metadata": self.metadata.to_dict(),
        }


@dataclass(slots=True)
class SessionContext:
    """Context handed to downstream consumers alongside each segment."""

    chamber: Chamber
    date: str
    agenda_title: Optional[str] = None
    bill_number: Optional[str] = None

    @classmethod
    def for_segment(cls, transcript: ParsedTranscript, index: int) -> "SessionContext":
        """Context of segment ``index``: the latest agenda item announced at or before it."""

        current: Optional[ParsedAgendaItem] = None
        for item in transcript.agenda_items:
            if item.start_segment_index <= index and (
                current is None or item.start_segment_index >= current.start_segment_index
            ):
                current = item
        return cls(
            chamber=transcript.metadata.chamber,
            date=transcript.metadata.date,
            agenda_title=current.title if current else None,
            bill_number=current.bill_number if current else None,
        )


@dataclass(slots=True, frozen=True)
class BillReference:
    """Structured form of a bill or resolution citation."""

    congress: int
    bill_type: str
    number: int


@dataclass(slots=True)
class GovInfoPackage:
    """Metadata describing a Congressional Record package on GovInfo."""

    package_id: str
    last_modified: Optional[str] = None
    package_link: Optional[str] = None
    doc_class: Optional[str] = None
    title: Optional[str] = None
    congress: Optional[int] = None
    date_issued: Optional[str] = None
    source: Dict[str, Any] = field(default_factory=dict)


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

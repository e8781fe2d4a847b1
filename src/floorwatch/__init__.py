"""Speaker segmentation and agenda detection for Congressional Record floor transcripts."""
from __future__ import annotations

from .clients import GovInfoClient, GovInfoClientError, TranscriptNotFoundError
from .config import AppConfig, GovInfoConfig, ParserConfig, load_config
from .core import (
    BillReference,
    GovInfoPackage,
    ParsedAgendaItem,
    ParsedTranscript,
    SessionContext,
    TranscriptMetadata,
    TranscriptSegment,
)
from .parsing import (
    bill_url,
    extract_bill_numbers,
    group_consecutive_segments,
    group_transcript,
    normalize_speaker_name,
    parse_bill_number,
    parse_congressional_record_html,
    parse_transcript_text,
)
from .pipeline import ImportPipeline, JsonDirectorySink, PipelineEvent

__all__ = [
    "AppConfig",
    "BillReference",
    "GovInfoClient",
    "GovInfoClientError",
    "GovInfoConfig",
    "GovInfoPackage",
    "ImportPipeline",
    "JsonDirectorySink",
    "ParsedAgendaItem",
    "ParsedTranscript",
    "ParserConfig",
    "PipelineEvent",
    "SessionContext",
    "TranscriptMetadata",
    "TranscriptNotFoundError",
    "TranscriptSegment",
    "bill_url",
    "extract_bill_numbers",
    "group_consecutive_segments",
    "group_transcript",
    "load_config",
    "normalize_speaker_name",
    "parse_bill_number",
    "parse_congressional_record_html",
    "parse_transcript_text",
]

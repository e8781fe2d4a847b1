"""Congressional Record parsing: segmentation, agenda items and citations."""
from __future__ import annotations

from .agenda import AGENDA_RULES, AgendaMatch, deduplicate_agenda_items, detect_agenda_item
from .citations import bill_url, extract_bill_numbers, parse_bill_number
from .markup import reduce_markup
from .segmenter import (
    ScanState,
    TextRun,
    group_consecutive_segments,
    group_transcript,
    parse_congressional_record_html,
    parse_transcript_text,
    scan_line,
)
from .speakers import build_roster_index, is_procedural_speaker, match_roster, normalize_speaker_name

__all__ = [
    "AGENDA_RULES",
    "AgendaMatch",
    "ScanState",
    "TextRun",
    "bill_url",
    "build_roster_index",
    "deduplicate_agenda_items",
    "detect_agenda_item",
    "extract_bill_numbers",
    "group_consecutive_segments",
    "group_transcript",
    "is_procedural_speaker",
    "match_roster",
    "normalize_speaker_name",
    "parse_bill_number",
    "parse_congressional_record_html",
    "parse_transcript_text",
    "reduce_markup",
    "scan_line",
]

"""Segment Congressional Record floor text into speaker turns.

The scanner walks the record line by line. Its running state (speaker, text,
page and procedural flag) lives in an immutable :class:`ScanState` which
:func:`scan_line` maps to the next state, so single transitions can be
exercised without building a whole document.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional
import logging
import re

from ..core.types import Chamber, ParsedAgendaItem, ParsedTranscript, TranscriptMetadata, TranscriptSegment
from .agenda import deduplicate_agenda_items, detect_agenda_item
from .markup import reduce_markup
from .speakers import is_procedural_speaker

LOGGER = logging.getLogger(__name__)

SPEAKER_PATTERN = re.compile(r"^\s{2,}(?P<honorific>Mr\.|Ms\.|Mrs\.|The)\s+(?P<name>[A-Z][A-Z\s\-']+)\.")
PAGE_PATTERN = re.compile(r"\[\[Page (?P<page>[SH]\d+)\]\]")

# Headings ahead of the first speaker must be longer than this to count.
MIN_PRESPEAKER_HEADING_LENGTH = 10

_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Collapse whitespace and drop stray ``[[Page ...]]`` markers."""

    collapsed = _WHITESPACE.sub(" ", text)
    return PAGE_PATTERN.sub("", collapsed).strip()


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class TextRun:
    """Immutable run of text pieces; :meth:`append` shares the existing run.

    Comparison and ``repr`` work on the flattened pieces so that a run built
    from thousands of lines never recurses through its chain.
    """

    piece: str
    previous: Optional["TextRun"] = None

    def append(self, piece: str) -> "TextRun":
        return TextRun(piece=piece, previous=self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextRun):
            return NotImplemented
        return self.pieces() == other.pieces()

    def __hash__(self) -> int:
        return hash(tuple(self.pieces()))

    def __repr__(self) -> str:
        return f"TextRun({str(self)!r})"

    def pieces(self) -> List[str]:
        collected: List[str] = []
        run: Optional[TextRun] = self
        while run is not None:
            collected.append(run.piece)
            run = run.previous
        collected.reverse()
        return collected

    def __str__(self) -> str:
        return " ".join(self.pieces())


@dataclass(slots=True, frozen=True)
class ScanState:
    """Running state of the scanner between two lines.

    ``current_page`` follows every page marker; ``segment_page`` is the page
    the running segment started on and is what the emitted segment carries.
    Speech text is kept as a :class:`TextRun` so each continuation line is a
    constant-time append.
    """

    current_speaker: Optional[str] = None
    text: Optional[TextRun] = None
    current_page: Optional[str] = None
    is_procedural_speaker: bool = False
    segment_page: Optional[str] = None

    @property
    def current_text(self) -> str:
        return str(self.text) if self.text is not None else ""

    def pending_segment(self) -> Optional[TranscriptSegment]:
        """The segment accumulated so far, or ``None`` if there is nothing to emit."""

        if self.current_speaker is None:
            return None
        text = clean_text(self.current_text)
        if not text:
            return None
        return TranscriptSegment(
            speaker=self.current_speaker,
            text=text,
            page_number=self.segment_page,
            is_procedural_speaker=self.is_procedural_speaker,
        )


@dataclass(slots=True)
class LineResult:
    """Outcome of feeding one line into the scanner."""

    state: ScanState
    segment: Optional[TranscriptSegment] = None
    page: Optional[str] = None
    agenda_item: Optional[ParsedAgendaItem] = None


def scan_line(state: ScanState, line: str, segment_count: int) -> LineResult:
    """Advance ``state`` by one ``line``.

    ``segment_count`` is the number of segments emitted before this line and
    anchors any agenda item the line announces.
    """

    page_match = PAGE_PATTERN.search(line)
    if page_match:
        page = page_match.group("page")
        segment_page = state.segment_page
        if segment_page is None and state.current_speaker is not None:
            # speech started before the first marker of the document
            segment_page = page
        return LineResult(state=replace(state, current_page=page, segment_page=segment_page), page=page)

    speaker_match = SPEAKER_PATTERN.match(line)
    if speaker_match:
        flushed = state.pending_segment()
        if flushed is not None:
            segment_count += 1
        honorific = speaker_match.group("honorific")
        name = speaker_match.group("name").strip()
        remainder = line[speaker_match.end():].strip()
        new_state = ScanState(
            current_speaker=f"{honorific} {name}",
            text=TextRun(remainder),
            current_page=state.current_page,
            is_procedural_speaker=is_procedural_speaker(name),
            segment_page=state.current_page,
        )
        match = detect_agenda_item(remainder)
        return LineResult(
            state=new_state,
            segment=flushed,
            agenda_item=match.at(segment_count) if match else None,
        )

    if state.current_speaker is not None:
        text = state.text.append(line.strip()) if state.text is not None else TextRun(line.strip())
        return LineResult(state=replace(state, text=text))

    match = detect_agenda_item(line)
    if match and len(line.strip()) > MIN_PRESPEAKER_HEADING_LENGTH:
        return LineResult(state=state, agenda_item=match.at(segment_count))
    return LineResult(state=state)


@dataclass(slots=True)
class _Accumulator:
    segments: List[TranscriptSegment] = field(default_factory=list)
    agenda_items: List[ParsedAgendaItem] = field(default_factory=list)
    pages: List[str] = field(default_factory=list)

    def absorb(self, result: LineResult) -> None:
        if result.segment is not None:
            self.segments.append(result.segment)
        if result.page is not None and result.page not in self.pages:
            self.pages.append(result.page)
        if result.agenda_item is not None:
            self.agenda_items.append(result.agenda_item)


def scan_lines(lines: Iterable[str], chamber: Chamber) -> ParsedTranscript:
    """Fold :func:`scan_line` over ``lines`` and assemble the transcript."""

    state = ScanState()
    acc = _Accumulator()
    for line in lines:
        result = scan_line(state, line, len(acc.segments))
        acc.absorb(result)
        state = result.state

    final_segment = state.pending_segment()
    if final_segment is not None:
        acc.segments.append(final_segment)

    return ParsedTranscript(
        segments=acc.segments,
        agenda_items=deduplicate_agenda_items(acc.agenda_items),
        metadata=TranscriptMetadata(chamber=chamber, date="", pages=acc.pages),
    )


def parse_transcript_text(text: str, chamber: Chamber) -> ParsedTranscript:
    """Parse plain transcript text (already stripped of markup)."""

    transcript = scan_lines(text.split("\n"), chamber)
    if text.strip() and not transcript.segments:
        LOGGER.warning("No speaker segments detected in %s transcript", chamber)
    LOGGER.debug(
        "Parsed %s transcript: %s segments, %s agenda items, %s pages",
        chamber,
        len(transcript.segments),
        len(transcript.agenda_items),
        len(transcript.metadata.pages),
    )
    return transcript


def parse_congressional_record_html(markup: str, chamber: Chamber) -> ParsedTranscript:
    """Parse a Congressional Record HTML section into segments and agenda items."""

    return parse_transcript_text(reduce_markup(markup), chamber)


def _group_runs(segments: Iterable[TranscriptSegment]) -> tuple[List[TranscriptSegment], List[int]]:
    """Group segments and return, for each input segment, the grouped index it landed in."""

    runs: List[List[TranscriptSegment]] = []
    positions: List[int] = []
    for segment in segments:
        last = runs[-1][-1] if runs else None
        if (
            last is not None
            and last.speaker == segment.speaker
            and last.is_procedural_speaker == segment.is_procedural_speaker
        ):
            runs[-1].append(segment)
        else:
            runs.append([segment])
        positions.append(len(runs) - 1)

    grouped = [
        replace(
            run[0],
            text="\n\n".join(segment.text for segment in run),
            page_number=run[-1].page_number,
        )
        for run in runs
    ]
    return grouped, positions


def group_consecutive_segments(segments: Iterable[TranscriptSegment]) -> List[TranscriptSegment]:
    """Merge back-to-back segments of the same speaker and procedural flag.

    Texts are joined with a blank line and the merged segment takes the page
    of the later one. Input segments are left untouched.
    """

    grouped, _ = _group_runs(segments)
    return grouped


def group_transcript(transcript: ParsedTranscript) -> ParsedTranscript:
    """Group ``transcript``'s segments and re-anchor its agenda items.

    An agenda item that pointed at segment ``i`` points at the merged segment
    containing ``i`` afterwards; items anchored past the last segment stay
    past the last grouped segment.
    """

    grouped, positions = _group_runs(transcript.segments)
    agenda_items = [
        replace(
            item,
            start_segment_index=(
                positions[item.start_segment_index]
                if item.start_segment_index < len(positions)
                else len(grouped)
            ),
        )
        for item in transcript.agenda_items
    ]
    return replace(transcript, segments=grouped, agenda_items=agenda_items)


__all__ = [
    "LineResult",
    "PAGE_PATTERN",
    "SPEAKER_PATTERN",
    "ScanState",
    "TextRun",
    "clean_text",
    "group_consecutive_segments",
    "group_transcript",
    "parse_congressional_record_html",
    "parse_transcript_text",
    "scan_line",
    "scan_lines",
]

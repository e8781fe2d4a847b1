"""Orchestration of fetching, parsing and delivering Congressional Record sections."""
from __future__ import annotations

from dataclasses import dataclass
from threading import Event
from typing import Callable, Literal, Optional, Protocol, Sequence
import logging

from ..clients import TranscriptNotFoundError
from ..core.types import CHAMBERS, Chamber, GovInfoPackage, ParsedTranscript
from ..parsing import group_transcript, parse_congressional_record_html

LOGGER = logging.getLogger(__name__)

PipelineEventKind = Literal[
    "start",
    "package",
    "fetched",
    "skipped",
    "parsed",
    "delivered",
    "progress",
    "finished",
    "cancelled",
    "error",
]


class TranscriptSource(Protocol):
    def list_packages(self, from_date: str, to_date: Optional[str] = None) -> list[GovInfoPackage]: ...

    def fetch_transcript_html(self, package_id: str, chamber: Chamber) -> str: ...


@dataclass(slots=True)
class PipelineEvent:
    """Fine grained progress notification emitted by :class:`ImportPipeline`."""

    kind: PipelineEventKind
    processed: int
    package: GovInfoPackage | None = None
    chamber: Chamber | None = None
    message: str | None = None
    segment_count: int | None = None
    agenda_count: int | None = None


ProgressCallback = Callable[[PipelineEvent], None]
TranscriptSink = Callable[[GovInfoPackage, ParsedTranscript], None]


class ImportPipeline:
    """Fetch each package's chamber sections, parse them and hand them to a sink."""

    def __init__(
        self,
        *,
        source: TranscriptSource,
        sink: Optional[TranscriptSink] = None,
        group_segments: bool = True,
    ) -> None:
        self._source = source
        self._sink = sink
        self._group_segments = group_segments

    def run(
        self,
        from_date: str,
        to_date: Optional[str] = None,
        *,
        chambers: Sequence[Chamber] = CHAMBERS,
        limit: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None,
        cancel_event: Optional[Event] = None,
    ) -> int:
        """Run the pipeline end-to-end and return the number of processed packages."""

        processed = 0
        cancelled = False
        had_error = False
        current_package: GovInfoPackage | None = None
        self._notify(
            progress_callback,
            PipelineEvent(kind="start", processed=processed, message="Pipeline run started"),
        )
        try:
            for package in self._source.list_packages(from_date, to_date):
                if limit is not None and processed >= limit:
                    break
                if cancel_event and cancel_event.is_set():
                    cancelled = True
                    break
                current_package = package
                LOGGER.info("Processing package %s", package.package_id)
                self._notify(
                    progress_callback,
                    PipelineEvent(
                        kind="package",
                        processed=processed,
                        package=package,
                        message=f"Processing package {package.package_id}",
                    ),
                )
                for chamber in chambers:
                    self._process_section(package, chamber, processed, progress_callback)
                processed += 1
                self._notify(
                    progress_callback,
                    PipelineEvent(
                        kind="progress",
                        processed=processed,
                        package=package,
                        message=f"Completed package {package.package_id}",
                    ),
                )
            if cancel_event and cancel_event.is_set():
                cancelled = True
        except Exception as exc:  # pragma: no cover - re-raised for visibility in tests
            had_error = True
            LOGGER.exception("Import pipeline failed: %s", exc)
            self._notify(
                progress_callback,
                PipelineEvent(kind="error", processed=processed, package=current_package, message=str(exc)),
            )
            raise
        finally:
            if cancelled:
                self._notify(
                    progress_callback,
                    PipelineEvent(
                        kind="cancelled",
                        processed=processed,
                        package=current_package,
                        message="Pipeline run cancelled",
                    ),
                )
            elif not had_error:
                self._notify(
                    progress_callback,
                    PipelineEvent(
                        kind="finished",
                        processed=processed,
                        package=current_package,
                        message="Pipeline run finished",
                    ),
                )
        return processed

    def parse_section(self, package: GovInfoPackage, chamber: Chamber, html: str) -> ParsedTranscript:
        """Parse ``html`` and apply the configured post-processing."""

        transcript = parse_congressional_record_html(html, chamber)
        transcript.metadata.date = package.date_issued or ""
        if self._group_segments:
            transcript = group_transcript(transcript)
        return transcript

    def _process_section(
        self,
        package: GovInfoPackage,
        chamber: Chamber,
        processed: int,
        progress_callback: Optional[ProgressCallback],
    ) -> None:
        try:
            html = self._source.fetch_transcript_html(package.package_id, chamber)
        except TranscriptNotFoundError:
            LOGGER.info("No %s transcript in package %s", chamber, package.package_id)
            self._notify(
                progress_callback,
                PipelineEvent(
                    kind="skipped",
                    processed=processed,
                    package=package,
                    chamber=chamber,
                    message=f"No {chamber} transcript found",
                ),
            )
            return
        self._notify(
            progress_callback,
            PipelineEvent(
                kind="fetched",
                processed=processed,
                package=package,
                chamber=chamber,
                message=f"Fetched {chamber} transcript",
            ),
        )
        transcript = self.parse_section(package, chamber, html)
        self._notify(
            progress_callback,
            PipelineEvent(
                kind="parsed",
                processed=processed,
                package=package,
                chamber=chamber,
                message=f"Parsed {len(transcript.segments)} segments, {len(transcript.agenda_items)} agenda items",
                segment_count=len(transcript.segments),
                agenda_count=len(transcript.agenda_items),
            ),
        )
        if self._sink:
            self._sink(package, transcript)
            self._notify(
                progress_callback,
                PipelineEvent(
                    kind="delivered",
                    processed=processed,
                    package=package,
                    chamber=chamber,
                    message=f"Delivered {chamber} transcript",
                    segment_count=len(transcript.segments),
                ),
            )

    @staticmethod
    def _notify(callback: Optional[ProgressCallback], event: PipelineEvent) -> None:
        if callback:
            callback(event)


__all__ = ["ImportPipeline", "PipelineEvent", "TranscriptSink", "TranscriptSource"]

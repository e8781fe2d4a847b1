"""Pipeline orchestration components."""
from __future__ import annotations

from .import_pipeline import ImportPipeline, PipelineEvent, TranscriptSink, TranscriptSource
from .sinks import JsonDirectorySink

__all__ = ["ImportPipeline", "JsonDirectorySink", "PipelineEvent", "TranscriptSink", "TranscriptSource"]

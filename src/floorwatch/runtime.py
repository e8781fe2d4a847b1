"""Application level helpers for assembling pipeline dependencies."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .clients import GovInfoClient
from .config import AppConfig
from .pipeline import ImportPipeline, TranscriptSink


@dataclass(slots=True)
class PipelineResources:
    """Container bundling the objects needed to run the pipeline."""

    pipeline: ImportPipeline
    govinfo_client: GovInfoClient
    owns_client: bool = True

    def close(self) -> None:
        if self.owns_client:
            self.govinfo_client.close()


def create_pipeline(
    config: AppConfig,
    *,
    sink: Optional[TranscriptSink] = None,
    govinfo_client: GovInfoClient | None = None,
) -> PipelineResources:
    owns_client = govinfo_client is None
    client = govinfo_client or GovInfoClient(
        config.govinfo.base_url,
        config.govinfo.api_key,
        content_url=config.govinfo.content_url,
        timeout=config.govinfo.timeout,
        max_retries=config.govinfo.max_retries,
        page_size=config.govinfo.page_size,
    )
    pipeline = ImportPipeline(source=client, sink=sink, group_segments=config.parser.group_segments)
    return PipelineResources(pipeline=pipeline, govinfo_client=client, owns_client=owns_client)


__all__ = ["PipelineResources", "create_pipeline"]

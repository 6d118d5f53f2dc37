import asyncio

from scholar_renamer.logging.logger import Log
from scholar_renamer.metadata.base import BaseMetadataExtractor
from scholar_renamer.naming.generator import generate_name
from scholar_renamer.naming.models import NamingConfiguration
from scholar_renamer.pdf.base import BasePdfExtractor
from scholar_renamer.pdf.exceptions import PdfEngineError
from scholar_renamer.processor.exceptions import FileNotTrackedError
from scholar_renamer.processor.models import ProcessingStatus
from scholar_renamer.processor.pipeline import PipelineContext, PipelineStep
from scholar_renamer.session.queue import FileQueue


def _log_dropped_write(context: PipelineContext, what: str) -> None:
    Log.debug(f"File {context.file_id} left the queue, dropping {what}")


class LoadDocumentStep(PipelineStep):
    def __init__(self, queue: FileQueue) -> None:
        self._queue = queue

    async def run(self, context: PipelineContext) -> PipelineContext:
        entry = self._queue.get(context.file_id)
        if entry is None:
            raise FileNotTrackedError(f"File {context.file_id} is not in the queue")
        context.content = entry.content
        Log.info(f"Loaded {len(entry.content)} bytes for file {context.file_id}")
        return context


class MarkReadingStep(PipelineStep):
    def __init__(self, queue: FileQueue) -> None:
        self._queue = queue

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not self._queue.update(
            context.file_id,
            status=ProcessingStatus.READING_DOCUMENT,
            error_message=None,
        ):
            _log_dropped_write(context, "reading status")
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.extracted_text = await asyncio.to_thread(
                self._pdf_extractor.extract, context.content
            )
        except RuntimeError as exc:
            # adapters wrap their own errors, so this comes from the thread pool
            raise PdfEngineError(f"PDF worker unavailable: {exc}") from exc
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from file {context.file_id}"
        )
        return context


class MarkAnalyzingStep(PipelineStep):
    def __init__(self, queue: FileQueue) -> None:
        self._queue = queue

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not self._queue.update(
            context.file_id, status=ProcessingStatus.ANALYZING_METADATA
        ):
            _log_dropped_write(context, "analyzing status")
        return context


class ExtractMetadataStep(PipelineStep):
    def __init__(self, metadata_extractor: BaseMetadataExtractor, max_chars: int) -> None:
        self._metadata_extractor = metadata_extractor
        self._max_chars = max_chars

    async def run(self, context: PipelineContext) -> PipelineContext:
        text = context.extracted_text[: self._max_chars]
        context.metadata = await self._metadata_extractor.extract(text)
        return context


class GenerateNameStep(PipelineStep):
    def __init__(self, config: NamingConfiguration) -> None:
        self._config = config

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.metadata is None:
            raise ValueError("PipelineContext.metadata must be set before naming")
        context.suggested_name = generate_name(context.metadata, self._config)
        Log.info(f"Suggested name for file {context.file_id}: {context.suggested_name}")
        return context


class MarkCompletedStep(PipelineStep):
    def __init__(self, queue: FileQueue) -> None:
        self._queue = queue

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.metadata is None:
            raise ValueError("PipelineContext.metadata must be set before completion")
        if not self._queue.update(
            context.file_id,
            status=ProcessingStatus.COMPLETED,
            metadata=context.metadata,
            suggested_name=context.suggested_name,
        ):
            _log_dropped_write(context, "completed result")
        return context


class MarkFailedStep(PipelineStep):
    def __init__(self, queue: FileQueue) -> None:
        self._queue = queue

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not self._queue.update(
            context.file_id,
            status=ProcessingStatus.FAILED,
            metadata=None,
            error_message=context.error_message,
        ):
            _log_dropped_write(context, "failure")
        return context

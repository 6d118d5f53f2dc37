from scholar_renamer.config.settings import Settings
from scholar_renamer.logging.logger import Log
from scholar_renamer.metadata.exceptions import MetadataError
from scholar_renamer.metadata.factory import MetadataExtractorFactory
from scholar_renamer.naming.models import NamingConfiguration
from scholar_renamer.pdf.exceptions import PdfExtractionError
from scholar_renamer.pdf.factory import PdfExtractorFactory
from scholar_renamer.processor.exceptions import FileNotTrackedError
from scholar_renamer.processor.pipeline import PipelineContext, PipelineStep
from scholar_renamer.processor.steps import (
    ExtractMetadataStep,
    ExtractTextStep,
    GenerateNameStep,
    LoadDocumentStep,
    MarkAnalyzingStep,
    MarkCompletedStep,
    MarkFailedStep,
    MarkReadingStep,
)
from scholar_renamer.session.queue import FileQueue

UNKNOWN_ERROR_MESSAGE = "Unknown error"


def describe_failure(exc: Exception) -> str:
    """Human-readable cause stored on a failed file entry."""
    if isinstance(exc, (PdfExtractionError, MetadataError)):
        return exc.user_message
    return UNKNOWN_ERROR_MESSAGE


class Processor:
    """Runs the per-file pipeline: read document -> extract metadata -> name.

    Failures never leave ``process``; they are recorded on the file entry by
    the failure step.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    async def process(self, file_id: str) -> None:
        Log.info(f"Processing file {file_id}")
        context = PipelineContext(file_id=file_id)
        try:
            for step in self._steps:
                context = await step.run(context)
        except FileNotTrackedError:
            Log.warning(f"File {file_id} is not in the queue, skipping")
            return
        except (PdfExtractionError, MetadataError) as exc:
            context.error_message = describe_failure(exc)
            Log.error(f"File {file_id} failed: {exc}")
            await self._failed_step.run(context)
            return
        except Exception as exc:
            context.error_message = describe_failure(exc)
            Log.exception(f"File {file_id} failed unexpectedly: {exc}")
            await self._failed_step.run(context)
            return
        Log.info(f"File {file_id} completed")


def build_processor(
    settings: Settings,
    queue: FileQueue,
    config: NamingConfiguration,
) -> Processor:
    """Build a Processor with all required adapters."""
    pdf_extractor = PdfExtractorFactory.create(settings)
    metadata_extractor = MetadataExtractorFactory.create(settings)
    steps: list[PipelineStep] = [
        LoadDocumentStep(queue),
        MarkReadingStep(queue),
        ExtractTextStep(pdf_extractor),
        MarkAnalyzingStep(queue),
        ExtractMetadataStep(metadata_extractor, settings.metadata_max_chars),
        GenerateNameStep(config),
        MarkCompletedStep(queue),
    ]
    return Processor(steps=steps, failed_step=MarkFailedStep(queue))

from abc import ABC, abstractmethod
from dataclasses import dataclass

from scholar_renamer.metadata.models import ExtractedMetadata


@dataclass(slots=True)
class PipelineContext:
    file_id: str
    content: bytes = b""
    extracted_text: str = ""
    metadata: ExtractedMetadata | None = None
    suggested_name: str = ""
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

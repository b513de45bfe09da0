from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from resumegate.classification.models import ClassificationResult
from resumegate.extraction.models import RawDocument
from resumegate.scoring.models import JobContext, ScoreBundle


@dataclass(slots=True)
class PipelineContext:
    document: RawDocument
    job: JobContext = field(default_factory=JobContext)
    extracted_text: str = ""
    classification: ClassificationResult | None = None
    score_bundle: ScoreBundle | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

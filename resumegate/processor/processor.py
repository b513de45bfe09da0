from resumegate.classification.classifier import DocumentClassifier, build_document_classifier
from resumegate.config.settings import Settings
from resumegate.extraction.extractor import TextExtractor, build_text_extractor
from resumegate.extraction.models import RawDocument
from resumegate.logging.logger import Log
from resumegate.processor.pipeline import PipelineContext, PipelineStep
from resumegate.processor.steps import (
    ClassifyStep,
    ExtractTextStep,
    RejectionGateStep,
    ScoreStep,
)
from resumegate.scoring.models import JobContext, ScoreBundle


class Processor:
    """Runs an uploaded document through the scoring pipeline.

    Pipeline: extract -> classify -> reject non-resumes -> score.
    """

    def __init__(
        self,
        text_extractor: TextExtractor,
        classifier: DocumentClassifier,
        short_word_document_limit: int = 150,
    ) -> None:
        self._steps: list[PipelineStep] = [
            ExtractTextStep(text_extractor),
            ClassifyStep(classifier),
            RejectionGateStep(short_word_document_limit),
            ScoreStep(),
        ]

    def process(self, document: RawDocument, job: JobContext | None = None) -> ScoreBundle:
        """Score ``document`` against ``job``.

        Raises:
            ExtractionError: if the document text cannot be extracted.
            DocumentRejectedError: if the document is not a resume.
        """
        Log.info(f"Processing {document.filename or 'document'}")
        context = PipelineContext(document=document, job=job or JobContext())
        for step in self._steps:
            context = step.run(context)
        if context.score_bundle is None:
            raise ValueError("Pipeline finished without a score bundle")
        return context.score_bundle


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    return Processor(
        text_extractor=build_text_extractor(settings),
        classifier=build_document_classifier(settings),
        short_word_document_limit=settings.short_word_document_word_limit,
    )

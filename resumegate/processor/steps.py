from resumegate.classification.classifier import DocumentClassifier
from resumegate.classification.models import RejectionContext
from resumegate.classification.policy import DEFAULT_SHORT_WORD_DOCUMENT_LIMIT, should_reject
from resumegate.extraction.extractor import TextExtractor, resolve_extension
from resumegate.logging.logger import Log
from resumegate.processor.exceptions import DocumentRejectedError
from resumegate.processor.pipeline import PipelineContext, PipelineStep
from resumegate.scoring.scorer import score_document


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._text_extractor.extract(context.document)
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from "
            f"{context.document.filename or 'document'}"
        )
        return context


class ClassifyStep(PipelineStep):
    def __init__(self, classifier: DocumentClassifier) -> None:
        self._classifier = classifier

    def run(self, context: PipelineContext) -> PipelineContext:
        context.classification = self._classifier.classify(context.extracted_text)
        Log.info(
            f"Classified {context.document.filename or 'document'} as "
            f"{context.classification.class_name} "
            f"(confidence {context.classification.confidence:.2f})"
        )
        return context


class RejectionGateStep(PipelineStep):
    def __init__(self, short_word_document_limit: int = DEFAULT_SHORT_WORD_DOCUMENT_LIMIT) -> None:
        self._short_word_document_limit = short_word_document_limit

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.classification is None:
            raise ValueError("PipelineContext.classification must be set before the rejection gate")
        rejection_context = RejectionContext(
            file_extension=resolve_extension(
                context.document.filename, context.document.mime_type
            ),
            word_count=len(context.extracted_text.split()),
        )
        if should_reject(
            context.classification,
            rejection_context,
            short_word_document_limit=self._short_word_document_limit,
        ):
            Log.warning(
                "document_rejected",
                class_name=context.classification.class_name,
                confidence=context.classification.confidence,
                reason=context.classification.reason,
            )
            raise DocumentRejectedError(context.classification)
        return context


class ScoreStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.score_bundle = score_document(context.extracted_text, context.job)
        Log.info(
            f"Scored {context.document.filename or 'document'}: "
            f"overall {context.score_bundle.overall_score}, "
            f"selection probability {context.score_bundle.selection_probability}"
        )
        return context

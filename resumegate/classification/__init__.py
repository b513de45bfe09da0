from resumegate.classification.classifier import (
    DocumentClassifier,
    build_document_classifier,
    classify_document,
)
from resumegate.classification.class_names import derive_document_class_name
from resumegate.classification.models import ClassificationResult, RejectionContext
from resumegate.classification.policy import rejection_message, should_reject

__all__ = [
    "ClassificationResult",
    "DocumentClassifier",
    "RejectionContext",
    "build_document_classifier",
    "classify_document",
    "derive_document_class_name",
    "rejection_message",
    "should_reject",
]

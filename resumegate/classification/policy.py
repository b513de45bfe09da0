import re

from resumegate.classification.models import ClassificationResult, RejectionContext
from resumegate.classification.vocabulary import STRONG_NON_RESUME_KEYWORDS

REJECTION_CONFIDENCE = 0.4
DEFAULT_SHORT_WORD_DOCUMENT_LIMIT = 150
WORD_DOCUMENT_EXTENSIONS = frozenset({".doc", ".docx"})

_LACKS_SECTIONS = re.compile(r"lacks resume-defining sections", re.IGNORECASE)
_ARTICLE = re.compile(r"^(?:an?|the)\s", re.IGNORECASE)


def has_strong_non_resume_signal(description: str | None, reason: str | None) -> bool:
    haystacks = [value.lower() for value in (description, reason) if isinstance(value, str)]
    return any(
        keyword in haystack for keyword in STRONG_NON_RESUME_KEYWORDS for haystack in haystacks
    )


def should_reject(
    result: ClassificationResult | None,
    context: RejectionContext | None = None,
    short_word_document_limit: int = DEFAULT_SHORT_WORD_DOCUMENT_LIMIT,
) -> bool:
    """Decide whether a classification verdict should block the upload.

    Resumes are never rejected. Strong non-resume wording in the description
    or reason, or a confidence of at least 0.4, always rejects. Short
    .doc/.docx uploads flagged only for lacking resume sections are let
    through, since their text is often a truncated excerpt; every other
    low-confidence verdict is rejected.
    """
    if result is None or result.is_resume:
        return False
    if has_strong_non_resume_signal(result.description, result.reason):
        return True
    if result.confidence >= REJECTION_CONFIDENCE:
        return True

    context = context or RejectionContext()
    is_word_document = context.file_extension.lower() in WORD_DOCUMENT_EXTENSIONS
    lacks_sections = bool(result.reason and _LACKS_SECTIONS.search(result.reason))
    if is_word_document and lacks_sections and context.word_count <= short_word_document_limit:
        return False
    return True


def rejection_message(result: ClassificationResult) -> str:
    """User-facing explanation for a rejected upload."""
    description = (result.description or "").strip() or "non-resume document"
    if not _ARTICLE.match(description):
        description = f"a {description}"
    return f"You have uploaded {description} and not a CV – please upload the correct CV"

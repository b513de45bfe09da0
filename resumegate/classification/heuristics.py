"""Heuristic classification stages.

Each function takes the trimmed document text and returns a
``ClassificationResult`` when its signal fires, otherwise None.
"""

import re

from resumegate.classification.class_names import (
    derive_document_class_name,
    format_quoted_list,
    strip_leading_article,
)
from resumegate.classification.models import NON_RESUME_CLASS_NAME, ClassificationResult
from resumegate.classification.vocabulary import (
    DOCUMENT_RULES,
    JOB_POSTING_PHRASES,
    JOB_POSTING_REQUIREMENT_KEYWORDS,
    RESUME_SECTION_HEADINGS,
    RESUME_SIGNAL_PAIRS,
    RESUME_TITLE_WORDS,
)

KEYWORD_RULE_CONFIDENCE = 0.4
JOB_POSTING_CONFIDENCE = 0.35
DUAL_KEYWORD_CONFIDENCE = 0.6
STATISTICAL_CONFIDENCE = 0.6
STATISTICAL_THRESHOLD = 3
SECTION_TRIO_CONFIDENCE = 0.55
UNRECOGNISED_CONFIDENCE = 0.3

LACKS_SECTIONS_REASON = (
    "The text lacks resume-defining sections such as Experience, Education, or Skills."
)

_UPPERCASE_HEADING = re.compile(r"\n[A-Z][A-Z\s]{3,}\n")
_SNIPPET_LENGTH = 60


def empty_document(text: str) -> ClassificationResult | None:
    if text.strip():
        return None
    return ClassificationResult(
        is_resume=False,
        description="an empty document",
        class_name="empty_document",
        confidence=0.0,
        reason="The uploaded file does not contain any text to evaluate.",
    )


def _classifier_reason(description: str, matches: list[str]) -> str:
    doc_type = strip_leading_article(description or "non-resume document")
    quoted = format_quoted_list(matches)
    if "job description" in doc_type.lower():
        if quoted:
            return f"Detected job-posting keywords such as {quoted}."
        return "Detected patterns typical of a job-posting document."
    if quoted:
        return f"Detected {doc_type} keywords such as {quoted}."
    return f"Detected patterns typical of {doc_type}."


def keyword_rules(text: str) -> ClassificationResult | None:
    """First fixed-vocabulary rule whose keyword count meets its threshold."""
    lowered = text.lower()
    for rule in DOCUMENT_RULES:
        matches = [keyword for keyword in rule.keywords if keyword in lowered]
        if len(matches) >= rule.threshold:
            return ClassificationResult(
                is_resume=False,
                description=rule.description,
                class_name=rule.class_name or derive_document_class_name(rule.description),
                confidence=KEYWORD_RULE_CONFIDENCE,
                reason=_classifier_reason(rule.description, matches),
            )
    return None


def job_posting(text: str) -> ClassificationResult | None:
    """Fires on three posting phrases, or two phrases plus two requirement headings."""
    lowered = text.lower()
    phrases = [phrase for phrase in JOB_POSTING_PHRASES if phrase in lowered]
    if not phrases:
        return None
    requirements = [
        keyword for keyword in JOB_POSTING_REQUIREMENT_KEYWORDS if keyword in lowered
    ]
    if not (len(phrases) >= 3 or (len(phrases) >= 2 and len(requirements) >= 2)):
        return None

    clauses = [f"phrases like {format_quoted_list(phrases)}"]
    if requirements:
        clauses.append(f"sections such as {format_quoted_list(requirements)}")
    return ClassificationResult(
        is_resume=False,
        description="a job description document",
        class_name="job_description",
        confidence=JOB_POSTING_CONFIDENCE,
        reason=f"Detected job-posting {' and '.join(clauses)}.",
    )


def non_resume_signal(text: str) -> ClassificationResult | None:
    return keyword_rules(text) or job_posting(text)


def professional_summary(text: str) -> ClassificationResult | None:
    lowered = text.lower()
    if "professional summary" in lowered and "experience" in lowered:
        return ClassificationResult.resume(DUAL_KEYWORD_CONFIDENCE)
    return None


def resume_signal_score(text: str) -> float:
    trimmed = text.strip()
    lowered = trimmed.lower()
    score = 0.0
    for signal in RESUME_SIGNAL_PAIRS:
        if all(term in lowered for term in signal):
            score += 1

    section_hits = sum(1 for term in RESUME_SECTION_HEADINGS if term in lowered)
    if section_hits >= 4:
        score += 2
    elif section_hits >= 3:
        score += 1.5
    elif section_hits >= 2:
        score += 1

    if RESUME_TITLE_WORDS & set(lowered.split()):
        score += 1

    if len(_UPPERCASE_HEADING.findall(trimmed)) >= 2:
        score += 1
    return score


def statistical(text: str) -> ClassificationResult | None:
    if resume_signal_score(text) >= STATISTICAL_THRESHOLD:
        return ClassificationResult.resume(STATISTICAL_CONFIDENCE)
    return None


def section_trio(text: str) -> ClassificationResult | None:
    lowered = text.lower()
    if all(term in lowered for term in ("experience", "education", "skills")):
        return ClassificationResult.resume(SECTION_TRIO_CONFIDENCE)
    return None


def unrecognised(text: str) -> ClassificationResult:
    """Catch-all verdict describing the document by its opening line."""
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    first_line = lines[0] if lines else ""
    snippet = first_line[:_SNIPPET_LENGTH].strip()
    if snippet:
        ellipsis = "…" if len(first_line) > _SNIPPET_LENGTH else ""
        description = f'a document starting with "{snippet}{ellipsis}"'
    else:
        description = "a non-resume document"
    return ClassificationResult(
        is_resume=False,
        description=description,
        class_name=NON_RESUME_CLASS_NAME,
        confidence=UNRECOGNISED_CONFIDENCE,
        reason=LACKS_SECTIONS_REASON,
    )

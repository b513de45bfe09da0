import re
from dataclasses import replace

from resumegate.classification.models import ClassificationResult

_LEADING_ARTICLE = re.compile(r"^(?:an?|the)\s+", re.IGNORECASE)
_TRAILING_NOUN = re.compile(r"\b(?:document|file|text)$", re.IGNORECASE)
_QUOTES = re.compile("['\"“”‘’`]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def strip_leading_article(text: str) -> str:
    if not text:
        return ""
    return _LEADING_ARTICLE.sub("", text).strip()


def derive_document_class_name(*candidates: object) -> str:
    """Build a snake_case token from the first candidate that yields one.

    "a job description document" becomes "job_description".
    """
    for candidate in candidates:
        if not isinstance(candidate, str) or not candidate.strip():
            continue
        cleaned = strip_leading_article(candidate.strip())
        cleaned = _TRAILING_NOUN.sub("", cleaned).strip().lower()
        cleaned = _QUOTES.sub("", cleaned)
        tokens = _NON_ALNUM.sub(" ", cleaned).split()
        if tokens:
            return "_".join(tokens)
    return ""


def ensure_class_name(result: ClassificationResult, fallback: str = "") -> ClassificationResult:
    """Fill in a missing ``class_name`` from the description or ``fallback``."""
    if result.class_name.strip():
        return result
    derived = derive_document_class_name(result.description) or fallback.strip()
    if not derived:
        return result
    return replace(result, class_name=derived)


def format_quoted_list(items: list[str] | tuple[str, ...]) -> str:
    """Quote up to three items and join them: '"a"', '"a" and "b"', '"a", "b", and "c"'."""
    quoted = [f'"{item}"' for item in items if item][:3]
    if not quoted:
        return ""
    if len(quoted) == 1:
        return quoted[0]
    if len(quoted) == 2:
        return f"{quoted[0]} and {quoted[1]}"
    return f"{', '.join(quoted[:-1])}, and {quoted[-1]}"

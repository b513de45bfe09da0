import re

_LINE_ENDINGS = re.compile(r"\r\n?")
_STRAY_SEPARATORS = re.compile(r"[\x00\u2028\u2029]")
_BLANK_RUNS = re.compile(r"\n{3,}")


def normalize_extracted_text(text: str) -> str:
    """Unify line endings and keep at most one blank line between paragraphs."""
    if not text:
        return ""
    text = _LINE_ENDINGS.sub("\n", text)
    text = _STRAY_SEPARATORS.sub("\n", text)
    return _BLANK_RUNS.sub("\n\n", text)

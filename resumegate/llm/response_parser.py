"""Parsing of JSON objects embedded in free-form model answers."""

import re
from typing import Any

import json5

from resumegate.llm.generation import serialize_error
from resumegate.logging.logger import Log, StructuredLogger

_FENCED_JSON = re.compile(r"```json([\s\S]*?)```", re.IGNORECASE)


def extract_json_block(text: str | None) -> str | None:
    """Return the first balanced ``{...}`` block, looking inside a ```json fence first.

    Braces are counted outside of string literals only, so a ``}`` inside a
    quoted value does not end the object early.
    """
    if not isinstance(text, str):
        return None
    fenced = _FENCED_JSON.search(text)
    if fenced:
        text = fenced.group(1)
    start = text.find("{")
    if start == -1:
        return None
    depth = 0
    quote: str | None = None
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if quote is not None:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                quote = None
            continue
        if char in ("'", '"'):
            quote = char
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]
    return None


def parse_json_response(
    text: str | None, *, logger: StructuredLogger = Log
) -> dict[str, Any] | None:
    """Parse the JSON object in a model answer; None (and a log event) on failure.

    Parsing is permissive: single quotes, unquoted keys and trailing commas
    are accepted.
    """
    sample = text[:200] if isinstance(text, str) else None
    block = extract_json_block(text)
    if block is None:
        logger.error("ai_response_missing_json", sample=sample)
        return None
    try:
        parsed = json5.loads(block)
    except (ValueError, RecursionError) as exc:
        logger.error("ai_json_parse_failed", sample=sample, error=serialize_error(exc))
        return None
    if not isinstance(parsed, dict):
        logger.error("ai_json_parse_failed", sample=sample, error={"message": "not an object"})
        return None
    return parsed

"""Versioned prompt templates.

A prompt starts with ``[[Template:<id>]]`` and ``[[Version:<ver>]]`` header
lines (plus optional description and metadata lines), a ``---`` separator,
then upper-cased section titles each followed by their body, separated by
blank lines.
"""

import json
import re
from dataclasses import dataclass
from typing import Any

_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class TemplateMeta:
    template_id: str
    template_version: str


@dataclass(frozen=True)
class PromptSection:
    title: str
    body: Any


@dataclass(frozen=True)
class VersionedPrompt:
    text: str
    template_id: str
    template_version: str


PROMPT_TEMPLATES: dict[str, TemplateMeta] = {
    "document_classification": TemplateMeta("document_classification", "2024-05-18"),
}


def _normalise_body(body: Any) -> str:
    if body is None:
        return ""
    if isinstance(body, str):
        return body
    if isinstance(body, (list, tuple)):
        parts = [_normalise_body(entry) for entry in body]
        return "\n".join(part for part in parts if part.strip())
    if isinstance(body, (bool, int, float)):
        return str(body)
    try:
        return json.dumps(body)
    except (TypeError, ValueError):
        return str(body)


def create_versioned_prompt(
    meta: TemplateMeta,
    sections: list[PromptSection],
    description: str = "",
    metadata: dict[str, object] | None = None,
) -> VersionedPrompt:
    if not meta.template_id:
        raise ValueError("template_id is required to build a prompt template.")
    if not meta.template_version:
        raise ValueError("template_version is required to build a prompt template.")

    header = [
        f"[[Template:{meta.template_id}]]",
        f"[[Version:{meta.template_version}]]",
    ]
    if description:
        header.append(f"[[Description:{description}]]")
    for key, value in (metadata or {}).items():
        if value is None or value == "":
            continue
        header.append(f"[[{key}:{value}]]")
    header.append("---")

    blocks: list[str] = []
    for section in sections:
        body = _normalise_body(section.body).strip()
        if not body:
            continue
        title = section.title.strip()
        if title:
            blocks.append(f"{title.upper()}:")
        blocks.append(body)
        blocks.append("")
    body_text = _EXCESS_BLANK_LINES.sub("\n\n", "\n".join(blocks)).strip()

    text = "\n".join(line for line in [*header, body_text] if line).strip()
    return VersionedPrompt(
        text=text,
        template_id=meta.template_id,
        template_version=meta.template_version,
    )

"""Example generative model adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseGenerativeModel and register the provider in GenerativeModelFactory.
"""

import json
from typing import ClassVar

from resumegate.llm.client_base import BaseGenerativeModel


class ExampleClientAdapter(BaseGenerativeModel):
    """Example adapter that answers every prompt with a fixed classification.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "type": "resume",
        "probableType": "a professional resume",
        "confidence": 0.75,
        "reason": "Example adapter response.",
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def generate_content(self, prompt: str) -> str:
        _ = prompt
        return "```json\n" + json.dumps(self._response) + "\n```"

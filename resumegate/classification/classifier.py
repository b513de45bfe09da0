"""Resume / non-resume classification cascade.

Stages run in a fixed order and the first one that produces a verdict wins:

1. empty text
2. fixed-vocabulary and job-posting detectors (non-resume verdicts)
3. "professional summary" + "experience" shortcut
4. generative model, when one is configured
5. statistical resume-signal score
6. experience / education / skills trio
7. catch-all non-resume verdict

Non-resume heuristics sit ahead of every resume-producing stage, so a
heuristic non-resume signal is never overridden by a later resume verdict.
"""

import json
import math
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from resumegate.classification import heuristics
from resumegate.classification.class_names import (
    derive_document_class_name,
    ensure_class_name,
    strip_leading_article,
)
from resumegate.classification.models import (
    NON_RESUME_CLASS_NAME,
    ClassificationResult,
)
from resumegate.config.settings import Settings
from resumegate.llm.client_base import BaseGenerativeModel
from resumegate.llm.factory import GenerativeModelFactory
from resumegate.llm.generation import (
    create_text_digest,
    generate_content_with_retry,
    serialize_error,
)
from resumegate.llm.prompt_loader import load_task_instruction
from resumegate.llm.prompts import PROMPT_TEMPLATES, PromptSection, create_versioned_prompt
from resumegate.llm.response_parser import parse_json_response
from resumegate.logging.logger import Log, StructuredLogger

GenerateFn = Callable[..., str | None]
ParseFn = Callable[..., dict[str, Any] | None]

DEFAULT_EXCERPT_CHARS = 3600
MODEL_RESUME_CONFIDENCE = 0.75
MODEL_NON_RESUME_CONFIDENCE = 0.5
RETRY_LOG_EVENT = "document_classification_ai"


@dataclass(frozen=True)
class Stage:
    name: str
    build: Callable[[str], ClassificationResult | None]
    enabled: Callable[[], bool] = lambda: True


def build_classification_prompt(excerpt: str) -> str:
    meta = PROMPT_TEMPLATES["document_classification"]
    prompt = create_versioned_prompt(
        meta,
        [
            PromptSection("TASK", load_task_instruction("document_classification_task")),
            PromptSection(
                "DOCUMENT EXCERPT",
                f'"""{excerpt}"""' if excerpt else "Not provided",
            ),
        ],
        description="Classify whether the document excerpt is a resume.",
    )
    return prompt.text


def _model_confidence(value: object, is_resume: bool) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
        return min(1.0, max(0.0, float(value)))
    return MODEL_RESUME_CONFIDENCE if is_resume else MODEL_NON_RESUME_CONFIDENCE


def result_from_model_answer(parsed: dict[str, Any]) -> ClassificationResult:
    """Translate a parsed ``{type, probableType, confidence, reason}`` answer."""
    is_resume = str(parsed.get("type", "")).strip().lower() == "resume"
    confidence = _model_confidence(parsed.get("confidence"), is_resume)
    reason = parsed.get("reason")
    reason = reason.strip() if isinstance(reason, str) else ""
    if is_resume:
        return ClassificationResult.resume(confidence, reason or None)

    probable_type = parsed.get("probableType")
    probable_type = probable_type if isinstance(probable_type, str) else ""
    description = probable_type.strip() or "a non-resume document"
    if not reason:
        reason = (
            f"The document content aligns with {strip_leading_article(description)} "
            "rather than a CV."
        )
    class_name = parsed.get("className")
    class_name = derive_document_class_name(
        class_name if isinstance(class_name, str) else "",
        probable_type,
        description,
    )
    return ClassificationResult(
        is_resume=False,
        description=description,
        class_name=class_name or NON_RESUME_CLASS_NAME,
        confidence=confidence,
        reason=reason,
    )


class DocumentClassifier:
    """Decides whether extracted text is a resume.

    ``model`` is optional; without it the model stage is skipped and the
    heuristic stages decide alone. ``generate`` and ``parse`` are the model
    invocation and answer parsing hooks, swappable in tests.
    """

    def __init__(
        self,
        model: BaseGenerativeModel | None = None,
        generate: GenerateFn = generate_content_with_retry,
        parse: ParseFn = parse_json_response,
        logger: StructuredLogger = Log,
        excerpt_chars: int = DEFAULT_EXCERPT_CHARS,
    ) -> None:
        self._model = model
        self._generate = generate
        self._parse = parse
        self._logger = logger
        self._excerpt_chars = excerpt_chars
        self._stages = (
            Stage("empty_document", heuristics.empty_document),
            Stage("non_resume_signal", self._non_resume_signal),
            Stage("professional_summary", heuristics.professional_summary),
            Stage("model", self._classify_with_model, lambda: self._model is not None),
            Stage("statistical", heuristics.statistical),
            Stage("section_trio", heuristics.section_trio),
            Stage("unrecognised", heuristics.unrecognised),
        )

    def classify(self, text: str) -> ClassificationResult:
        trimmed = (text or "").strip()
        for stage in self._stages:
            if not stage.enabled():
                continue
            result = stage.build(trimmed)
            if result is not None:
                self._logger.debug(
                    "document_classified",
                    stage=stage.name,
                    is_resume=result.is_resume,
                    class_name=result.class_name,
                    confidence=result.confidence,
                )
                return result
        # The catch-all stage always answers.
        raise AssertionError("classification cascade produced no verdict")

    @staticmethod
    def _non_resume_signal(text: str) -> ClassificationResult | None:
        result = heuristics.non_resume_signal(text)
        if result is None:
            return None
        return ensure_class_name(result, NON_RESUME_CLASS_NAME)

    def _classify_with_model(self, text: str) -> ClassificationResult | None:
        meta = PROMPT_TEMPLATES["document_classification"]
        try:
            prompt = build_classification_prompt(text[: self._excerpt_chars])
            prompt_digest = create_text_digest(prompt)
            started = time.monotonic()
            answer = self._generate(
                self._model,
                prompt,
                retry_log_event=RETRY_LOG_EVENT,
                logger=self._logger,
            )
            latency_ms = int((time.monotonic() - started) * 1000)
            parsed = self._parse(answer, logger=self._logger)
            if not isinstance(parsed, dict) or not isinstance(parsed.get("type"), str):
                self._logger.info(
                    "document_classification_ai_metrics",
                    template_id=meta.template_id,
                    template_version=meta.template_version,
                    prompt_digest=prompt_digest,
                    latency_ms=latency_ms,
                    outcome="no_parse",
                )
                return None
            result = result_from_model_answer(parsed)
            self._logger.info(
                "document_classification_ai_metrics",
                template_id=meta.template_id,
                template_version=meta.template_version,
                prompt_digest=prompt_digest,
                output_digest=create_text_digest(json.dumps(parsed)),
                latency_ms=latency_ms,
                is_resume=result.is_resume,
                confidence=result.confidence,
            )
            return result
        except Exception as exc:
            self._logger.warning(
                "document_classification_ai_failed", error=serialize_error(exc)
            )
            return None


def classify_document(
    text: str,
    *,
    model: BaseGenerativeModel | None = None,
    generate: GenerateFn = generate_content_with_retry,
    parse: ParseFn = parse_json_response,
    logger: StructuredLogger = Log,
) -> ClassificationResult:
    """One-shot classification with a throwaway ``DocumentClassifier``."""
    classifier = DocumentClassifier(model=model, generate=generate, parse=parse, logger=logger)
    return classifier.classify(text)


def build_document_classifier(settings: Settings) -> DocumentClassifier:
    """Wire the classifier with the configured model and retry policy."""
    generate = partial(
        generate_content_with_retry,
        max_attempts=settings.classification_retry_max_attempts,
        base_delay_ms=settings.classification_retry_base_delay_ms,
        max_delay_ms=settings.classification_retry_max_delay_ms,
        jitter_ms=settings.classification_retry_jitter_ms,
    )
    return DocumentClassifier(
        model=GenerativeModelFactory.create(settings),
        generate=generate,
        excerpt_chars=settings.classification_excerpt_chars,
    )

import hashlib
import re
import traceback
from typing import Any

from resumegate.llm.client_base import BaseGenerativeModel
from resumegate.logging.logger import Log, StructuredLogger
from resumegate.retry.executor import execute_with_retry
from resumegate.retry.policies import get_error_status, should_retry_model_error

_WHITESPACE = re.compile(r"\s+")


def serialize_error(error: BaseException | None) -> dict[str, Any] | None:
    """Flatten an exception into a log-friendly mapping."""
    if error is None:
        return None
    payload: dict[str, Any] = {
        "name": type(error).__name__,
        "message": str(error),
    }
    code = getattr(error, "code", None)
    if code:
        payload["code"] = code
    if error.__traceback__ is not None:
        payload["stack"] = "".join(traceback.format_tb(error.__traceback__))
    return payload


def create_text_digest(value: str) -> str:
    """SHA-256 of ``value`` with whitespace collapsed; empty for blank input."""
    if not isinstance(value, str):
        return ""
    normalized = _WHITESPACE.sub(" ", value).strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


def generate_content_with_retry(
    model: BaseGenerativeModel | None,
    prompt: str,
    *,
    retry_log_event: str = "",
    retry_log_context: dict[str, object] | None = None,
    logger: StructuredLogger = Log,
    max_attempts: int = 3,
    base_delay_ms: int = 800,
    max_delay_ms: int = 6000,
    jitter_ms: int = 400,
) -> str | None:
    """Invoke ``model`` with exponential backoff on transient failures.

    Returns None when no model is supplied. The final error propagates
    unchanged once retries are exhausted or the failure is not retryable.
    """
    if model is None:
        return None

    def _on_retry(error: Exception, attempt: int, delay_ms: int) -> None:
        if not retry_log_event:
            return
        logger.warning(
            f"{retry_log_event}_retry",
            **(retry_log_context or {}),
            attempt=attempt,
            delay_ms=delay_ms,
            status=get_error_status(error),
            error=serialize_error(error),
        )

    return execute_with_retry(
        lambda _attempt: model.generate_content(prompt),
        max_attempts=max_attempts,
        base_delay_ms=base_delay_ms,
        max_delay_ms=max_delay_ms,
        jitter_ms=jitter_ms,
        should_retry=should_retry_model_error,
        on_retry=_on_retry,
    )

import random
import time
from collections.abc import Callable
from typing import TypeVar

from resumegate.logging.logger import Log

T = TypeVar("T")

RetryPredicate = Callable[[Exception, int], bool]
RetryObserver = Callable[[Exception, int, int], None]


def compute_backoff_ms(
    attempt: int,
    *,
    base_delay_ms: int,
    max_delay_ms: int,
    jitter_ms: int,
) -> int:
    """Exponential delay floor for ``attempt`` (1-based) plus additive jitter."""
    exponential = base_delay_ms * 2 ** (attempt - 1)
    bounded = min(max_delay_ms, exponential)
    jitter = int(random.random() * jitter_ms) if jitter_ms > 0 else 0
    return max(0, bounded + jitter)


def execute_with_retry(
    operation: Callable[[int], T],
    *,
    max_attempts: int = 3,
    base_delay_ms: int = 500,
    max_delay_ms: int = 5000,
    jitter_ms: int = 250,
    should_retry: RetryPredicate | None = None,
    on_retry: RetryObserver | None = None,
    sleep: Callable[[float], None] | None = None,
) -> T:
    """Run ``operation`` sequentially until it succeeds or may not be retried.

    ``operation`` receives the 1-based attempt number. After a failure,
    ``should_retry(error, attempt)`` decides whether another attempt is made;
    when it declines, or ``max_attempts`` is reached, the error is re-raised
    unchanged. Before each wait ``on_retry(error, attempt, delay_ms)`` is
    called. ``sleep`` defaults to ``time.sleep``.
    """
    attempts = max(1, max_attempts)
    for attempt in range(1, attempts + 1):
        try:
            return operation(attempt)
        except Exception as exc:
            can_retry = (
                attempt < attempts
                and should_retry is not None
                and should_retry(exc, attempt)
            )
            if not can_retry:
                raise
            delay_ms = compute_backoff_ms(
                attempt,
                base_delay_ms=base_delay_ms,
                max_delay_ms=max_delay_ms,
                jitter_ms=jitter_ms,
            )
            if on_retry is not None:
                _notify(on_retry, exc, attempt, delay_ms)
            (sleep or time.sleep)(delay_ms / 1000)
    raise RuntimeError("execute_with_retry exhausted without result")  # pragma: no cover


def _notify(on_retry: RetryObserver, error: Exception, attempt: int, delay_ms: int) -> None:
    try:
        on_retry(error, attempt, delay_ms)
    except Exception as exc:
        Log.warning(f"Retry observer failed: {exc}")

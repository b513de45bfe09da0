"""Retryability predicates shared by every operation run through the executor."""

import errno

RETRYABLE_NETWORK_ERROR_CODES = frozenset({
    "ECONNRESET",
    "ECONNREFUSED",
    "ETIMEDOUT",
    "EPIPE",
    "EAI_AGAIN",
    "ENOTFOUND",
    "ECONNABORTED",
    "ENETUNREACH",
    "EHOSTUNREACH",
})

RETRYABLE_MODEL_ERROR_CODES = frozenset({
    "RESOURCE_EXHAUSTED",
    "ABORTED",
    "UNAVAILABLE",
})

_NETWORK_MESSAGE_PATTERNS = (
    "timed out",
    "timeout",
    "temporarily unavailable",
    "connection reset",
    "connection error",
    "socket hang up",
)

_MODEL_MESSAGE_PATTERNS = (
    "resource exhausted",
    "quota",
    "rate limit",
    "temporarily unavailable",
    "timeout",
)


def get_error_status(error: BaseException | None) -> int | None:
    """Find an HTTP status carried by ``error`` or its direct cause."""
    if error is None:
        return None
    for candidate in (error, error.__cause__):
        if candidate is None:
            continue
        for attr in ("status", "status_code"):
            value = getattr(candidate, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        response = getattr(candidate, "response", None)
        value = getattr(response, "status_code", None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def is_retryable_status(status: int | None) -> bool:
    if status is None:
        return False
    return status == 429 or status >= 500


def _error_code(error: BaseException) -> str:
    code = getattr(error, "code", None)
    if isinstance(code, str):
        return code.upper()
    os_errno = getattr(error, "errno", None)
    if isinstance(os_errno, int):
        return errno.errorcode.get(os_errno, "")
    return ""


def is_retryable_network_error(error: BaseException | None) -> bool:
    if error is None:
        return False
    if isinstance(error, (ConnectionError, TimeoutError)):
        return True
    code = _error_code(error)
    if code and code in RETRYABLE_NETWORK_ERROR_CODES:
        return True
    name = type(error).__name__.upper()
    if name in RETRYABLE_NETWORK_ERROR_CODES:
        return True
    message = str(error).lower()
    if not message:
        return False
    return any(pattern in message for pattern in _NETWORK_MESSAGE_PATTERNS)


def should_retry_model_error(error: BaseException | None, attempt: int = 0) -> bool:
    """Retry policy for generative model calls.

    Retries HTTP 429/5xx, network-class failures, provider codes signalling
    exhaustion or unavailability, and quota / rate-limit / timeout messages.
    """
    _ = attempt
    if error is None:
        return False
    if is_retryable_status(get_error_status(error)):
        return True
    if is_retryable_network_error(error):
        return True
    code = _error_code(error)
    if code and (
        code in RETRYABLE_MODEL_ERROR_CODES or code in RETRYABLE_NETWORK_ERROR_CODES
    ):
        return True
    message = str(error).lower()
    if not message:
        return False
    return any(pattern in message for pattern in _MODEL_MESSAGE_PATTERNS)

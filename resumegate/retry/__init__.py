from resumegate.retry.executor import compute_backoff_ms, execute_with_retry
from resumegate.retry.policies import (
    get_error_status,
    is_retryable_network_error,
    is_retryable_status,
    should_retry_model_error,
)

__all__ = [
    "compute_backoff_ms",
    "execute_with_retry",
    "get_error_status",
    "is_retryable_network_error",
    "is_retryable_status",
    "should_retry_model_error",
]

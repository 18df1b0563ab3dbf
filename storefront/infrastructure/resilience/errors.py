"""Resilience exceptions.

Unlike DomainError values, these are raised: a rejected or exhausted call
has no value to return, and callers wrapping a store must stop.
"""


class ResilienceError(Exception):
    """Base class for circuit breaker and retry failures."""


class CircuitOpenError(ResilienceError):
    """Call rejected because the circuit breaker is OPEN.

    Attributes:
        name: Circuit breaker name.
        retry_after: Seconds until a probe call will be allowed.
    """

    def __init__(self, name: str, retry_after: float) -> None:
        self.name = name
        self.retry_after = max(retry_after, 0.0)
        super().__init__(
            f"Circuit breaker '{name}' is OPEN; service unavailable "
            f"(retry in {self.retry_after:.1f}s)"
        )


class RetryExhaustedError(ResilienceError):
    """Every attempt failed.

    The last error is kept in ``last_error`` and chained as ``__cause__``.
    """

    def __init__(self, attempts: int, last_error: BaseException | None) -> None:
        self.attempts = attempts
        self.last_error = last_error
        detail = str(last_error) if last_error is not None else "unknown error"
        super().__init__(f"All {attempts} attempts failed. Last error: {detail}")


class CircuitBreakerAlreadyRegisteredError(ResilienceError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Circuit breaker '{name}' is already registered")


class CircuitBreakerNotFoundError(ResilienceError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Circuit breaker '{name}' not found")

"""Circuit breaker monitoring schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.infrastructure.resilience import CircuitBreakerMetrics


class CircuitBreakerMetricsResponse(BaseModel):
    name: str
    state: str
    failure_count: int
    success_count: int
    total_requests: int
    failed_requests: int
    successful_requests: int
    last_failure_time: datetime | None
    last_success_time: datetime | None
    retry_after_seconds: float | None = Field(
        default=None, description="Seconds until an OPEN breaker allows a probe"
    )

    @classmethod
    def from_metrics(
        cls, metrics: CircuitBreakerMetrics, now: float
    ) -> "CircuitBreakerMetricsResponse":
        retry_after = (
            max(metrics.next_attempt_time - now, 0.0)
            if metrics.next_attempt_time is not None
            else None
        )
        return cls(
            name=metrics.name,
            state=metrics.state.value,
            failure_count=metrics.failure_count,
            success_count=metrics.success_count,
            total_requests=metrics.total_requests,
            failed_requests=metrics.failed_requests,
            successful_requests=metrics.successful_requests,
            last_failure_time=metrics.last_failure_time,
            last_success_time=metrics.last_success_time,
            retry_after_seconds=retry_after,
        )


class CircuitBreakerListResponse(BaseModel):
    success: bool = True
    data: list[CircuitBreakerMetricsResponse]

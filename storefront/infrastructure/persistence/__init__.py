"""Account store adapters."""

from storefront.infrastructure.persistence.in_memory_user_repository import (
    InMemoryUserRepository,
)
from storefront.infrastructure.persistence.resilient_user_repository import (
    ResilientUserRepository,
)

__all__ = [
    "InMemoryUserRepository",
    "ResilientUserRepository",
]

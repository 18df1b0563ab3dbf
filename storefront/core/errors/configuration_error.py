"""Startup configuration failures.

Unlike DomainError, a ConfigurationError IS raised: a service that cannot be
built (missing signing secret, malformed key) must stop the process at startup.
"""


class ConfigurationError(Exception):
    """Required configuration is missing or invalid."""

    pass

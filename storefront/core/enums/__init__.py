"""Core enums package.

Usage:
    from storefront.core.enums import ErrorCode, Environment
"""

from storefront.core.enums.environment import Environment
from storefront.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]

"""Domain error message constants and account store exceptions."""

from storefront.domain.errors.account_store_error import DuplicateEmailError
from storefront.domain.errors.authentication_error import AuthenticationError

__all__ = ["AuthenticationError", "DuplicateEmailError"]

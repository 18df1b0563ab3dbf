"""Account store exceptions raised by UserRepository adapters."""


class DuplicateEmailError(Exception):
    """Another account already owns the email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")

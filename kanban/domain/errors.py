"""
errors.py - Domain errors
Single responsibility: typed failures surfaced to callers of the core.
"""


class InvalidDraft(ValueError):
    """Add-ticket input that cannot become a Ticket."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class RemoteSourceError(RuntimeError):
    """The remote ticket source could not be read."""

"""
Exceptions raised by typespec.
"""

from .types import ErrorRecord


class TypeCheckError(ValueError):
    """A value failed assert_value. One message line per type error."""

    def __init__(self, errors: list[ErrorRecord], messages: list[str]):
        super().__init__("\n".join(messages))
        self.errors = errors
        self.messages = messages

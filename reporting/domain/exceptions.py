"""Message-keyed errors raised by the template use cases."""

from __future__ import annotations

from .messages import render_message


class MessageKeyedError(Exception):
    """Base error carrying a message key and the values used to render it."""

    def __init__(self, message_key: str, *params: object) -> None:
        self.message_key = message_key
        self.params = params
        super().__init__(render_message(message_key, *params))

    @property
    def message(self) -> str:
        return render_message(self.message_key, *self.params)


class ReportingError(MessageKeyedError):
    """Raised for file, parsing and template state problems."""


class ValidationMessageError(MessageKeyedError):
    """Raised when a request references unknown reference data."""


class PermissionMessageError(MessageKeyedError):
    """Raised when the caller lacks a right required by a template."""


__all__ = [
    "MessageKeyedError",
    "PermissionMessageError",
    "ReportingError",
    "ValidationMessageError",
]

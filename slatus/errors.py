"""Exception hierarchy.

Library code raises these; only the CLI entry point catches them, prints
the message and exits non-zero.
"""

from __future__ import annotations


class SlatusError(Exception):
    """Base class for every error reported to the user."""


class NotConfigured(SlatusError):
    """No credential has been saved yet."""


class CorruptStore(SlatusError):
    """The preset file exists but cannot be parsed."""


class NotFound(SlatusError):
    """A named preset is absent from the store."""


class InvalidInput(SlatusError):
    """User-supplied input was rejected before any I/O."""


class TransportFailure(SlatusError):
    """The remote endpoint could not be reached."""


class DecodeFailure(SlatusError):
    """The remote response was not the expected JSON structure."""


class RemoteRejected(SlatusError):
    """A well-formed remote response signalled failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Slack API error: {self.message}"

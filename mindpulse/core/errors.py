"""
Domain errors raised by repositories and services.

The server maps each error type to an HTTP status in
``mindpulse.server.exception_handlers``.
"""

from __future__ import annotations

from typing import Optional


class MindPulseError(Exception):
    """Base class for all MindPulse domain errors."""

    status_code: int = 400

    def __init__(self, message: str, *, detail: Optional[object] = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail if detail is not None else message


class NotFoundError(MindPulseError):
    """Requested row does not exist."""

    status_code = 404

    def __init__(self, resource: str, identifier: object) -> None:
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.identifier = identifier


class ConflictError(MindPulseError):
    """A unique value (email, username, firebase uid) is already taken."""

    status_code = 409


class PermissionDeniedError(MindPulseError):
    """Caller is not the owner of the row it tries to change."""

    status_code = 403


class InvalidCredentialsError(MindPulseError):
    """Old password did not match the stored hash."""

    status_code = 400

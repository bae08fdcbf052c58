"""Error taxonomy shared by clients, services and the UI."""

from __future__ import annotations


class PromptCrafterError(Exception):
    """Base class for all application errors."""


class InvalidArgument(PromptCrafterError, ValueError):
    """User-correctable input error; the pipeline does not run."""


class UpstreamUnavailable(PromptCrafterError):
    """A remote endpoint failed (transport, non-2xx or malformed payload).

    Raised by the HTTP clients only. Services absorb it and degrade.
    """


class AuthError(PromptCrafterError):
    """Sign-in or sign-up was rejected by the identity provider."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

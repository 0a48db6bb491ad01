# app/errors.py

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """The generative-service credential is missing. Fatal for the session."""


class GenerationError(RuntimeError):
    """
    The generation call failed: network or SDK error, service-side error,
    or a malformed / incomplete structured response.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

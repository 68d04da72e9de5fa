"""
Custom exceptions for the hybrid envelope protocol.
"""

from __future__ import annotations


class EnvelopeError(Exception):
    """Base exception for envelope processing failures."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


class KeyFormatError(EnvelopeError):
    """Exception for malformed or unsupported key material."""


class WrapError(EnvelopeError):
    """Exception for failures while wrapping a symmetric key."""


class UnwrapError(EnvelopeError):
    """Exception for failures while unwrapping a symmetric key."""


class AuthenticationError(EnvelopeError):
    """Exception for AEAD tag verification failures."""


class SerializationError(EnvelopeError):
    """Exception for malformed envelope fields."""


class ValidationError(Exception):
    """Exception for a decrypted record that fails validation."""

    def __init__(self, message: str, status_code: int = 422) -> None:
        super().__init__(message)
        self.status_code = status_code

"""
AES-GCM encryption of message bodies.
"""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from profilecrypt.common.exceptions import (
    AuthenticationError,
    SerializationError,
    UnwrapError,
)
from profilecrypt.common.models import AeadPayload

KEY_SIZE = 16  # AES-128
NONCE_SIZE = 12
TAG_SIZE = 16
VALID_KEY_SIZES = (16, 24, 32)


class PayloadCipher:
    """Authenticated encryption with a fresh random nonce per call."""

    @staticmethod
    def generate_key() -> bytes:
        """Generate a single-use 128-bit AES key."""
        return AESGCM.generate_key(bit_length=KEY_SIZE * 8)

    @staticmethod
    def encrypt(
        plaintext: bytes, key: bytes, associated_data: bytes | None = None
    ) -> AeadPayload:
        """Encrypt plaintext; the 16-byte tag is appended to the ciphertext."""
        aead = AESGCM(key)
        nonce = os.urandom(NONCE_SIZE)
        ciphertext = aead.encrypt(nonce, plaintext, associated_data)
        return AeadPayload(nonce=nonce, ciphertext=ciphertext)

    @staticmethod
    def decrypt(
        payload: AeadPayload, key: bytes, associated_data: bytes | None = None
    ) -> bytes:
        """Verify the tag and return the plaintext, or raise without output."""
        if len(key) not in VALID_KEY_SIZES:
            msg = "unable to unwrap key"
            raise UnwrapError(msg)
        if len(payload.nonce) != NONCE_SIZE:
            msg = f"nonce must be {NONCE_SIZE} bytes"
            raise SerializationError(msg)

        aead = AESGCM(key)
        try:
            return aead.decrypt(payload.nonce, payload.ciphertext, associated_data)
        except InvalidTag as e:
            msg = "message authentication failed"
            raise AuthenticationError(msg) from e

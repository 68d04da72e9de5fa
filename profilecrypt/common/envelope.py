"""
Envelope codec: hybrid seal/open and the base64 wire contract.

Sealing generates a fresh AES key, encrypts the plaintext with it and wraps
the key under the recipient's RSA public key. Opening reverses the steps.
On the wire every field is standard base64 without line breaks:

    encryptedAesKey  RSA-OAEP wrapped AES key (modulus length)
    iv               12-byte GCM nonce
    encryptedData    ciphertext with the 16-byte tag appended
"""

from __future__ import annotations

import base64
import binascii
import logging
import math
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from profilecrypt.common.config import Config
from profilecrypt.common.exceptions import SerializationError
from profilecrypt.common.logging_utils import describe_bytes
from profilecrypt.common.models import Envelope, EnvelopeRequest
from profilecrypt.common.payload_cipher import NONCE_SIZE, TAG_SIZE, PayloadCipher

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import rsa

    from profilecrypt.common.interfaces import IKeyWrapper, IPayloadCipher

logger = logging.getLogger(__name__)


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode(value: str, field: str) -> bytes:
    """Strict standard base64 decoding; rejects foreign characters."""
    try:
        return base64.b64decode(value.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        msg = f"field '{field}' is not valid base64"
        raise SerializationError(msg) from e


class EnvelopeCodec:
    """Seals and opens envelopes. Stateless; safe to share across threads."""

    def __init__(
        self,
        key_wrapper: IKeyWrapper,
        payload_cipher: IPayloadCipher | None = None,
        max_ciphertext_len: int | None = None,
    ):
        self.key_wrapper = key_wrapper
        self.payload_cipher = payload_cipher or PayloadCipher()
        self.max_ciphertext_len = (
            max_ciphertext_len
            if max_ciphertext_len is not None
            else Config().MAX_CIPHERTEXT_LEN
        )

    def seal(
        self,
        plaintext: bytes,
        public_key: rsa.RSAPublicKey | None = None,
        associated_data: bytes | None = None,
    ) -> Envelope:
        """Encrypt plaintext for the holder of the matching private key."""
        key = self.payload_cipher.generate_key()
        payload = self.payload_cipher.encrypt(plaintext, key, associated_data)
        wrapped_key = self.key_wrapper.wrap(key, public_key)
        logger.debug(
            "Sealed %s into ciphertext %s",
            describe_bytes(plaintext),
            describe_bytes(payload.ciphertext),
        )
        return Envelope(
            wrapped_key=wrapped_key,
            nonce=payload.nonce,
            ciphertext=payload.ciphertext,
        )

    def open(
        self,
        envelope: Envelope,
        private_key: rsa.RSAPrivateKey | None = None,
        associated_data: bytes | None = None,
    ) -> bytes:
        """Recover the plaintext.

        Raises UnwrapError if the key cannot be recovered and
        AuthenticationError if the payload fails verification.
        """
        key = self.key_wrapper.unwrap(envelope.wrapped_key, private_key)
        return self.payload_cipher.decrypt(envelope.payload, key, associated_data)

    def to_wire(self, envelope: Envelope) -> EnvelopeRequest:
        """Encode an envelope as base64 wire fields."""
        return EnvelopeRequest(
            encrypted_aes_key=b64encode(envelope.wrapped_key),
            iv=b64encode(envelope.nonce),
            encrypted_data=b64encode(envelope.ciphertext),
        )

    def from_wire(self, data: EnvelopeRequest | dict[str, Any]) -> Envelope:
        """Decode and validate base64 wire fields."""
        if isinstance(data, EnvelopeRequest):
            request = data
        else:
            try:
                request = EnvelopeRequest.model_validate(data)
            except PydanticValidationError as e:
                msg = "envelope is missing required fields"
                raise SerializationError(msg) from e

        # Bound the encoded size before decoding anything
        if len(request.encrypted_data) > 4 * math.ceil(self.max_ciphertext_len / 3):
            msg = "ciphertext too large"
            raise SerializationError(msg)

        wrapped_key = b64decode(request.encrypted_aes_key, "encryptedAesKey")
        nonce = b64decode(request.iv, "iv")
        ciphertext = b64decode(request.encrypted_data, "encryptedData")

        if not wrapped_key:
            msg = "wrapped key is empty"
            raise SerializationError(msg)
        if len(nonce) != NONCE_SIZE:
            msg = f"nonce must be {NONCE_SIZE} bytes, got {len(nonce)}"
            raise SerializationError(msg)
        if len(ciphertext) < TAG_SIZE:
            msg = "ciphertext is shorter than the authentication tag"
            raise SerializationError(msg)
        if len(ciphertext) > self.max_ciphertext_len:
            msg = "ciphertext too large"
            raise SerializationError(msg)

        return Envelope(wrapped_key=wrapped_key, nonce=nonce, ciphertext=ciphertext)

    def seal_to_wire(
        self,
        plaintext: bytes,
        public_key: rsa.RSAPublicKey | None = None,
        associated_data: bytes | None = None,
    ) -> dict[str, str]:
        """Seal and return the JSON-ready wire body."""
        envelope = self.seal(plaintext, public_key, associated_data)
        return self.to_wire(envelope).model_dump(by_alias=True)

    def open_from_wire(
        self,
        data: EnvelopeRequest | dict[str, Any],
        private_key: rsa.RSAPrivateKey | None = None,
        associated_data: bytes | None = None,
    ) -> bytes:
        """Decode a wire body and open it."""
        return self.open(self.from_wire(data), private_key, associated_data)

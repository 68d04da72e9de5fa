"""
Interfaces and protocols for dependency injection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric import rsa

    from profilecrypt.common.models import AeadPayload


class IKeyWrapper(Protocol):
    """Protocol for asymmetric key wrapping."""

    def wrap(
        self, secret: bytes, public_key: rsa.RSAPublicKey | None = None
    ) -> bytes: ...

    def unwrap(
        self, wrapped: bytes, private_key: rsa.RSAPrivateKey | None = None
    ) -> bytes: ...


class IPayloadCipher(Protocol):
    """Protocol for symmetric authenticated encryption."""

    def generate_key(self) -> bytes: ...

    def encrypt(
        self, plaintext: bytes, key: bytes, associated_data: bytes | None = None
    ) -> AeadPayload: ...

    def decrypt(
        self, payload: AeadPayload, key: bytes, associated_data: bytes | None = None
    ) -> bytes: ...

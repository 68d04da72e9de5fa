"""
RSA-OAEP wrapping of per-message symmetric keys.
"""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from profilecrypt.common.exceptions import KeyFormatError, UnwrapError, WrapError
from profilecrypt.common.keys import KeyPair, max_wrap_size

logger = logging.getLogger(__name__)


def oaep_padding() -> padding.OAEP:
    """OAEP with SHA-256 for both the digest and MGF1."""
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


class AsymmetricKeyWrapper:
    """Wraps and unwraps short secrets with an RSA key pair.

    Constructed once with the loaded keys and shared between callers; it
    holds no mutable state. A private key implies its public half.
    """

    def __init__(
        self,
        public_key: rsa.RSAPublicKey | None = None,
        private_key: rsa.RSAPrivateKey | None = None,
    ):
        if public_key is not None and not isinstance(public_key, rsa.RSAPublicKey):
            msg = "public key must be an RSA public key"
            raise KeyFormatError(msg)
        if private_key is not None and not isinstance(private_key, rsa.RSAPrivateKey):
            msg = "private key must be an RSA private key"
            raise KeyFormatError(msg)
        if public_key is None and private_key is not None:
            public_key = private_key.public_key()
        self.public_key = public_key
        self.private_key = private_key

    @classmethod
    def from_key_pair(cls, key_pair: KeyPair) -> AsymmetricKeyWrapper:
        return cls(public_key=key_pair.public_key, private_key=key_pair.private_key)

    @classmethod
    def from_der(
        cls, public_der: bytes | None = None, private_der: bytes | None = None
    ) -> AsymmetricKeyWrapper:
        """Build a wrapper from encoded key bytes."""
        return cls.from_key_pair(KeyPair.from_der(public_der, private_der))

    def wrap(
        self, secret: bytes, public_key: rsa.RSAPublicKey | None = None
    ) -> bytes:
        """Encrypt a secret under the recipient's public key."""
        key = public_key if public_key is not None else self.public_key
        if key is None:
            msg = "no public key available for wrapping"
            raise WrapError(msg)
        if not isinstance(key, rsa.RSAPublicKey):
            msg = "public key must be an RSA public key"
            raise WrapError(msg)
        if not secret:
            msg = "secret is empty"
            raise WrapError(msg)

        limit = max_wrap_size(key)
        if len(secret) > limit:
            msg = f"secret of {len(secret)} bytes exceeds OAEP limit of {limit} bytes"
            raise WrapError(msg)

        try:
            return key.encrypt(secret, oaep_padding())
        except ValueError as e:
            msg = "key wrapping failed"
            raise WrapError(msg) from e

    def unwrap(
        self, wrapped: bytes, private_key: rsa.RSAPrivateKey | None = None
    ) -> bytes:
        """Recover a secret with the recipient's private key.

        Every failure raises the same UnwrapError message so that wrong keys
        and corrupted padding are indistinguishable to the caller.
        """
        key = private_key if private_key is not None else self.private_key
        if key is None:
            msg = "no private key available for unwrapping"
            raise UnwrapError(msg)

        try:
            return key.decrypt(wrapped, oaep_padding())
        except ValueError as e:
            msg = "unable to unwrap key"
            raise UnwrapError(msg) from e

    @property
    def wrapped_key_size(self) -> int:
        """Byte length of wrapped output, equal to the modulus length."""
        if self.public_key is None:
            msg = "no public key available"
            raise KeyFormatError(msg)
        return self.public_key.key_size // 8

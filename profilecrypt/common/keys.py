"""
RSA key material loading and generation.

Public keys are DER-encoded SubjectPublicKeyInfo and private keys DER-encoded
PKCS#8. PEM-armored input is recognised and accepted as well.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from pydantic import BaseModel, ConfigDict

from profilecrypt.common.exceptions import KeyFormatError

logger = logging.getLogger(__name__)

PEM_MARKER = b"-----BEGIN"
MIN_RSA_KEY_SIZE = 2048
OAEP_HASH_LEN = hashes.SHA256.digest_size


def _is_pem(data: bytes) -> bool:
    return data.lstrip().startswith(PEM_MARKER)


def load_public_key(data: bytes) -> rsa.RSAPublicKey:
    """Parse an RSA public key from SubjectPublicKeyInfo bytes."""
    if not data:
        msg = "public key is empty"
        raise KeyFormatError(msg)
    try:
        if _is_pem(data):
            key = serialization.load_pem_public_key(data)
        else:
            key = serialization.load_der_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as e:
        msg = "malformed public key"
        raise KeyFormatError(msg) from e

    if not isinstance(key, rsa.RSAPublicKey):
        msg = f"expected an RSA public key, got {type(key).__name__}"
        raise KeyFormatError(msg)
    return key


def load_private_key(
    data: bytes, password: bytes | None = None
) -> rsa.RSAPrivateKey:
    """Parse an RSA private key from PKCS#8 bytes."""
    if not data:
        msg = "private key is empty"
        raise KeyFormatError(msg)
    try:
        if _is_pem(data):
            key = serialization.load_pem_private_key(data, password)
        else:
            key = serialization.load_der_private_key(data, password)
    except TypeError as e:
        # Raised for encrypted keys without a password and vice versa
        msg = "private key password mismatch"
        raise KeyFormatError(msg) from e
    except (ValueError, UnsupportedAlgorithm) as e:
        msg = "malformed private key"
        raise KeyFormatError(msg) from e

    if not isinstance(key, rsa.RSAPrivateKey):
        msg = f"expected an RSA private key, got {type(key).__name__}"
        raise KeyFormatError(msg)
    return key


def _read_key_file(path: Path) -> bytes:
    if not path.exists():
        msg = f"Key file not found: {path}. Run 'profilecrypt keygen' to generate it."
        raise FileNotFoundError(msg)
    logger.debug("Loading key from %s", path)
    with path.open("rb") as f:
        return f.read()


def load_public_key_file(path: Path | str) -> rsa.RSAPublicKey:
    """Load an RSA public key from a file."""
    return load_public_key(_read_key_file(Path(path)))


def load_private_key_file(
    path: Path | str, password: bytes | None = None
) -> rsa.RSAPrivateKey:
    """Load an RSA private key from a file."""
    return load_private_key(_read_key_file(Path(path)), password)


def max_wrap_size(public_key: rsa.RSAPublicKey) -> int:
    """Largest secret OAEP-SHA-256 can wrap under this key."""
    return public_key.key_size // 8 - 2 * OAEP_HASH_LEN - 2


class KeyPair(BaseModel):
    """Loaded RSA key material; either half may be absent."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    public_key: rsa.RSAPublicKey | None = None
    private_key: rsa.RSAPrivateKey | None = None

    @classmethod
    def generate(cls, key_size: int = MIN_RSA_KEY_SIZE) -> KeyPair:
        """Generate a fresh RSA key pair."""
        if key_size < MIN_RSA_KEY_SIZE:
            msg = f"RSA key size must be at least {MIN_RSA_KEY_SIZE} bits"
            raise KeyFormatError(msg)
        private_key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
        return cls(public_key=private_key.public_key(), private_key=private_key)

    @classmethod
    def from_der(
        cls, public_der: bytes | None = None, private_der: bytes | None = None
    ) -> KeyPair:
        """Build a key pair from encoded key bytes."""
        private_key = load_private_key(private_der) if private_der else None
        if public_der:
            public_key = load_public_key(public_der)
        elif private_key is not None:
            public_key = private_key.public_key()
        else:
            public_key = None
        return cls(public_key=public_key, private_key=private_key)

    def public_bytes(self) -> bytes:
        """Encode the public half as DER SubjectPublicKeyInfo."""
        if self.public_key is None:
            msg = "key pair has no public key"
            raise KeyFormatError(msg)
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def private_bytes(self) -> bytes:
        """Encode the private half as unencrypted DER PKCS#8."""
        if self.private_key is None:
            msg = "key pair has no private key"
            raise KeyFormatError(msg)
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

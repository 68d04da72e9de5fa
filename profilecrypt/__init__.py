# Hybrid RSA-OAEP / AES-GCM profile transport

from profilecrypt.client.client import ProfileClient
from profilecrypt.common.envelope import EnvelopeCodec
from profilecrypt.common.exceptions import (
    AuthenticationError,
    EnvelopeError,
    KeyFormatError,
    SerializationError,
    UnwrapError,
    WrapError,
)
from profilecrypt.common.key_wrapper import AsymmetricKeyWrapper
from profilecrypt.common.models import Envelope, Profile
from profilecrypt.common.payload_cipher import PayloadCipher

__all__ = [
    "AsymmetricKeyWrapper",
    "AuthenticationError",
    "Envelope",
    "EnvelopeCodec",
    "EnvelopeError",
    "KeyFormatError",
    "PayloadCipher",
    "Profile",
    "ProfileClient",
    "SerializationError",
    "UnwrapError",
    "WrapError",
]

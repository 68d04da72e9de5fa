# Common utilities
from profilecrypt.common.envelope import EnvelopeCodec as EnvelopeCodec
from profilecrypt.common.key_wrapper import (
    AsymmetricKeyWrapper as AsymmetricKeyWrapper,
)
from profilecrypt.common.keys import KeyPair as KeyPair
from profilecrypt.common.keys import load_private_key as load_private_key
from profilecrypt.common.keys import load_public_key as load_public_key
from profilecrypt.common.logging_utils import setup_logger as setup_logger
from profilecrypt.common.payload_cipher import PayloadCipher as PayloadCipher

__all__ = [
    "AsymmetricKeyWrapper",
    "EnvelopeCodec",
    "KeyPair",
    "PayloadCipher",
    "load_private_key",
    "load_public_key",
    "setup_logger",
]

"""
Pydantic models for envelopes and the transported profile record.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AeadPayload(BaseModel):
    """Nonce and ciphertext (with appended tag) produced by the payload cipher."""

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    ciphertext: bytes


class Envelope(BaseModel):
    """Raw envelope: wrapped symmetric key, nonce and AEAD ciphertext."""

    model_config = ConfigDict(frozen=True)

    wrapped_key: bytes
    nonce: bytes
    ciphertext: bytes

    @property
    def payload(self) -> AeadPayload:
        return AeadPayload(nonce=self.nonce, ciphertext=self.ciphertext)


class EnvelopeRequest(BaseModel):
    """Wire form of an envelope, each field standard base64."""

    model_config = ConfigDict(populate_by_name=True)

    encrypted_aes_key: str = Field(alias="encryptedAesKey")
    iv: str
    encrypted_data: str = Field(alias="encryptedData")


class Profile(BaseModel):
    name: str
    email: str
    phone: str | None = None
    age: int | None = Field(default=None, ge=0)
    address: str | None = None

import pytest
from pydantic import ValidationError

from profilecrypt.common.models import AeadPayload, EnvelopeRequest, Profile


def test_profile_model() -> None:
    profile = Profile(
        name="Alice",
        email="alice@example.com",
        phone="9387712929",
        age=39,
        address="Alice's address",
    )
    assert profile.name == "Alice"
    assert profile.email == "alice@example.com"
    assert profile.phone == "9387712929"
    assert profile.age == 39  # noqa: PLR2004
    assert profile.address == "Alice's address"


def test_profile_model_defaults() -> None:
    profile = Profile(name="Alice", email="alice@example.com")
    assert profile.phone is None
    assert profile.age is None
    assert profile.address is None


def test_profile_json_is_compact() -> None:
    profile = Profile(name="Alice", email="alice@example.com")
    assert profile.model_dump_json(exclude_none=True) == (
        '{"name":"Alice","email":"alice@example.com"}'
    )


def test_profile_validation() -> None:
    with pytest.raises(ValidationError):
        Profile(name="Alice", email="alice@example.com", age=-1)
    with pytest.raises(ValidationError):
        Profile.model_validate({"email": "alice@example.com"})


def test_envelope_request_dump_by_alias() -> None:
    request = EnvelopeRequest(encrypted_aes_key="a", iv="b", encrypted_data="c")
    assert request.model_dump(by_alias=True) == {
        "encryptedAesKey": "a",
        "iv": "b",
        "encryptedData": "c",
    }


def test_aead_payload_is_frozen() -> None:
    payload = AeadPayload(nonce=b"n" * 12, ciphertext=b"c" * 16)
    with pytest.raises(ValidationError):
        payload.nonce = b"x"  # type: ignore[misc]

import os

import pytest

from profilecrypt.common.exceptions import KeyFormatError, UnwrapError, WrapError
from profilecrypt.common.key_wrapper import AsymmetricKeyWrapper
from profilecrypt.common.keys import KeyPair


@pytest.fixture(scope="module")
def key_pair() -> KeyPair:
    return KeyPair.generate()


@pytest.fixture(scope="module")
def other_key_pair() -> KeyPair:
    return KeyPair.generate()


@pytest.fixture
def wrapper(key_pair: KeyPair) -> AsymmetricKeyWrapper:
    return AsymmetricKeyWrapper.from_key_pair(key_pair)


def test_wrap_unwrap_round_trip(wrapper: AsymmetricKeyWrapper) -> None:
    secret = os.urandom(16)
    wrapped = wrapper.wrap(secret)

    assert len(wrapped) == 256  # noqa: PLR2004
    assert wrapped != secret
    assert wrapper.unwrap(wrapped) == secret


def test_wrap_is_randomized(wrapper: AsymmetricKeyWrapper) -> None:
    secret = os.urandom(16)
    assert wrapper.wrap(secret) != wrapper.wrap(secret)


def test_wrap_accepts_maximum_secret(wrapper: AsymmetricKeyWrapper) -> None:
    secret = os.urandom(190)
    assert wrapper.unwrap(wrapper.wrap(secret)) == secret


@pytest.mark.parametrize("size", [191, 300])
def test_wrap_oversized_secret(wrapper: AsymmetricKeyWrapper, size: int) -> None:
    with pytest.raises(WrapError, match="exceeds"):
        wrapper.wrap(os.urandom(size))


def test_wrap_empty_secret(wrapper: AsymmetricKeyWrapper) -> None:
    with pytest.raises(WrapError):
        wrapper.wrap(b"")


def test_wrap_without_public_key() -> None:
    with pytest.raises(WrapError):
        AsymmetricKeyWrapper().wrap(os.urandom(16))


def test_wrap_with_explicit_public_key(
    key_pair: KeyPair, other_key_pair: KeyPair
) -> None:
    sender = AsymmetricKeyWrapper()
    receiver = AsymmetricKeyWrapper.from_key_pair(other_key_pair)
    secret = os.urandom(16)

    wrapped = sender.wrap(secret, other_key_pair.public_key)

    assert receiver.unwrap(wrapped) == secret
    with pytest.raises(UnwrapError):
        AsymmetricKeyWrapper.from_key_pair(key_pair).unwrap(wrapped)


def test_unwrap_with_wrong_private_key(
    wrapper: AsymmetricKeyWrapper, other_key_pair: KeyPair
) -> None:
    wrapped = wrapper.wrap(os.urandom(16))
    with pytest.raises(UnwrapError):
        wrapper.unwrap(wrapped, other_key_pair.private_key)


def test_unwrap_failures_are_indistinguishable(
    wrapper: AsymmetricKeyWrapper, other_key_pair: KeyPair
) -> None:
    wrapped = wrapper.wrap(os.urandom(16))
    corrupted = bytes([wrapped[0] ^ 0x01]) + wrapped[1:]

    with pytest.raises(UnwrapError) as wrong_key:
        wrapper.unwrap(wrapped, other_key_pair.private_key)
    with pytest.raises(UnwrapError) as bad_padding:
        wrapper.unwrap(corrupted)

    assert str(wrong_key.value) == str(bad_padding.value)


@pytest.mark.parametrize("wrapped", [b"", b"short", os.urandom(512)])
def test_unwrap_wrong_length(wrapper: AsymmetricKeyWrapper, wrapped: bytes) -> None:
    with pytest.raises(UnwrapError):
        wrapper.unwrap(wrapped)


def test_unwrap_without_private_key(key_pair: KeyPair) -> None:
    sender = AsymmetricKeyWrapper(public_key=key_pair.public_key)
    wrapped = sender.wrap(os.urandom(16))
    with pytest.raises(UnwrapError):
        sender.unwrap(wrapped)


def test_private_key_implies_public_key(key_pair: KeyPair) -> None:
    wrapper = AsymmetricKeyWrapper(private_key=key_pair.private_key)
    assert wrapper.public_key is not None
    assert wrapper.wrapped_key_size == 256  # noqa: PLR2004


def test_from_der(key_pair: KeyPair) -> None:
    wrapper = AsymmetricKeyWrapper.from_der(private_der=key_pair.private_bytes())
    secret = os.urandom(16)
    assert wrapper.unwrap(wrapper.wrap(secret)) == secret


def test_rejects_non_rsa_keys() -> None:
    with pytest.raises(KeyFormatError):
        AsymmetricKeyWrapper(public_key="not a key")  # type: ignore[arg-type]

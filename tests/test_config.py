import logging
from pathlib import Path
from typing import Any

from profilecrypt.common.config import Config


def test_config_defaults(monkeypatch: Any) -> None:
    monkeypatch.delenv("PROFILECRYPT_SERVER_HOST", raising=False)
    monkeypatch.delenv("PROFILECRYPT_SERVER_PORT", raising=False)
    monkeypatch.delenv("PROFILECRYPT_REQUEST_TIMEOUT", raising=False)

    config = Config()
    assert config.SERVER_HOST == "127.0.0.1"
    assert config.SERVER_PORT == 8086  # noqa: PLR2004
    assert config.SERVER_URL == "http://127.0.0.1:8086"
    assert config.PROFILE_ENDPOINT == "/api/profile"
    assert config.REQUEST_TIMEOUT == 10.0  # noqa: PLR2004
    assert config.MAX_CIPHERTEXT_LEN == 64 * 1024
    assert config.RSA_KEY_SIZE == 2048  # noqa: PLR2004
    assert config.LOG_LEVEL == logging.INFO


def test_config_env_overrides(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.setenv("PROFILECRYPT_SERVER_HOST", "0.0.0.0")  # noqa: S104
    monkeypatch.setenv("PROFILECRYPT_SERVER_PORT", "9000")
    monkeypatch.setenv("PROFILECRYPT_KEYS_DIR", str(tmp_path))

    config = Config()
    assert config.SERVER_URL == "http://0.0.0.0:9000"
    assert config.KEYS_DIR == tmp_path


def test_config_paths(monkeypatch: Any) -> None:
    monkeypatch.delenv("PROFILECRYPT_KEYS_DIR", raising=False)

    config = Config()
    expected_keys_dir = Path(__file__).parent.parent / "profilecrypt" / "keys"
    assert config.KEYS_DIR == expected_keys_dir
    assert config.PUBLIC_KEY_PATH == config.KEYS_DIR / "public_key.der"
    assert config.PRIVATE_KEY_PATH == config.KEYS_DIR / "private_key.der"

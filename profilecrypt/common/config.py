"""
Configuration settings for the profile transport.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path


class Config:
    """Central configuration class for all system settings."""

    def __init__(self) -> None:
        # Server settings
        self.SERVER_HOST: str = os.getenv("PROFILECRYPT_SERVER_HOST", "127.0.0.1")
        self.SERVER_PORT: int = int(os.getenv("PROFILECRYPT_SERVER_PORT", "8086"))
        self.SERVER_URL: str = f"http://{self.SERVER_HOST}:{self.SERVER_PORT}"
        self.PROFILE_ENDPOINT: str = "/api/profile"

        # Client settings
        self.REQUEST_TIMEOUT: float = float(
            os.getenv("PROFILECRYPT_REQUEST_TIMEOUT", "10")
        )

        # Envelope limits
        self.MAX_CIPHERTEXT_LEN: int = 64 * 1024  # 64KB, prevent DoS
        self.RSA_KEY_SIZE: int = 2048

        # File paths
        self.BASE_DIR: Path = Path(__file__).parent.parent
        self.KEYS_DIR: Path = Path(
            os.getenv("PROFILECRYPT_KEYS_DIR", str(self.BASE_DIR / "keys"))
        )
        self.PUBLIC_KEY_PATH: Path = self.KEYS_DIR / "public_key.der"
        self.PRIVATE_KEY_PATH: Path = self.KEYS_DIR / "private_key.der"

        # Logging
        self.LOG_LEVEL: int = logging.INFO

"""
Key generator for the receiver's RSA key pair.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from profilecrypt.common.config import Config
from profilecrypt.common.keys import KeyPair

logger = logging.getLogger(__name__)


class KeyGenerator:
    """Creates an RSA key pair and writes it as DER files."""

    def __init__(self, keys_dir: Path | None = None, key_size: int | None = None):
        config = Config()
        self.keys_dir = keys_dir or config.KEYS_DIR
        self.key_size = key_size or config.RSA_KEY_SIZE

    def generate_keys(self) -> KeyPair:
        """Generate and save public/private keys."""
        logger.info("Generating RSA-%s key pair...", self.key_size)
        key_pair = KeyPair.generate(self.key_size)

        private_path = self.keys_dir / "private_key.der"
        public_path = self.keys_dir / "public_key.der"
        self.keys_dir.mkdir(parents=True, exist_ok=True)

        # Owner-only from creation; O_CREAT mode does not apply to existing files
        fd = os.open(private_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        os.fchmod(fd, 0o600)
        with os.fdopen(fd, "wb") as f:
            f.write(key_pair.private_bytes())

        with public_path.open("wb") as f:
            f.write(key_pair.public_bytes())

        logger.info("Keys generated and saved:")
        logger.info("  Private: %s", private_path)
        logger.info("  Public: %s", public_path)
        logger.info("Keep the private key secure!")
        return key_pair

"""
Profile receiving server using FastAPI.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI

from profilecrypt.common.config import Config
from profilecrypt.common.envelope import EnvelopeCodec
from profilecrypt.common.key_wrapper import AsymmetricKeyWrapper
from profilecrypt.common.keys import load_private_key_file
from profilecrypt.common.logging_utils import setup_logger

from .routes import ProfileRoutes
from .services import ProfileService


class ProfileServer:
    """Receiver holding the private key and serving the profile endpoint."""

    def __init__(
        self,
        config: Config | None = None,
        log_level: int | None = None,
        private_key_path: Path | None = None,
        max_ciphertext_len: int | None = None,
        server_host: str | None = None,
        server_port: int | None = None,
    ):
        self.config = config or Config()
        self.logger = logging.getLogger(__name__)
        setup_logger(
            self.logger, log_level if log_level is not None else self.config.LOG_LEVEL
        )
        self.server_host = server_host or self.config.SERVER_HOST
        self.server_port = server_port or self.config.SERVER_PORT
        self.private_key_path = private_key_path or self.config.PRIVATE_KEY_PATH

        # Key material is loaded once and shared read-only by every request
        private_key = load_private_key_file(self.private_key_path)
        self.key_wrapper = AsymmetricKeyWrapper(private_key=private_key)
        self.codec = EnvelopeCodec(
            self.key_wrapper,
            max_ciphertext_len=(
                max_ciphertext_len
                if max_ciphertext_len is not None
                else self.config.MAX_CIPHERTEXT_LEN
            ),
        )
        self.service = ProfileService(self.codec, self.logger)

        self.app = FastAPI()
        self.routes = ProfileRoutes(self.service, self.config.PROFILE_ENDPOINT)
        self.routes.setup_routes(self.app)

        self.logger.info(
            "Loaded RSA-%s private key from %s",
            private_key.key_size,
            self.private_key_path,
        )
        self.logger.info(
            "Clients must set server_url='http://%s:%s' to connect",
            self.server_host,
            self.server_port,
        )

"""
Profile sending client.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import requests

from profilecrypt.common.config import Config
from profilecrypt.common.envelope import EnvelopeCodec
from profilecrypt.common.key_wrapper import AsymmetricKeyWrapper
from profilecrypt.common.keys import load_public_key_file
from profilecrypt.common.logging_utils import setup_logger
from profilecrypt.common.models import Profile

logger = logging.getLogger(__name__)


class ProfileClient:
    """Seals profiles under the server's public key and posts them."""

    def __init__(
        self,
        server_url: str | None = None,
        public_key_path: Path | str | None = None,
        timeout: float | None = None,
        log_level: int | None = None,
        session: requests.Session | None = None,
    ):
        self.config = Config()
        self.server_url = (server_url or self.config.SERVER_URL).rstrip("/")
        self.public_key_path = Path(public_key_path or self.config.PUBLIC_KEY_PATH)
        self.timeout = timeout if timeout is not None else self.config.REQUEST_TIMEOUT
        self.session = session or requests.Session()

        self.logger = logging.getLogger(__name__)
        setup_logger(
            self.logger, log_level if log_level is not None else self.config.LOG_LEVEL
        )

        public_key = load_public_key_file(self.public_key_path)
        self.codec = EnvelopeCodec(AsymmetricKeyWrapper(public_key=public_key))

    @property
    def endpoint(self) -> str:
        return f"{self.server_url}{self.config.PROFILE_ENDPOINT}"

    def build_request(self, profile: Profile) -> dict[str, Any]:
        """Marshal and seal a profile into a wire body."""
        plaintext = profile.model_dump_json().encode()
        return self.codec.seal_to_wire(plaintext)

    def send_profile(self, profile: Profile) -> str:
        """Send a sealed profile and return the server's reply."""
        body = self.build_request(profile)
        self.logger.info("Sending sealed profile to %s", self.endpoint)

        r = self.session.post(self.endpoint, json=body, timeout=self.timeout)
        r.raise_for_status()

        self.logger.info("Response: %s", r.text)
        return r.text

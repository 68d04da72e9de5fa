"""Business logic for receiving sealed profiles.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from profilecrypt.common.exceptions import ValidationError
from profilecrypt.common.models import Profile

if TYPE_CHECKING:
    from profilecrypt.common.envelope import EnvelopeCodec
    from profilecrypt.common.models import EnvelopeRequest


class ProfileService:
    """Opens incoming envelopes and decodes the profile record."""

    def __init__(self, codec: EnvelopeCodec, logger: logging.Logger | None = None):
        self.codec = codec
        self.logger = logger or logging.getLogger(__name__)

    def health(self) -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "timestamp": int(time.time())}

    def receive(self, request: EnvelopeRequest) -> Profile:
        """Open a wire envelope and parse the profile inside it."""
        plaintext = self.codec.open_from_wire(request)
        try:
            profile = Profile.model_validate_json(plaintext)
        except PydanticValidationError as e:
            msg = "invalid profile"
            raise ValidationError(msg) from e
        self.logger.info("Received profile: %s", profile)
        return profile

"""
Routes for the profile server.
"""

from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from profilecrypt.common.exceptions import EnvelopeError, ValidationError
from profilecrypt.common.models import EnvelopeRequest

from .services import ProfileService

GENERIC_FAILURE = "cannot process message"


class ProfileRoutes:
    """Handles FastAPI routes for the profile server."""

    def __init__(self, service: ProfileService, profile_endpoint: str):
        self.service = service
        self.profile_endpoint = profile_endpoint

    def setup_routes(self, app: FastAPI) -> None:
        """Setup API routes on the FastAPI app."""

        app.get("/health")(self.health)
        app.post(self.profile_endpoint, response_class=PlainTextResponse)(
            self.receive
        )

    async def health(self) -> dict[str, Any]:
        """Handle /health endpoint."""
        return self.service.health()

    def receive(self, req: EnvelopeRequest) -> str:
        """Handle the sealed profile endpoint."""
        try:
            profile = self.service.receive(req)
        except EnvelopeError as e:
            # Failure kinds collapse into one response; only the log tells them apart
            self.service.logger.debug(
                "Envelope rejected: %s: %s", type(e).__name__, e
            )
            raise HTTPException(e.status_code, GENERIC_FAILURE) from e
        except ValidationError as e:
            raise HTTPException(e.status_code, str(e)) from e
        return f"Received: {profile.name}"

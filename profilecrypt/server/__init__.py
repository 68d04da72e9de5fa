"""
Entry point for the profile server.
"""

import logging

import uvicorn

from profilecrypt.common.config import Config

from .core import ProfileServer


def start_server(config: Config | None = None) -> None:
    """Start the profile server."""
    if config is None:
        config = Config()
    logging.basicConfig(level=config.LOG_LEVEL)
    server = ProfileServer(config=config)
    uvicorn.run(server.app, host=server.server_host, port=server.server_port)

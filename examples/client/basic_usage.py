"""
Basic usage example of ProfileClient.

Run 'profilecrypt keygen' and 'profilecrypt serve' first, then this script
seals a profile under the server's public key and posts it.
"""

import logging
import sys

import requests

from profilecrypt.client.client import ProfileClient
from profilecrypt.common.models import Profile


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger(__name__)

    profile = Profile(
        name="Alice",
        email="alice@example.com",
        phone="9387712929",
        age=39,
        address="Alice's address",
    )

    try:
        client = ProfileClient(log_level=logging.INFO)
        response = client.send_profile(profile)
        logger.info("Server replied: %s", response)
    except (FileNotFoundError, requests.RequestException):
        logger.exception("Error")
        sys.exit(1)


if __name__ == "__main__":
    main()

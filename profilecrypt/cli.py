"""
Command-line interface for the profile transport.
"""

from __future__ import annotations

import os

import click
import requests

from profilecrypt.client.client import ProfileClient
from profilecrypt.common.config import Config
from profilecrypt.common.exceptions import EnvelopeError
from profilecrypt.common.models import Profile
from profilecrypt.server import start_server
from profilecrypt.server.keygen import KeyGenerator


@click.group()
def cli() -> None:
    """Hybrid-encrypted profile transport CLI"""


@cli.command()
@click.option(
    "--keys-dir",
    default=None,
    help="Directory to save keys (default: ./profilecrypt/keys)",
)
def keygen(keys_dir: str | None) -> None:
    """Generate the receiver's RSA key pair"""
    if keys_dir:
        os.environ["PROFILECRYPT_KEYS_DIR"] = keys_dir

    keygen = KeyGenerator()
    keygen.generate_keys()
    click.echo("Keys generated and saved")


@cli.command()
@click.option(
    "--keys-dir",
    default=None,
    help="Directory to load the private key from (default: ./profilecrypt/keys)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind server to (default: from PROFILECRYPT_SERVER_HOST env or 127.0.0.1)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind server to (default: from PROFILECRYPT_SERVER_PORT env or 8086)",
)
def serve(keys_dir: str | None, host: str | None, port: int | None) -> None:
    """Start the profile server"""
    # Set environment variables before building the config
    if keys_dir:
        os.environ["PROFILECRYPT_KEYS_DIR"] = keys_dir
    if host:
        os.environ["PROFILECRYPT_SERVER_HOST"] = host
    if port:
        os.environ["PROFILECRYPT_SERVER_PORT"] = str(port)

    config = Config()
    if not config.PRIVATE_KEY_PATH.exists():
        msg = (
            f"Private key not found at {config.PRIVATE_KEY_PATH}. "
            "Run 'profilecrypt keygen' first."
        )
        raise click.ClickException(msg)

    try:
        start_server(config)
    except EnvelopeError as e:
        msg = f"Cannot load private key {config.PRIVATE_KEY_PATH}: {e}"
        raise click.ClickException(msg) from e


@cli.command()
@click.option("--name", required=True, help="Profile name")
@click.option("--email", required=True, help="Profile email")
@click.option("--phone", default=None, help="Profile phone number")
@click.option("--age", default=None, type=click.IntRange(min=0), help="Profile age")
@click.option("--address", default=None, help="Profile address")
@click.option(
    "--server-url",
    default=None,
    help="Server base URL (default: http://127.0.0.1:8086)",
)
@click.option(
    "--keys-dir",
    default=None,
    help="Directory to load the public key from (default: ./profilecrypt/keys)",
)
def send(  # noqa: PLR0913
    name: str,
    email: str,
    phone: str | None,
    age: int | None,
    address: str | None,
    server_url: str | None,
    keys_dir: str | None,
) -> None:
    """Seal a profile and send it to the server"""
    if keys_dir:
        os.environ["PROFILECRYPT_KEYS_DIR"] = keys_dir

    profile = Profile(name=name, email=email, phone=phone, age=age, address=address)
    try:
        client = ProfileClient(server_url=server_url)
        response = client.send_profile(profile)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except EnvelopeError as e:
        msg = f"Cannot seal profile: {e}"
        raise click.ClickException(msg) from e
    except requests.RequestException as e:
        msg = f"Request failed: {e}"
        raise click.ClickException(msg) from e

    click.echo(response)


if __name__ == "__main__":
    cli()

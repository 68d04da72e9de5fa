from profilecrypt.client.client import ProfileClient

__all__ = ["ProfileClient"]

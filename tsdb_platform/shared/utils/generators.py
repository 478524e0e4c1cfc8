"""Identifier and token generators."""

import secrets

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()

# 64 random bytes, URL-safe base64 encoded (86 characters).
TOKEN_BYTES = 64


def generate_id() -> str:
    """Generate a collision-resistant unique identifier (CUID2) for a new record.

    Returns:
        A new CUID string.
    """
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def generate_token(nbytes: int = TOKEN_BYTES) -> str:
    """Generate an opaque bearer token for a new authorization."""
    return secrets.token_urlsafe(nbytes)

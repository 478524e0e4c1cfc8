"""Password hashing (bcrypt over a SHA-256 pre-hash).

bcrypt only looks at the first 72 bytes of its input; hashing with SHA-256
first gives it a fixed-length input so long passwords are not truncated.
Both functions are CPU-bound; async callers run them via asyncio.to_thread.
"""

import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    """Return a bcrypt hash (with embedded salt) of password."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Return True if password matches password_hash; False on mismatch or malformed hash."""
    try:
        return bool(bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8")))
    except (ValueError, TypeError):
        return False

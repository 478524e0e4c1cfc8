"""Credential hashing."""

from tsdb_platform.infrastructure.security.password import hash_password, verify_password

__all__ = ["hash_password", "verify_password"]

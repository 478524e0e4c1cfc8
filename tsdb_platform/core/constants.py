"""Core constants: well-known storage keys and shared literal values."""

# Key under which the onboarding-complete flag is stored (KV table row or Redis key suffix).
ONBOARDING_KEY = "onboarding_key"

# Stored representations of the flag in string-valued stores.
FLAG_TRUE = "true"
FLAG_FALSE = "false"

ONBOARDING_CONFLICT_MESSAGE = "onboarding has already been completed"

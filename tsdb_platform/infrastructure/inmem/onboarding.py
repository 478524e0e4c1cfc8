"""Process-local onboarding flag."""

import threading

from tsdb_platform.core.constants import ONBOARDING_KEY


class InMemoryOnboardingStatusStore:
    """Onboarding flag held in a dict; safe to call from multiple threads and tasks."""

    def __init__(self) -> None:
        self._kv: dict[str, bool] = {}
        self._lock = threading.Lock()

    async def is_onboarding_complete(self) -> bool:
        with self._lock:
            return self._kv.get(ONBOARDING_KEY, False)

    async def set_onboarding_complete(self, value: bool) -> None:
        with self._lock:
            self._kv[ONBOARDING_KEY] = bool(value)

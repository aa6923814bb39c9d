"""In-process lookup cache - one memo slot per lookup."""

from collections.abc import Callable
from typing import Any

from loguru import logger


class LookupCache:
    """Get-or-build memo table.

    A slot is filled by the first call for its key and handed back as the very
    same object afterwards. There is no expiry and no invalidation; drop the
    owning instance to start over. Concurrent first calls are not coordinated,
    so both may build and the last one to finish is kept.
    """

    def __init__(self):
        self._slots: dict[str, Any] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def get_or_build(self, key: str, builder: Callable[[], Any]) -> Any:
        if key not in self._slots:
            self._slots[key] = builder()
            logger.debug("Cache miss: {}", key)
        return self._slots[key]

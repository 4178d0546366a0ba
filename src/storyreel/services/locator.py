"""In-memory locator allocation for uploaded bytes."""

import logging
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class LocatorEntry:
    """Bytes held behind a locator."""

    data: bytes
    mime_type: str


class LocatorAllocator:
    """Hands out opaque ``blob:`` locators for uploaded file contents.

    Locators stay valid until revoked. Entries live for the process
    lifetime only.
    """

    SCHEME = "blob:storyreel/"

    def __init__(self) -> None:
        self._entries: Dict[str, LocatorEntry] = {}

    def __contains__(self, url: str) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def allocate(self, data: bytes, mime_type: str = "") -> str:
        """Store ``data`` and return its locator."""
        url = f"{self.SCHEME}{uuid.uuid4()}"
        self._entries[url] = LocatorEntry(data=data, mime_type=mime_type)
        logger.debug(f"Allocated {url} ({len(data)} bytes)")
        return url

    def resolve(self, url: str) -> Optional[LocatorEntry]:
        return self._entries.get(url)

    def revoke(self, url: str) -> bool:
        """Release the bytes behind ``url``.

        Returns:
            False if the locator was unknown or already revoked.
        """
        entry = self._entries.pop(url, None)
        if entry is None:
            return False
        logger.debug(f"Revoked {url}")
        return True

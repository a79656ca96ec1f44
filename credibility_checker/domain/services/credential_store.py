"""Session cache and persistence for the fact-check API key."""

import logging
from typing import Optional

from ..ports.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

API_KEY_STORAGE_KEY = "factcheck-api-key"


class CredentialStore:
    """Holds the API key for the session and persists it for later sessions."""

    def __init__(self, storage: KeyValueStorage, storage_key: str = API_KEY_STORAGE_KEY):
        self._storage = storage
        self._key = storage_key
        self._api_key: Optional[str] = None

    def load(self) -> Optional[str]:
        """Reload the persisted key into the session cache.

        Returns:
            The persisted key, or None if nothing was stored
        """
        saved = self._storage.get_item(self._key)
        if saved:
            self._api_key = saved
            logger.info(f"🔑 API key loaded from storage: {len(saved)} chars")
        return self._api_key

    def get_api_key(self) -> Optional[str]:
        """Return the cached key, falling back to persisted storage."""
        if not self._api_key:
            return self.load()
        return self._api_key

    def set_api_key(self, api_key: str) -> None:
        """Cache and persist a new key."""
        api_key = api_key.strip()
        if not api_key:
            raise ValueError("API key cannot be empty")
        self._api_key = api_key
        self._storage.set_item(self._key, api_key)
        logger.info("🔑 API key updated")

    def clear(self) -> None:
        """Forget the key for this session and in storage."""
        self._api_key = None
        self._storage.remove_item(self._key)

"""In-memory key-value storage, for tests and ephemeral sessions."""

from typing import Dict, Optional

from ...domain.ports.key_value_storage import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Keeps values in a dict for the lifetime of the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

"""In-process local storage connector implementation."""
from __future__ import annotations

import sys
from types import TracebackType
from typing import Any

if sys.version_info >= (3, 11):  # pragma: >=3.11 cover
    from typing import Self
else:  # pragma: <3.11 cover
    from typing_extensions import Self


class LocalConnector:
    """Connector that stores bytes in the local process's memory.

    Warning:
        This connector exists primarily for testing and offline use. Records
        are not shared with other processes.

    Args:
        store_dict: Dictionary to store data in. If not specified,
            a new empty dict will be generated.
    """

    def __init__(self, store_dict: dict[str, bytes] | None = None) -> None:
        self._store: dict[str, bytes] = {}
        if store_dict is not None:
            self._store = store_dict

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'

    def close(self) -> None:
        """Close the connector and clean up."""
        pass

    def config(self) -> dict[str, Any]:
        """Get the connector configuration."""
        return {'store_dict': self._store}

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> LocalConnector:
        """Create a new connector instance from a configuration."""
        return cls(**config)

    def evict(self, key: str) -> None:
        """Evict the object associated with the key."""
        self._store.pop(key, None)

    def exists(self, key: str) -> bool:
        """Check if an object associated with the key exists."""
        return key in self._store

    def get(self, key: str) -> bytes | None:
        """Get the bytes associated with the key."""
        return self._store.get(key, None)

    def set(self, key: str, obj: bytes) -> None:
        """Set the bytes associated with the key."""
        self._store[key] = obj

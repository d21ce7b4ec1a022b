"""Connector protocol."""
from __future__ import annotations

from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class Connector(Protocol):
    """Connector protocol for interfacing with a key-value store.

    The Connector protocol defines the interface for reading and writing
    raw bytes under caller-chosen string keys. Connection management,
    pooling and timeouts are the responsibility of the implementation.
    """

    def close(self) -> None:
        """Close the connector and clean up."""
        ...

    def config(self) -> dict[str, Any]:
        """Get the connector configuration.

        The configuration contains all the information needed to reconstruct
        the connector object.
        """
        ...

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> Connector:
        """Create a new connector instance from a configuration.

        Args:
            config: Configuration returned by `#!python .config()`.
        """
        ...

    def evict(self, key: str) -> None:
        """Evict the object associated with the key."""
        ...

    def exists(self, key: str) -> bool:
        """Check if an object associated with the key exists."""
        ...

    def get(self, key: str) -> bytes | None:
        """Get the bytes associated with the key.

        Args:
            key: Key associated with the object to retrieve.

        Returns:
            Stored bytes or `None` if the key does not exist.
        """
        ...

    def set(self, key: str, obj: bytes) -> None:
        """Set the bytes associated with the key, overwriting any value.

        Args:
            key: Key that the object will be associated with.
            obj: Bytes to store.
        """
        ...

"""Redis connector implementation."""
from __future__ import annotations

import sys
from types import TracebackType
from typing import Any

if sys.version_info >= (3, 11):  # pragma: >=3.11 cover
    from typing import Self
else:  # pragma: <3.11 cover
    from typing_extensions import Self

import redis


class RedisConnector:
    """Redis server connector.

    Args:
        hostname: Redis server hostname.
        port: Redis server port.
        clear: Remove all keys from the Redis server when
            [`close()`][siblings.connectors.redis.RedisConnector.close]
            is called. This will delete keys regardless of if they are
            endpoint records or not.
        kwargs: Extra keyword arguments to pass to
            [`redis.StrictRedis()`][redis.StrictRedis] (e.g.,
            `socket_timeout` to bound each read).
    """

    def __init__(
        self,
        hostname: str,
        port: int,
        clear: bool = False,
        **kwargs: Any,
    ) -> None:
        self.hostname = hostname
        self.port = port
        self.clear = clear
        self.kwargs = kwargs
        self._redis_client = redis.StrictRedis(
            host=hostname,
            port=port,
            **kwargs,
        )

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
        return (
            f'{self.__class__.__name__}(hostname={self.hostname}, '
            f'port={self.port})'
        )

    def close(self, clear: bool | None = None) -> None:
        """Close the connector and clean up.

        Warning:
            Passing `clear=True` will result in **ALL** keys in the Redis
            database being deleted.

        Args:
            clear: Remove all keys in the Redis server. Overrides the default
                value of `clear` provided when the
                [`RedisConnector`][siblings.connectors.redis.RedisConnector]
                was instantiated.
        """
        if self.clear if clear is None else clear:
            self._redis_client.flushdb()
        self._redis_client.close()

    def config(self) -> dict[str, Any]:
        """Get the connector configuration."""
        return {
            'hostname': self.hostname,
            'port': self.port,
            'clear': self.clear,
            **self.kwargs,
        }

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> RedisConnector:
        """Create a new connector instance from a configuration."""
        return cls(**config)

    def evict(self, key: str) -> None:
        """Evict the object associated with the key."""
        self._redis_client.delete(key)

    def exists(self, key: str) -> bool:
        """Check if an object associated with the key exists."""
        return bool(self._redis_client.exists(key))

    def get(self, key: str) -> bytes | None:
        """Get the bytes associated with the key.

        Raises:
            redis.exceptions.RedisError: If the server cannot be reached or
                the read times out.
        """
        return self._redis_client.get(key)

    def set(self, key: str, obj: bytes) -> None:
        """Set the bytes associated with the key."""
        self._redis_client.set(key, obj)

"""Region-aware sibling endpoint resolution."""
from __future__ import annotations

import logging
import sys
from types import TracebackType

if sys.version_info >= (3, 11):  # pragma: >=3.11 cover
    from typing import Self
else:  # pragma: <3.11 cover
    from typing_extensions import Self

from siblings.config import ConnectorConfig
from siblings.config import ResolverConfig
from siblings.connectors.protocols import Connector
from siblings.environment import Environment
from siblings.environment import local_mode
from siblings.exceptions import EndpointFetchError
from siblings.local import DEFAULT_LOCAL_FILE
from siblings.local import seed_local_overrides
from siblings.regions import Region
from siblings.registry import EndpointRegistry
from siblings.registry import Sibling
from siblings.registry import sibling_name
from siblings.store import EndpointStore
from siblings.utils.imports import get_object_path

logger = logging.getLogger(__name__)


class Resolver:
    """Resolve the base URLs of sibling services.

    Resolved records are kept in an in-memory
    [`EndpointRegistry`][siblings.registry.EndpointRegistry]. A sibling not
    yet in the registry is fetched from the backing store once and then
    served from memory for the lifetime of the resolver, or until
    [`flush()`][siblings.resolver.Resolver.flush] is called.

    A sibling that cannot be fetched resolves to `None` and a warning is
    logged. Misses are not cached so the next call queries the store again.

    Tip:
        A [`Resolver`][siblings.resolver.Resolver] instance can be used as a
        context manager which will automatically call
        [`close()`][siblings.resolver.Resolver.close] on exit.

        ```python
        from siblings.connectors.redis import RedisConnector
        from siblings.registry import Sibling
        from siblings.resolver import Resolver

        with Resolver(RedisConnector('localhost', 6379), me='credit') as r:
            r.resolve('august', 'IN')
            r.resolve(Sibling.MATRIX)
            r.me()
        ```

    Note:
        This class is thread-safe. The backing store is never queried while
        the registry lock is held. Two threads resolving the same cold
        sibling may both query the store; both write the same record.

    Args:
        connector: Connector to the backing store.
        me: Name of the service using the resolver, used by
            [`me()`][siblings.resolver.Resolver.me].
        environment: Environment used to namespace store keys. If `None`,
            read from `$X_ENV`.
        local: Seed the registry from `local_file`. If `None`, enabled when
            `$X_LOCAL` is `TRUE`.
        local_file: Path to the local endpoint overrides file.
        registry: Registry to use. A new empty registry is created if `None`.

    Raises:
        InvalidEnvironmentError: If the environment is not `prod` or `dev`.
    """

    def __init__(
        self,
        connector: Connector,
        *,
        me: str | None = None,
        environment: Environment | str | None = None,
        local: bool | None = None,
        local_file: str = DEFAULT_LOCAL_FILE,
        registry: EndpointRegistry | None = None,
    ) -> None:
        self.connector = connector
        self.identity = me
        self.store = EndpointStore(connector, environment)
        self.registry = EndpointRegistry() if registry is None else registry
        self.local = local_mode() if local is None else local
        self.local_file = local_file

        self.hits = 0
        self.misses = 0
        self.fetches = 0

        if self.local:
            seed_local_overrides(self.registry, self.local_file)

        logger.info(f'Initialized {self}')

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
            f'{self.__class__.__name__}(me={self.identity!r}, '
            f'environment={self.environment.value}, local={self.local}, '
            f'connector={self.connector!r})'
        )

    @property
    def environment(self) -> Environment:
        """Environment used to namespace store keys."""
        return self.store.environment

    def close(self) -> None:
        """Close the connector.

        Warning:
            Do not call this if the connector is shared with other code.
        """
        self.connector.close()

    def config(self) -> ResolverConfig:
        """Get the resolver configuration.

        Example:
            ```python
            from siblings.connectors.redis import RedisConnector

            connector = RedisConnector('localhost', 6379)
            with Resolver(connector, me='credit') as resolver:
                config = resolver.config()

            config.write_toml('siblings.toml')
            ```
        """
        return ResolverConfig(
            connector=ConnectorConfig(
                kind=get_object_path(type(self.connector)),
                options=self.connector.config(),
            ),
            me=self.identity,
            environment=self.environment.value,
            local=self.local,
            local_file=self.local_file,
        )

    @classmethod
    def from_config(cls, config: ResolverConfig) -> Resolver:
        """Create a new resolver instance from a configuration.

        The connector is created from the configuration and is owned by the
        resolver.
        """
        return cls(
            config.connector.get_connector(),
            me=config.me,
            environment=config.environment,
            local=config.local,
            local_file=config.local_file,
        )

    def resolve(
        self,
        sibling: str | Sibling,
        region: str | Region | None = None,
    ) -> str | None:
        """Resolve the address of a sibling.

        Args:
            sibling: Sibling name or well-known sibling.
            region: Optional region (e.g., `'IN'`, `'USA'`). The region
                override of the sibling is returned if it has one, otherwise
                the default address.

        Returns:
            The address or `None` if the sibling is not in the registry and \
            could not be fetched from the backing store.

        Raises:
            UnsupportedRegionError: If `region` is not a recognized region.
        """
        region_ = None if region is None else Region.parse(region)
        name = sibling_name(sibling)

        record = self.registry.get(sibling)
        if record is not None:
            self.hits += 1
            return record.resolve(region_)

        self.fetches += 1
        try:
            record = self.store.fetch(sibling)
        except EndpointFetchError as e:
            self.misses += 1
            logger.warning(f'Endpoint of {name} could not be fetched: {e}')
            return None

        if record is None:
            self.misses += 1
            logger.warning(
                f'Endpoint of {name} not found in the backing store at key '
                f'{self.store.key(sibling)}',
            )
            return None

        self.registry.put(sibling, record)
        return record.resolve(region_)

    def me(self, region: str | Region | None = None) -> str | None:
        """Resolve the address of this service.

        Returns:
            The address or `None` if no identity was configured or the \
            identity could not be resolved.

        Raises:
            UnsupportedRegionError: If `region` is not a recognized region.
        """
        if self.identity is None:
            return None
        return self.resolve(self.identity, region)

    def flush(self) -> None:
        """Remove all resolved records.

        The next resolution of each sibling queries the backing store again.
        Local endpoint overrides are removed as well.
        """
        self.registry.flush()
        logger.info('Flushed resolved sibling endpoints')

"""Resolver configuration model."""
from __future__ import annotations

import pathlib
import sys
from typing import Any
from typing import Dict  # noqa: UP035
from typing import Literal
from typing import Optional

if sys.version_info >= (3, 11):  # pragma: >=3.11 cover
    from typing import Self
else:  # pragma: <3.11 cover
    from typing_extensions import Self

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from siblings.connectors.protocols import Connector
from siblings.local import DEFAULT_LOCAL_FILE
from siblings.utils.config import dump
from siblings.utils.config import load
from siblings.utils.imports import import_from_path

_KNOWN_CONNECTORS = {
    'siblings.connectors.local.LocalConnector',
    'siblings.connectors.redis.RedisConnector',
}


class ConnectorConfig(BaseModel):
    """Connector configuration.

    Example:
        ```python
        from siblings.config import ConnectorConfig

        config = ConnectorConfig(
            kind='redis',
            options={'hostname': 'localhost', 'port': 6379},
        )
        connector = config.get_connector()
        ```

    Attributes:
        kind: Fully-qualified path used to import a
            [`Connector`][siblings.connectors.protocols.Connector] type or a
            shortened name for a builtin connector. E.g., `'redis'` or
            `'RedisConnector'` are valid shortcuts for
            `'siblings.connectors.redis.RedisConnector'`.
        options: Keyword arguments to pass to the connector constructor.
    """

    model_config = ConfigDict(extra='forbid')

    kind: str
    options: Dict[str, Any] = Field(default_factory=dict)  # noqa: UP006

    def get_connector_type(self) -> type[Connector]:
        """Resolve the class type for the specified connector.

        `kind` is first imported as a fully-qualified path. If that fails,
        it is matched case-insensitively against the class names of the
        builtin connectors, with or without the `connector` suffix.

        Raises:
            ValueError: If `kind` failed to import and does not match a
                builtin connector.
        """
        try:
            return import_from_path(self.kind)
        except ImportError as e:
            for path in _KNOWN_CONNECTORS:
                _, name = path.rsplit('.', 1)
                name = name.lower()
                choices = [name, name.replace('connector', '')]
                if self.kind.lower() in choices:
                    return import_from_path(path)
            raise ValueError(f'Unknown connector type "{self.kind}".') from e

    def get_connector(self) -> Connector:
        """Get the connector specified by the configuration."""
        connector_type = self.get_connector_type()
        return connector_type(**self.options)


class ResolverConfig(BaseModel):
    """Resolver configuration.

    Tip:
        See the [`Resolver`][siblings.resolver.Resolver] parameters for more
        information about each configuration option. Options left as `None`
        are read from the process environment when the resolver is created.

    Attributes:
        connector: Backing store connector configuration.
        me: Name of the service using the resolver.
        environment: Environment used to namespace store keys.
        local: Seed the registry with local endpoint overrides.
        local_file: Path to the local endpoint overrides file.
    """

    model_config = ConfigDict(extra='forbid')

    connector: ConnectorConfig
    me: Optional[str] = None  # noqa: UP007
    environment: Optional[Literal['prod', 'dev']] = None  # noqa: UP007
    local: Optional[bool] = None  # noqa: UP007
    local_file: str = DEFAULT_LOCAL_FILE

    @classmethod
    def from_toml(cls, filepath: str | pathlib.Path) -> Self:
        """Create a configuration from a TOML file.

        Example:
            ```toml title="siblings.toml"
            me = "credit"
            environment = "prod"

            [connector]
            kind = "redis"

            [connector.options]
            hostname = "localhost"
            port = 6379
            ```

        Args:
            filepath: Path to TOML file to load.
        """
        with open(filepath, 'rb') as f:
            return load(cls, f)

    def write_toml(self, filepath: str | pathlib.Path) -> None:
        """Write the configuration to a TOML file.

        Args:
            filepath: Path to TOML file to write.
        """
        filepath = pathlib.Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'wb') as f:
            dump(self, f)

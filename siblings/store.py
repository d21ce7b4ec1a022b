"""Backing-store adapter for endpoint records."""
from __future__ import annotations

import logging

from pydantic import ValidationError

from siblings.connectors.protocols import Connector
from siblings.endpoint import EndpointRecord
from siblings.environment import Environment
from siblings.exceptions import EndpointDecodeError
from siblings.exceptions import EndpointFetchError
from siblings.registry import Sibling
from siblings.registry import sibling_name

logger = logging.getLogger(__name__)

KEY_PREFIX = 'ep-'


class EndpointStore:
    """Reads and writes endpoint records in a shared key-value store.

    Records are stored as JSON under `ep-<name>`. In the
    [`DEV`][siblings.environment.Environment.DEV] environment keys are
    prefixed with `dev-` so dev and prod records can share a store.

    Args:
        connector: Connector to the backing store. The connector is not
            closed by this adapter.
        environment: Environment used to namespace keys. Defaults to the
            value of `$X_ENV`.
    """

    def __init__(
        self,
        connector: Connector,
        environment: Environment | str | None = None,
    ) -> None:
        self.connector = connector
        self.environment = (
            Environment.from_env()
            if environment is None
            else Environment.parse(environment)
        )

    def __repr__(self) -> str:
        return (
            f'{self.__class__.__name__}(connector={self.connector!r}, '
            f'environment={self.environment.value})'
        )

    def key(self, sibling: str | Sibling) -> str:
        """Get the namespaced store key for a sibling."""
        name = sibling_name(sibling)
        return self.environment.namespace(f'{KEY_PREFIX}{name}')

    def fetch(self, sibling: str | Sibling) -> EndpointRecord | None:
        """Fetch the endpoint record of a sibling.

        Args:
            sibling: Sibling name.

        Returns:
            The record or `None` if no record is stored for the sibling.

        Raises:
            EndpointFetchError: If the connector fails to read the key.
            EndpointDecodeError: If the stored payload is not a JSON object
                with a string `default` field.
        """
        key = self.key(sibling)
        logger.info(f'Fetching endpoint from key {key}')
        try:
            data = self.connector.get(key)
        except Exception as e:
            raise EndpointFetchError(key, f'{type(e).__name__}: {e}') from e

        if data is None:
            return None

        try:
            return EndpointRecord.from_json(data)
        except ValidationError as e:
            raise EndpointDecodeError(
                key,
                f'malformed payload ({e.error_count()} validation errors)',
            ) from e

    def put(self, sibling: str | Sibling, record: EndpointRecord) -> str:
        """Write the endpoint record of a sibling.

        Returns:
            The namespaced key the record was written to.
        """
        key = self.key(sibling)
        self.connector.set(key, record.to_json())
        return key

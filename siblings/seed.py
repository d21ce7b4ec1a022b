"""Bulk-load endpoint records into the backing store."""
from __future__ import annotations

import json
import logging
import pathlib
from typing import Any
from typing import Mapping

from pydantic import ValidationError

from siblings.endpoint import EndpointRecord
from siblings.environment import Environment
from siblings.exceptions import EndpointDecodeError
from siblings.store import EndpointStore

logger = logging.getLogger(__name__)

PROD_SEED_FILE = 'siblings.json'
DEV_SEED_FILE = 'siblings-dev.json'


def default_seed_file(environment: Environment) -> str:
    """Get the default seed file name for an environment."""
    if environment is Environment.DEV:
        return DEV_SEED_FILE
    return PROD_SEED_FILE


def load_endpoints(
    store: EndpointStore,
    data: Mapping[str, Mapping[str, Any]],
) -> list[str]:
    """Write endpoint records to the backing store.

    Every entry is validated before any record is written so a document
    with a malformed entry leaves the store untouched.

    Example:
        ```python
        load_endpoints(
            store,
            {'august': {'default': 'https://a', 'in': 'https://a-in'}},
        )
        ```

    Args:
        store: Store adapter to write to.
        data: Mapping of sibling name to a mapping with a required
            `default` address and optional `in` and `us` overrides.

    Returns:
        Namespaced keys written, in the order of `data`.

    Raises:
        EndpointDecodeError: If any entry is not a valid endpoint record.
    """
    records: dict[str, EndpointRecord] = {}
    for name, entry in data.items():
        try:
            records[name] = EndpointRecord.model_validate(entry)
        except ValidationError as e:
            raise EndpointDecodeError(
                store.key(name),
                f'invalid seed entry ({e.error_count()} validation errors)',
            ) from e

    keys = []
    for name, record in records.items():
        key = store.put(name, record)
        logger.info(f'Stored endpoint of {name} at key {key}')
        keys.append(key)
    return keys


def load_endpoints_file(
    store: EndpointStore,
    filepath: str | pathlib.Path,
) -> list[str]:
    """Write endpoint records from a JSON file to the backing store.

    Args:
        store: Store adapter to write to.
        filepath: Path to a JSON document in the format accepted by
            [`load_endpoints()`][siblings.seed.load_endpoints].

    Returns:
        Namespaced keys written.

    Raises:
        ValueError: If the document is not a JSON object.
        EndpointDecodeError: If any entry is not a valid endpoint record.
    """
    with open(filepath) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(
            f'Expected a JSON object mapping sibling names to endpoints in '
            f'{filepath}. Got {type(data).__name__}.',
        )
    return load_endpoints(store, data)

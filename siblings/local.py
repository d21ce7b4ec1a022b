"""Local development endpoint overrides.

In local mode, siblings run on the developer's machine and their ports are
listed in a dotenv-style file (`svc.env` by default):

```
matrix=9001
bank-statement=9002
credit_score=9003
```

Each entry becomes a record whose default address is
`http://localhost:<port>`. Underscores in names are replaced with hyphens.
"""
from __future__ import annotations

import logging
import os

from dotenv import dotenv_values

from siblings.endpoint import EndpointRecord
from siblings.registry import EndpointRegistry

logger = logging.getLogger(__name__)

DEFAULT_LOCAL_FILE = 'svc.env'
MAX_PORT = 65535


def normalize_name(key: str) -> str:
    """Normalize an override key to a sibling name."""
    return key.strip().replace('_', '-')


def local_endpoint(port: int) -> EndpointRecord:
    """Create a record pointing at a port on the loopback interface."""
    return EndpointRecord(default=f'http://localhost:{port}')


def _parse_port(value: str | None) -> int | None:
    if value is None:
        return None
    value = value.strip()
    if not value.isdigit():
        return None
    port = int(value)
    return port if 0 < port <= MAX_PORT else None


def read_local_overrides(
    path: str = DEFAULT_LOCAL_FILE,
) -> dict[str, EndpointRecord]:
    """Read local endpoint overrides from a dotenv-style file.

    Entries with a missing or invalid port are skipped and logged.

    Args:
        path: Path to the overrides file.

    Returns:
        Mapping of sibling name to record. Empty if `path` does not exist.
    """
    if not os.path.isfile(path):
        logger.debug(f'No local endpoint overrides found at {path}')
        return {}

    overrides: dict[str, EndpointRecord] = {}
    for key, value in dotenv_values(path).items():
        port = _parse_port(value)
        if port is None:
            logger.warning(
                f'Skipping local endpoint override {key}={value!r} in '
                f'{path}: value is not a valid port',
            )
            continue
        overrides[normalize_name(key)] = local_endpoint(port)
    return overrides


def seed_local_overrides(
    registry: EndpointRegistry,
    path: str = DEFAULT_LOCAL_FILE,
) -> int:
    """Populate a registry with local endpoint overrides.

    Args:
        registry: Registry to populate.
        path: Path to the overrides file.

    Returns:
        Number of overrides added to the registry.
    """
    overrides = read_local_overrides(path)
    for name, record in overrides.items():
        registry.put(name, record)
    if overrides:
        logger.info(f'Seeded {len(overrides)} local endpoint(s) from {path}')
    return len(overrides)

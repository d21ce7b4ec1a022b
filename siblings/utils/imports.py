"""Resolve imports by string paths."""
from __future__ import annotations

import importlib
from typing import Any


def get_object_path(obj: Any) -> str:
    """Get the fully qualified path of an object.

    Example:
        ```python
        >>> from siblings.connectors.redis import RedisConnector
        >>> get_object_path(RedisConnector)
        'siblings.connectors.redis.RedisConnector'
        ```
    """
    return f'{obj.__module__}.{obj.__qualname__}'


def import_from_path(path: str) -> Any:
    """Import an object via its fully qualified path.

    Args:
        path: Fully qualified path of object to import.

    Returns:
        Imported object.

    Raises:
        ImportError: If the path has no module component or an object at
            the `path` is not found.
    """
    module_path, _, name = path.rpartition('.')
    if len(module_path) == 0:
        raise ImportError(
            f'Object path must contain at least one module. Got {path}',
        )
    module = importlib.import_module(module_path)
    try:
        return getattr(module, name)
    except AttributeError as e:
        raise ImportError(f'Cannot import {name} from {module_path}.') from e

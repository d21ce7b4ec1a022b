"""Region-aware endpoint resolution for sibling services."""
from __future__ import annotations

import importlib.metadata as importlib_metadata

from siblings.endpoint import EndpointRecord
from siblings.environment import Environment
from siblings.exceptions import UnsupportedRegionError
from siblings.regions import Region
from siblings.registry import EndpointRegistry
from siblings.registry import Sibling
from siblings.resolver import Resolver

__all__ = [
    'EndpointRecord',
    'EndpointRegistry',
    'Environment',
    'Region',
    'Resolver',
    'Sibling',
    'UnsupportedRegionError',
]

__version__ = importlib_metadata.version('siblings')
